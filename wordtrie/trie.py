"""Prefix trie with exact/prefix lookups and pruning removal."""

from __future__ import annotations

import logging
from typing import Iterable

from wordtrie.constants import DEFAULT_SUGGESTION_LIMIT, LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """Prefix trie for word storage, lookup and removal.

    Keys are compared symbol by symbol with no normalization.  The root
    node is never marked as a word and never pruned, so the empty string
    can't be stored.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def add(self, word: str) -> Trie:
        """Insert ``word``, creating missing nodes.  Returns ``self``."""
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if node is not self.root and not node.is_word:
            node.is_word = True
            self._size += 1
        return self

    def extend(self, words: Iterable[str]) -> Trie:
        for word in words:
            self.add(word)
        return self

    def find(self, word: str, is_prefix_match: bool = False) -> bool:
        """Return True if ``word`` is stored.

        With ``is_prefix_match`` the walk only has to succeed: any stored
        word starting with ``word`` (or the empty prefix) is a match.
        """
        node = self._walk(word)
        if node is None:
            return False
        return is_prefix_match or node.is_word

    def remove(self, word: str) -> bool:
        """Remove ``word`` and prune nodes no other word needs.

        Returns True only if ``word`` was stored.  Pruning runs from the
        deepest node upward and stops at the first node that still has
        children or ends another word.
        """
        path: list[tuple[TrieNode, str]] = []
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child

        if not node.is_word:
            return False
        node.is_word = False
        self._size -= 1

        for parent, ch in reversed(path):
            child = parent.children[ch]
            if child.children or child.is_word:
                break
            del parent.children[ch]
        return True

    def complete(self, prefix: str = "", limit: int | None = DEFAULT_SUGGESTION_LIMIT) -> list[str]:
        """Stored words starting with ``prefix``, in symbol order.

        At most ``limit`` words are returned; ``None`` means no limit.
        """
        start = self._walk(prefix)
        if start is None or limit == 0:
            return []

        found: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, text = stack.pop()
            if node.is_word:
                found.append(text)
                if limit is not None and len(found) >= limit:
                    break
            # reversed so the smallest symbol is popped first
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], text + ch))
        return found

    def clear(self) -> None:
        log.debug("Clearing trie with %d words", self._size)
        self.root = TrieNode()
        self._size = 0

    def node_count(self) -> int:
        """Number of nodes, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.find(word)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Trie({self._size} words)"
