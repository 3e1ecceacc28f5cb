"""Word list loading into a trie."""

from __future__ import annotations

import logging
import os

from wordtrie.constants import FALLBACK_WORDS, LOGGER_NAME, WORD_LIST_PATHS
from wordtrie.trie import Trie

log = logging.getLogger(LOGGER_NAME)


class WordList:
    """Trie filled from the first word list file that can be found."""

    def __init__(self, path: str | None = None, trie: Trie | None = None):
        self.trie = trie if trie is not None else Trie()
        self.source: str | None = None
        self._load(path)

    def _load(self, path: str | None) -> None:
        search_paths: list[str] = []
        if path:
            search_paths.append(path)
        search_paths.extend(WORD_LIST_PATHS)

        for candidate in search_paths:
            if os.path.exists(candidate):
                count = self.load_file(candidate)
                if count:
                    log.info("Loaded %s words from %s", f"{count:,}", candidate)
                    self.source = candidate
                    return
                log.debug("No words in %s, trying next path", candidate)

        log.warning("No word list found -- using built-in fallback words.")
        self.trie.extend(FALLBACK_WORDS)

    def load_file(self, path: str) -> int:
        """Add every word in ``path`` to the trie.

        One word per line; blank lines and ``#`` comments are skipped.
        Returns the number of words read.
        """
        count = 0
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if not word or word.startswith("#"):
                    continue
                self.trie.add(word)
                count += 1
        return count

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
