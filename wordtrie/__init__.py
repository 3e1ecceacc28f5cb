"""wordtrie -- prefix trie word index."""

from wordtrie.constants import DEFAULT_SUGGESTION_LIMIT, FALLBACK_WORDS, WORD_LIST_PATHS
from wordtrie.trie import Trie, TrieNode
from wordtrie.wordlist import WordList
from wordtrie.cli import execute, run_shell

__all__ = [
    "DEFAULT_SUGGESTION_LIMIT",
    "FALLBACK_WORDS",
    "WORD_LIST_PATHS",
    "Trie",
    "TrieNode",
    "WordList",
    "execute",
    "run_shell",
]
