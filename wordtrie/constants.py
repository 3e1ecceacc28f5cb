"""Shared settings for the wordtrie package."""

from __future__ import annotations

import os

LOGGER_NAME = "wordtrie"

# Max words returned by Trie.complete() unless the caller says otherwise
DEFAULT_SUGGESTION_LIMIT = 10

# Word lists tried in order when no explicit path is given
WORD_LIST_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

FALLBACK_WORDS: tuple[str, ...] = (
    "a", "an", "and", "are", "as", "at", "be", "but", "by", "can",
    "car", "card", "care", "cat", "do", "dog", "for", "from", "go",
    "had", "has", "have", "he", "her", "his", "in", "is", "it", "not",
    "of", "on", "or", "she", "that", "the", "this", "to", "was", "we",
    "with", "word", "you",
)
