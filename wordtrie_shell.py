#!/usr/bin/env python3
"""
Wordtrie Shell

Loads a word list into a prefix trie and opens an interactive shell
for adding, finding, completing and removing words.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordtrie import constants
from wordtrie.cli import run_shell
from wordtrie.wordlist import WordList


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger(constants.LOGGER_NAME)


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Wordtrie -- interactive prefix trie over a word list",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--limit", type=int, default=constants.DEFAULT_SUGGESTION_LIMIT,
                        help="Max words shown by 'complete'")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        words = WordList(args.words)
    except OSError as exc:
        log.error("Could not read word list: %s", exc)
        return 1

    run_shell(words.trie, limit=args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
