"""Interactive terminal shell over a Trie."""

from __future__ import annotations

from typing import Callable

from wordtrie.constants import DEFAULT_SUGGESTION_LIMIT
from wordtrie.trie import Trie

HELP_TEXT = """Commands:
  add WORD [WORD...]    -- store one or more words
  find WORD             -- exact lookup
  prefix PREFIX         -- is any stored word starting with PREFIX?
  remove WORD           -- delete a stored word
  complete [PREFIX]     -- list stored words starting with PREFIX
  stats                 -- word and node counts
  clear                 -- remove every word
  help                  -- show this text
  quit                  -- leave the shell"""

QUIT_COMMANDS = {"quit", "exit", "done"}


def execute(trie: Trie, line: str, limit: int | None = DEFAULT_SUGGESTION_LIMIT) -> str | None:
    """Run one shell command and return what it prints.

    Returns None when the command asks to leave the shell.
    """
    parts = line.split()
    if not parts:
        return ""

    cmd, args = parts[0].lower(), parts[1:]
    if cmd in QUIT_COMMANDS:
        return None
    if cmd == "help":
        return HELP_TEXT
    if cmd == "stats":
        return f"{len(trie):,} words, {trie.node_count():,} nodes"
    if cmd == "clear":
        trie.clear()
        return "Trie cleared."
    if cmd == "complete":
        prefix = args[0] if args else ""
        matches = trie.complete(prefix, limit)
        return "\n".join(f"  {w}" for w in matches) if matches else "  (no matches)"

    if cmd == "add":
        if not args:
            return "  Usage: add WORD [WORD...]"
        for word in args:
            trie.add(word)
        return "\n".join(f"  Added '{w}'" for w in args)

    if cmd in ("find", "prefix", "remove"):
        if len(args) != 1:
            return f"  Usage: {cmd} WORD"
        word = args[0]
        if cmd == "find":
            return f"  '{word}' found" if trie.find(word) else f"  '{word}' not found"
        if cmd == "prefix":
            present = trie.find(word, is_prefix_match=True)
            return f"  prefix '{word}' {'present' if present else 'absent'}"
        return f"  Removed '{word}'" if trie.remove(word) else f"  '{word}' not stored"

    return f"  Unknown command '{cmd}'.  Type 'help' for the command list."


def run_shell(
    trie: Trie,
    read: Callable[[str], str] = input,
    limit: int | None = DEFAULT_SUGGESTION_LIMIT,
) -> None:
    """Read commands until quit or end of input."""
    print("\n" + "=" * 60)
    print("  WORDTRIE -- Interactive Shell")
    print("=" * 60)
    print()
    print(HELP_TEXT)
    print()

    while True:
        try:
            line = read("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        out = execute(trie, line, limit)
        if out is None:
            break
        if out:
            print(out)

    print(f"\n{len(trie):,} words stored.")
