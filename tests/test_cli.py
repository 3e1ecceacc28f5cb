import pytest

import wordtrie_shell
from wordtrie import wordlist
from wordtrie.cli import HELP_TEXT, execute, run_shell
from wordtrie.trie import Trie


@pytest.fixture
def trie():
    return Trie().extend(["car", "cat"])


def test_add_and_find(trie):
    assert execute(trie, "add dog door") == "  Added 'dog'\n  Added 'door'"
    assert execute(trie, "find dog") == "  'dog' found"
    assert execute(trie, "find do") == "  'do' not found"


def test_prefix(trie):
    assert execute(trie, "prefix ca") == "  prefix 'ca' present"
    assert execute(trie, "prefix cb") == "  prefix 'cb' absent"


def test_remove(trie):
    assert execute(trie, "remove cat") == "  Removed 'cat'"
    assert execute(trie, "remove cat") == "  'cat' not stored"
    assert trie.find("car") is True


def test_complete(trie):
    assert execute(trie, "complete c") == "  car\n  cat"
    assert execute(trie, "complete c", limit=1) == "  car"
    assert execute(trie, "complete z") == "  (no matches)"


def test_stats_and_clear(trie):
    assert execute(trie, "stats") == "2 words, 5 nodes"
    assert execute(trie, "clear") == "Trie cleared."
    assert len(trie) == 0


def test_bad_input(trie):
    assert execute(trie, "") == ""
    assert execute(trie, "find") == "  Usage: find WORD"
    assert execute(trie, "remove a b") == "  Usage: remove WORD"
    assert execute(trie, "add") == "  Usage: add WORD [WORD...]"
    assert "Unknown command 'frobnicate'" in execute(trie, "frobnicate")
    assert execute(trie, "HELP") == HELP_TEXT


def test_quit_commands(trie):
    for cmd in ("quit", "exit", "done"):
        assert execute(trie, cmd) is None


def test_run_shell_until_quit(trie, capsys):
    lines = iter(["add bat", "find bat", "quit", "add never"])
    run_shell(trie, read=lambda prompt: next(lines))

    out = capsys.readouterr().out
    assert "'bat' found" in out
    assert "3 words stored." in out
    assert trie.find("never") is False


def test_run_shell_stops_on_eof(trie, capsys):
    def read(prompt):
        raise EOFError

    run_shell(trie, read=read)
    assert "2 words stored." in capsys.readouterr().out


def test_main_runs_shell(tmp_path, monkeypatch):
    path = tmp_path / "words.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")
    seen = {}

    def fake_shell(trie, limit):
        seen["words"] = trie.complete("", limit=None)
        seen["limit"] = limit

    monkeypatch.setattr(wordtrie_shell, "run_shell", fake_shell)
    assert wordtrie_shell.main(["--words", str(path), "--limit", "3"]) == 0
    assert seen == {"words": ["alpha", "beta"], "limit": 3}


def test_main_reports_unreadable_word_list(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(wordlist, "WORD_LIST_PATHS", [])
    monkeypatch.setattr(wordtrie_shell, "run_shell", lambda trie, limit: None)

    # a directory exists but can't be opened as a file
    assert wordtrie_shell.main(["--words", str(tmp_path)]) == 1
    assert "Could not read word list" in caplog.text
