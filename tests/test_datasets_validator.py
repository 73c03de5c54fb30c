from pathlib import Path

import pytest
from wordmastermind.datasets import (
    DEFAULT_WORDLIST, load_legal_words, load_wordlist, pretty_summary, read_lines, validate_wordlist,
)
from wordmastermind.engine import EmptyWordListError, is_legal


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_legal_words_filters_and_keeps_order():
    lines = ["crane\n", "hello\n", "night\r\n", "abc", " plant", "stone"]
    assert load_legal_words(lines) == ("crane", "night", "stone")


def test_load_wordlist_from_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "Crane", "aabbc", "", "light"])
    assert load_wordlist(p) == ("crane", "light")


def test_load_wordlist_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_wordlist(tmp_path / "nope.txt")


def test_load_wordlist_no_legal_words(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["hello", "abc", "12345"])
    with pytest.raises(EmptyWordListError):
        load_wordlist(p)


def test_read_lines_strips_line_endings(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"crane\r\nlight\n")
    assert read_lines(p) == ["crane", "light"]


def test_default_wordlist_is_all_legal():
    lines = read_lines(DEFAULT_WORDLIST)
    assert lines
    assert all(is_legal(w) for w in lines)


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "word-list.txt"
    _write(p, ["crane", "light", "stone"])

    rep = validate_wordlist(p)
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["invalid_lines"] == 0
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "legal=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_problems(tmp_path: Path):
    p = tmp_path / "word-list.txt"
    _write(p, ["crane", "crane", "hello", "???"])

    rep = validate_wordlist(p)
    assert rep["passed"] is True
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_or_empty(tmp_path: Path):
    rep = validate_wordlist(tmp_path / "missing.txt")
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)

    p = tmp_path / "empty.txt"
    p.write_text("", encoding="utf-8")
    rep = validate_wordlist(p)
    assert rep["passed"] is False
    assert any("0 legal words" in msg for msg in rep["issues"])


def test_load_wordlist_skips_undecodable_lines(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"crane\ncaf\xe9s\nlight\n")
    assert load_wordlist(p) == ("crane", "light")

    rep = validate_wordlist(p)
    assert rep["count"] == 2 and rep["invalid_lines"] == 1
