from pathlib import Path

import pytest
from wordscramble.datasets import (
    START_WORDS_PATH, WordListUnavailable, load_word_list, pretty_summary, validate_wordlist,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "airplane", "notebook"])

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "start.txt" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'cat' is too short to be a root, 'Worm' is not lowercase, '???' invalid chars
    p = tmp_path / "start.txt"
    p.write_text("silkworm\ncat\nWorm\n???\nsilkworm\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_bundled_wordlist_is_valid():
    rep = validate_wordlist(str(START_WORDS_PATH))
    assert rep["passed"] is True, rep["issues"]


def test_load_word_list_drops_blanks(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\r\n\r\nairplane\n", encoding="utf-8")
    assert load_word_list(p) == ["silkworm", "airplane"]


def test_load_word_list_missing_is_fatal(tmp_path: Path):
    with pytest.raises(WordListUnavailable):
        load_word_list(tmp_path / "start.txt")
