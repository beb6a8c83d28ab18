from pathlib import Path
from wordsieve.datasets import validate_corpus, pretty_summary, load_corpus, filter_wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_corpus_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_corpus(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["issues"] == []
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_corpus_flags_problems(tmp_path: Path):
    # wrong length, uppercase, junk and a duplicate are reported, but one good word passes
    words = tmp_path / "words_5.txt"
    words.write_text("raise\ncranes\nCRANE\n???\nraise\n", encoding="utf-8")

    rep = validate_corpus(str(words))
    assert rep["passed"] is True
    assert rep["invalid_lines"] == 3
    assert rep["unique_count"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_corpus_missing_or_empty(tmp_path: Path):
    rep = validate_corpus(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False

    empty = tmp_path / "empty.txt"
    _write(empty, ["toolong", "abc"])
    rep = validate_corpus(str(empty))
    assert rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_corpus_case_folds_and_filters(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["Crane", "cranes", "raise", "  STARE ", "café!", "", "crane"])
    assert load_corpus(words) == ["crane", "raise", "stare", "crane"]


def test_filter_wordlist(tmp_path: Path):
    src = tmp_path / "words_alpha.txt"
    dst = tmp_path / "out" / "words_5.txt"
    _write(src, ["a", "apple", "banana", "Grape", "kiwis"])
    read, written = filter_wordlist(src, dst)
    assert (read, written) == (5, 3)
    assert dst.read_text(encoding="utf-8").split() == ["apple", "grape", "kiwis"]
