from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Tuple

from wordsieve.engine.validation import is_word


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def extract_words(lines: Iterable[str]) -> List[str]:
    """
    Keep the tokens that are five letters a-z once stripped and lowercased.
    File order is kept; duplicates are kept too.
    """
    return [ln.strip().lower() for ln in lines if is_word(ln)]


def load_corpus(p: Path | str) -> List[str]:
    """Read a newline-separated word list and return its five-letter words."""
    return extract_words(read_lines(p))


def filter_wordlist(src: Path | str, dst: Path | str) -> Tuple[int, int]:
    """
    Copy only the five-letter lines of `src` into `dst` (e.g. cut a full
    English dictionary down to a Wordle corpus).

    Returns (lines_read, words_written).
    """
    lines = read_lines(src)
    words = extract_words(lines)
    write_lines(words, dst)
    return len(lines), len(words)
