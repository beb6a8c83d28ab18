"""
Corpus validator for wordsieve.

What this module does:
- Validate a word list file (one word per line) before a run.
- Count the usable five-letter words, the lines that aren't, and duplicates.
- Compute the SHA-256 of the raw file for run manifests.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordsieve.datasets import validate_corpus, pretty_summary
    rep = validate_corpus("data/words_5.txt")
    print(pretty_summary(rep))

Unlike the loader, the validator is strict: a line that only becomes a word
after lowercasing counts as invalid, so mixed-case files get flagged.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordsieve.engine.scoring import WORD_LENGTH
from wordsieve.engine.validation import is_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class CorpusReport:
    """Validation result for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # lines that aren't a lowercase five-letter word
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must be lowercase a-z, exactly five letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and is_word(w):
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_corpus(path: str) -> Dict:
    """
    Validate a word list file.

    Returns
    -------
    Dict
        JSON-serializable CorpusReport. `passed` requires at least one valid
        word; invalid lines and duplicates are reported as issues but don't
        fail the check, since the loader skips them anyway.
    """
    p = Path(path)
    if not p.exists():
        rep = CorpusReport(path, False, 0, 0, 0, "", False, [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append(f"word list contains 0 valid {WORD_LENGTH}-letter words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate word(s)")

    rep = CorpusReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=15918 (uniq=15918, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
