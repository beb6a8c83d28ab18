"""
Encoded, read-only word corpus.

A Corpus is built once from the loaded word list and then shared by every
game played on it (including games running on other threads). It holds:
  - words   : the words, insertion order, duplicates allowed
  - letters : (n, 5) letter indices 0..25
  - counts  : (n, 26) per-word letter counts
  - scores / repeats : the static ranking inputs (see ranking.py)

All arrays are flagged read-only; per-game mutable state (constraints,
scratch masks) lives elsewhere.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import numpy as np

from .errors import EmptyCorpusError
from .ranking import letter_frequency, rank, repeat_flags, word_scores
from .scoring import ALPHABET, WORD_LENGTH
from .validation import normalize_word


def encode(words: List[str]) -> np.ndarray:
    """Words -> (n, 5) array of letter indices."""
    base = ord("a")
    out = np.empty((len(words), WORD_LENGTH), dtype=np.intp)
    for row, w in enumerate(words):
        for i, ch in enumerate(w):
            out[row, i] = ord(ch) - base
    return out


def letter_counts(letters: np.ndarray) -> np.ndarray:
    """(n, 5) letter indices -> (n, 26) letter counts."""
    n = letters.shape[0]
    counts = np.zeros((n, len(ALPHABET)), dtype=np.int8)
    rows = np.arange(n)
    # One position at a time: each row is touched once per pass, so += is safe.
    for i in range(WORD_LENGTH):
        counts[rows, letters[:, i]] += 1
    return counts


class Corpus:
    """Immutable word list plus its precomputed letter tables and scores."""

    def __init__(self, words: Iterable[str]):
        cleaned = [normalize_word(w) for w in words]
        if not cleaned:
            raise EmptyCorpusError("corpus contains no five-letter words")

        self.words = tuple(cleaned)
        self.letters = encode(cleaned)
        self.counts = letter_counts(self.letters)
        self.frequency = letter_frequency(self.counts)
        self.scores = word_scores(self.counts, self.frequency)
        self.repeats = repeat_flags(self.counts)

        for arr in (self.letters, self.counts, self.frequency, self.scores, self.repeats):
            arr.setflags(write=False)

        self._positions: Dict[str, List[int]] = {}
        for idx, w in enumerate(self.words):
            self._positions.setdefault(w, []).append(idx)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __contains__(self, word) -> bool:
        return word in self._positions

    def __repr__(self) -> str:
        return f"Corpus({len(self.words)} words)"

    def positions(self, word: str) -> List[int]:
        """Every index at which `word` occurs (empty if absent)."""
        return list(self._positions.get(word, ()))

    def _first(self, word: str) -> int:
        try:
            return self._positions[word][0]
        except KeyError:
            raise KeyError(f"{word!r} is not in the corpus") from None

    def score(self, word: str) -> float:
        """Cached static score of a corpus word."""
        return float(self.scores[self._first(word)])

    def has_repeat(self, word: str) -> bool:
        """Cached duplicate-letter flag of a corpus word."""
        return bool(self.repeats[self._first(word)])

    def rank(self, indices) -> np.ndarray:
        """Ranking order (see ranking.rank) of the given word indices."""
        return rank(indices, self.scores, self.repeats)

    def ranked_words(self, indices) -> List[str]:
        return [self.words[i] for i in self.rank(indices)]
