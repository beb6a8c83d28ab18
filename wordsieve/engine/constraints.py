"""
Constraint tracking and candidate filtering.

Given:
  - an encoded corpus (see corpus.py)
  - every (guess, outcome) pair seen so far, folded into a ConstraintStore

Return:
  - the corpus words consistent with ALL of that feedback.

This is the core step that turns feedback into a shrinking candidate set.
The store keeps fixed-size numpy tables (positions x alphabet) instead of
per-letter sets:

  fixed[i]          letter index known at position i, or -1
  absent_at[i, c]   letter c was marked 'X' at position i
  present_at[i, c]  letter c was marked 'Y' at position i
  min_count[c]      at least this many c in the word
  max_count[c]      at most this many c (WORD_LENGTH == unbounded)

A gray mark only ever excludes its own position. If the same letter was hit
or present elsewhere in the guess, the gray copy just caps max_count; if it
wasn't, max_count drops to 0, which excludes the letter everywhere.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

import numpy as np

from .corpus import Corpus
from .scoring import ABSENT, ALPHABET, HIT, PRESENT, WORD_LENGTH

_NUM_LETTERS = len(ALPHABET)
_POSITIONS = np.arange(WORD_LENGTH)


class ConstraintStore:
    """Everything learned from feedback in the current game. Only tightens."""

    def __init__(self):
        self.fixed = np.full(WORD_LENGTH, -1, dtype=np.intp)
        self.absent_at = np.zeros((WORD_LENGTH, _NUM_LETTERS), dtype=bool)
        self.present_at = np.zeros((WORD_LENGTH, _NUM_LETTERS), dtype=bool)
        self.min_count = np.zeros(_NUM_LETTERS, dtype=np.int8)
        self.max_count = np.full(_NUM_LETTERS, WORD_LENGTH, dtype=np.int8)
        # scratch for apply(); reused so updates don't allocate
        self._guessed = np.zeros(_NUM_LETTERS, dtype=np.int8)
        self._matched = np.zeros(_NUM_LETTERS, dtype=np.int8)

    def reset(self) -> None:
        """Forget everything (new game)."""
        self.fixed.fill(-1)
        self.absent_at.fill(False)
        self.present_at.fill(False)
        self.min_count.fill(0)
        self.max_count.fill(WORD_LENGTH)

    def apply(self, guess: str, outcome: str) -> None:
        """
        Fold one (guess, outcome) pair into the store.

        Both arguments must already be normalized (lowercase word, uppercase
        G/Y/X outcome); the game layer validates before calling.
        """
        guessed = self._guessed
        matched = self._matched
        guessed.fill(0)
        matched.fill(0)

        base = ord("a")
        for i in range(WORD_LENGTH):
            c = ord(guess[i]) - base
            guessed[c] += 1
            mark = outcome[i]
            if mark == HIT:
                self.fixed[i] = c
                matched[c] += 1
            elif mark == PRESENT:
                self.present_at[i, c] = True
                matched[c] += 1
            elif mark == ABSENT:
                self.absent_at[i, c] = True

        for c in np.flatnonzero(guessed):
            m = matched[c]
            if m > self.min_count[c]:
                self.min_count[c] = m
            # Some copy came back gray: the solution has exactly `m` of them.
            if m < guessed[c] and m < self.max_count[c]:
                self.max_count[c] = m

    # ---- read-only views (used by heuristics, logging and tests) ----

    def fixed_letters(self) -> List[Optional[str]]:
        return [ALPHABET[c] if c >= 0 else None for c in self.fixed]

    def required_letters(self) -> Set[str]:
        """Letters marked present at some position: must appear somewhere."""
        return {ALPHABET[c] for c in np.flatnonzero(self.present_at.any(axis=0))}

    def present_at_position(self, position: int) -> Set[str]:
        return {ALPHABET[c] for c in np.flatnonzero(self.present_at[position])}

    def excluded_at(self, position: int) -> Set[str]:
        """Letters that can't sit at `position` (yellow or gray there)."""
        row = self.present_at[position] | self.absent_at[position]
        return {ALPHABET[c] for c in np.flatnonzero(row)}

    def bounds(self) -> Dict[str, Tuple[int, Optional[int]]]:
        """Constrained letters -> (min, max); max None means unbounded."""
        out: Dict[str, Tuple[int, Optional[int]]] = {}
        touched = np.flatnonzero((self.min_count > 0) | (self.max_count < WORD_LENGTH))
        for c in touched:
            hi = int(self.max_count[c])
            out[ALPHABET[c]] = (int(self.min_count[c]), None if hi >= WORD_LENGTH else hi)
        return out

    def is_empty(self) -> bool:
        return (
            not (self.fixed >= 0).any()
            and not self.absent_at.any()
            and not self.present_at.any()
            and not self.min_count.any()
            and bool((self.max_count == WORD_LENGTH).all())
        )


def candidate_mask(corpus: Corpus, store: ConstraintStore,
                   out: np.ndarray | None = None) -> np.ndarray:
    """
    Boolean mask over `corpus`: True where the word satisfies every constraint.

    A word is rejected if:
      - it differs from a fixed letter,
      - any of its letters is yellow or gray at that position,
      - its letter counts break a min/max bound,
      - it lacks a letter that was yellow anywhere.

    `out` is an optional caller-owned bool buffer of len(corpus); passing the
    same one every turn keeps filtering allocation-light. Each game owns its
    buffer, never share one across threads.
    """
    n = len(corpus)
    if out is None:
        out = np.empty(n, dtype=bool)
    out.fill(True)

    letters = corpus.letters
    counts = corpus.counts

    for i in range(WORD_LENGTH):
        if store.fixed[i] >= 0:
            np.logical_and(out, letters[:, i] == store.fixed[i], out=out)

    banned = store.present_at | store.absent_at
    if banned.any():
        hits = banned[_POSITIONS, letters]      # (n, 5)
        np.logical_and(out, ~hits.any(axis=1), out=out)

    np.logical_and(out, (counts >= store.min_count).all(axis=1), out=out)
    np.logical_and(out, (counts <= store.max_count).all(axis=1), out=out)

    required = store.present_at.any(axis=0)
    if required.any():
        np.logical_and(out, (counts[:, required] > 0).all(axis=1), out=out)

    return out


def filter_candidates(words: Iterable[str] | Corpus, store: ConstraintStore) -> List[str]:
    """
    Keep only the words consistent with `store`.

    Args:
      words : a Corpus, or any iterable of five-letter words
      store : accumulated constraints

    Returns:
      List[str] of consistent words (order preserved as in `words`).
    """
    if isinstance(words, Corpus):
        corpus = words
    else:
        words = list(words)
        if not words:
            return []
        corpus = Corpus(words)
    mask = candidate_mask(corpus, store)
    return [corpus.words[i] for i in np.flatnonzero(mask)]
