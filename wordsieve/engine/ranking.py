"""
Static, corpus-relative word scores and the candidate ranking order.

Idea:
  - Letter frequency = number of corpus words containing the letter at least
    once (document frequency, not total occurrences).
  - A word scores the sum of log(freq + 1) over its DISTINCT letters, so
    common letters count for more but one very common letter can't dominate.
  - Words with a repeated letter waste a slot; they rank after every word
    without one, whatever their score.

Scores depend on the corpus only, never on constraints, so they are computed
once per corpus and never invalidated during a game.
"""

import numpy as np


def letter_frequency(counts: np.ndarray) -> np.ndarray:
    """(n, 26) letter counts -> (26,) number of words containing each letter."""
    return (counts > 0).sum(axis=0)


def word_scores(counts: np.ndarray, frequency: np.ndarray) -> np.ndarray:
    """Per-word sum of log(freq + 1) over distinct letters; shape (n,)."""
    weights = np.log(frequency.astype(np.float64) + 1.0)
    return (counts > 0).astype(np.float64) @ weights


def repeat_flags(counts: np.ndarray) -> np.ndarray:
    """True where a word uses some letter more than once."""
    return (counts > 1).any(axis=1)


def rank(indices, scores: np.ndarray, repeats: np.ndarray) -> np.ndarray:
    """
    Order word indices for guessing: no-repeat words first, then by
    descending score.

    Both sorts are stable, so ties keep the order of `indices`; pass them in
    corpus order (as a mask's nonzero positions are) to break ties by corpus
    position.
    """
    indices = np.asarray(indices, dtype=np.intp)
    by_score = indices[np.argsort(-scores[indices], kind="stable")]
    return by_score[np.argsort(repeats[by_score], kind="stable")]
