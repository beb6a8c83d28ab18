"""
Information-gain pick for the first free turn after the openers.

For each candidate w:
  +2 for every distinct letter not tested yet
  -1 for a letter already known yellow at that very position
  +1 otherwise, for a letter known yellow somewhere (it must be in the answer)

Prefer the best word that reuses NO known green at its green position
(those slots are settled, so a fresh letter there teaches more). Fall back to
the best word overall if every candidate sits on a green.

Ties keep the first word in candidate order (i.e. the ranking order).
"""

from __future__ import annotations
from typing import List, Set

from wordsieve.engine.constraints import ConstraintStore
from wordsieve.engine.scoring import WORD_LENGTH


def information_score(word: str, tested: Set[str], yellow_at: List[Set[str]],
                      required: Set[str]) -> int:
    s = 0
    seen = set()
    for i, ch in enumerate(word):
        if ch not in tested and ch not in seen:
            s += 2
            seen.add(ch)
        if ch in yellow_at[i]:
            s -= 1
        elif ch in required:
            s += 1
    return s


def uses_green(word: str, fixed: List[str | None]) -> bool:
    return any(fixed[i] is not None and word[i] == fixed[i] for i in range(WORD_LENGTH))


def pick_information_gain_word(candidates: List[str], store: ConstraintStore,
                               tested: Set[str]) -> str:
    """
    Choose the highest-scoring candidate (see module doc) and record its
    letters in `tested`.

    Raises ValueError on an empty candidate list.
    """
    if not candidates:
        raise ValueError("no candidates to choose from")

    fixed = store.fixed_letters()
    yellow_at = [store.present_at_position(i) for i in range(WORD_LENGTH)]
    required = store.required_letters()

    best_free, best_free_s = None, None
    best_any, best_any_s = None, None

    for w in candidates:
        s = information_score(w, tested, yellow_at, required)
        if not uses_green(w, fixed) and (best_free_s is None or s > best_free_s):
            best_free, best_free_s = w, s
        if best_any_s is None or s > best_any_s:
            best_any, best_any_s = w, s

    chosen = best_free if best_free is not None else best_any
    tested.update(chosen)
    return chosen
