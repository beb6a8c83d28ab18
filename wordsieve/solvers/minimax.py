"""
Minimax partition search (single ply, greedy).

For each guess g in a pool, bucket the CURRENT candidates by the outcome g
would produce against them. Judge g by its largest bucket (the worst case
after playing it). Pick the guess with the smallest worst case.

  - Pool: the candidates themselves when there are fewer than
    CANDIDATE_POOL_LIMIT of them, else the first CORPUS_POOL_SIZE corpus
    words. The corpus prefix is a speed knob, not a quality one.
  - Ties keep the earliest guess in the pool.
  - A worst case of 1 splits every candidate apart; stop searching there.

No look-ahead beyond the next outcome.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from wordsieve.engine.scoring import feedback

CANDIDATE_POOL_LIMIT = 50
CORPUS_POOL_SIZE = 1000


def worst_bucket(guess: str, candidates: Sequence[str]) -> int:
    """Size of the largest outcome bucket `guess` leaves among `candidates`."""
    buckets: Dict[str, int] = defaultdict(int)
    _feedback = feedback
    for sol in candidates:
        buckets[_feedback(guess, sol)] += 1
    return max(buckets.values()) if buckets else 0


def guess_pool(candidates: List[str], corpus_words: Sequence[str], *,
               candidate_pool_limit: int = CANDIDATE_POOL_LIMIT,
               corpus_pool_size: int = CORPUS_POOL_SIZE) -> List[str]:
    if len(candidates) < candidate_pool_limit:
        return list(candidates)
    return list(corpus_words[:corpus_pool_size])


def pick_minimax_guess(candidates: List[str], corpus_words: Sequence[str], *,
                       candidate_pool_limit: int = CANDIDATE_POOL_LIMIT,
                       corpus_pool_size: int = CORPUS_POOL_SIZE) -> Tuple[str, int]:
    """
    Return (guess, worst_case_bucket_size).

    Raises ValueError on an empty candidate list.
    """
    if not candidates:
        raise ValueError("no candidates to choose from")
    if len(candidates) == 1:
        return candidates[0], 1

    pool = guess_pool(candidates, corpus_words,
                      candidate_pool_limit=candidate_pool_limit,
                      corpus_pool_size=corpus_pool_size)

    best = candidates[0]
    best_worst = None
    for g in pool:
        worst = worst_bucket(g, candidates)
        if best_worst is None or worst < best_worst:
            best, best_worst = g, worst
            if worst == 1:
                break
    return best, best_worst if best_worst is not None else len(candidates)
