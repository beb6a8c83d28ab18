"""
Adaptive solver: a small state machine over the turn number.

  turn 0, 1      fixed openers ("salet", "frogs")
  turn 2         information-gain pick among the candidates
  turn 3..5      minimax partition search, if at most 8 candidates remain
  otherwise      top of the ranked candidate list

The game itself short-circuits a single remaining candidate, so the solver
only ever sees two or more.
"""

from __future__ import annotations
import logging
from typing import List, Sequence

from .base import OpeningSolver, register
from .information_gain import pick_information_gain_word
from .minimax import CANDIDATE_POOL_LIMIT, CORPUS_POOL_SIZE, pick_minimax_guess

log = logging.getLogger(__name__)


@register
class AdaptiveSolver(OpeningSolver):
    id = "adaptive"
    name = "Openers + Information Gain + Minimax"
    version = "1.0.0"

    INFORMATION_GAIN_TURN = 2
    MINIMAX_FIRST_TURN = 3
    MINIMAX_LAST_TURN = 5
    MINIMAX_MAX_CANDIDATES = 8

    def __init__(self, *, openers: Sequence[str] | None = None,
                 minimax_max_candidates: int | None = None,
                 candidate_pool_limit: int = CANDIDATE_POOL_LIMIT,
                 corpus_pool_size: int = CORPUS_POOL_SIZE):
        super().__init__(openers=openers)
        if minimax_max_candidates is not None:
            self.MINIMAX_MAX_CANDIDATES = int(minimax_max_candidates)
        self.candidate_pool_limit = int(candidate_pool_limit)
        self.corpus_pool_size = int(corpus_pool_size)

    def _use_minimax(self, turn: int, candidates: List[str]) -> bool:
        return (
            self.MINIMAX_FIRST_TURN <= turn <= self.MINIMAX_LAST_TURN
            and len(candidates) <= self.MINIMAX_MAX_CANDIDATES
        )

    def next_guess(self, state: dict) -> str:
        turn: int = state["turn"]
        candidates: List[str] = state["candidates"]

        word = self.opener(turn)
        if word is not None:
            return word

        if turn == self.INFORMATION_GAIN_TURN:
            return pick_information_gain_word(candidates, state["constraints"], self.tested)

        if self._use_minimax(turn, candidates):
            guess, worst = pick_minimax_guess(
                candidates, state["corpus"].words,
                candidate_pool_limit=self.candidate_pool_limit,
                corpus_pool_size=self.corpus_pool_size,
            )
            log.debug("minimax pick %s (worst bucket %d of %d)", guess, worst, len(candidates))
            return guess

        return candidates[0]
