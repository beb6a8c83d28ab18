"""
Ranked solver: the openers, then always the top-ranked candidate.

This is the plain strategy used for bulk evaluation: no search, just the
static letter-frequency ranking (no-repeat words first, higher score first).
Cheap enough to run over the whole corpus as the answer set.
"""

from __future__ import annotations
from typing import List

from .base import OpeningSolver, register


@register
class RankedSolver(OpeningSolver):
    id = "ranked"
    name = "Openers + Top Ranked"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        word = self.opener(state["turn"])
        if word is not None:
            return word
        candidates: List[str] = state["candidates"]
        return candidates[0]
