from __future__ import annotations
from typing import Dict, Sequence, Set, Type

from wordsieve.engine.corpus import Corpus

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A guess-selection strategy. One instance per game; the game calls
    reset() at game start and next_guess() once per turn.

    `state` passed to next_guess() holds:
      - "turn":        guesses already made this game (0 on the first turn)
      - "candidates":  ranked list of words still consistent with feedback
      - "corpus":      the full Corpus (fallback guess pool)
      - "constraints": the game's ConstraintStore (read only)
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.corpus: Corpus | None = None

    def reset(self, corpus: Corpus) -> None:
        self.corpus = corpus

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")


class OpeningSolver(BaseSolver):
    """
    Base for strategies that open with fixed, corpus-independent words.

    The openers' letters count as "tested" for later heuristics; `tested`
    is per game and cleared by reset().
    """
    OPENERS = ("salet", "frogs")

    def __init__(self, *, openers: Sequence[str] | None = None):
        super().__init__()
        self.openers = tuple(openers) if openers is not None else self.OPENERS
        self.tested: Set[str] = set()

    def reset(self, corpus: Corpus) -> None:
        super().reset(corpus)
        self.tested = set()

    def opener(self, turn: int) -> str | None:
        """The fixed word for `turn`, or None once the openers are used up."""
        if turn < len(self.openers):
            word = self.openers[turn]
            self.tested.update(word)
            return word
        return None
