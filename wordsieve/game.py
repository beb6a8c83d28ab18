"""
One game of guess-and-narrow over a fixed corpus.

The Game ties the pieces together once per turn:

    next_guess()  -> solver strategy proposes a probe
    (caller plays it and reads the real feedback)
    apply_feedback(guess, outcome)
                  -> store tightens, candidates are re-derived from the
                     FULL corpus and re-ranked

Re-deriving from the full corpus (not from last turn's survivors) means a
word only stays out because the current constraints exclude it; there is no
state carried between filter passes that could drift.

Each Game owns its ConstraintStore, candidate list and scratch mask, so games
can run on separate threads over one shared Corpus.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Set, Tuple

import numpy as np

from wordsieve.engine.constraints import ConstraintStore, candidate_mask
from wordsieve.engine.corpus import Corpus
from wordsieve.engine.errors import ContradictionError
from wordsieve.engine.scoring import ALL_HIT
from wordsieve.engine.validation import normalize_word, parse_outcome
from wordsieve.solvers import BaseSolver, create_solver

rootlog = logging.getLogger(__name__)


class Game:
    """
    Solver session for one hidden word.

    Args:
      corpus  : a Corpus, or any iterable of five-letter words
      solver  : registered solver id, or a BaseSolver instance
      log     : logger for this game's messages (default: module logger)
      verbose : emit turn-by-turn messages at INFO instead of DEBUG
    """

    def __init__(self, corpus: Corpus | Iterable[str], *,
                 solver: str | BaseSolver = "adaptive",
                 log: logging.Logger | None = None,
                 verbose: bool = False):
        self.corpus = corpus if isinstance(corpus, Corpus) else Corpus(corpus)
        self.solver = create_solver(solver) if isinstance(solver, str) else solver
        self.log = log or rootlog
        self.verbose = verbose

        self.store = ConstraintStore()
        self._mask = np.empty(len(self.corpus), dtype=bool)
        self._rejected: Set[str] = set()
        self.history: List[Tuple[str, str]] = []
        self.turn = 0
        self._solved = False
        self._candidates: List[str] = []
        self.reset()

    def _say(self, msg: str, *args) -> None:
        self.log.log(logging.INFO if self.verbose else logging.DEBUG, msg, *args)

    # ---- lifecycle ----

    def reset(self) -> None:
        """Start a new game on the same corpus."""
        self.store.reset()
        self._rejected.clear()
        self.history = []
        self.turn = 0
        self._solved = False
        self.solver.reset(self.corpus)
        self._refilter()

    def _refilter(self) -> None:
        mask = candidate_mask(self.corpus, self.store, out=self._mask)
        for word in self._rejected:
            mask[self.corpus.positions(word)] = False
        self._candidates = self.corpus.ranked_words(np.flatnonzero(mask))

    # ---- queries ----

    @property
    def candidates(self) -> List[str]:
        return self._candidates

    def current_candidates(self) -> List[str]:
        """Ranked copy of the words still consistent with all feedback."""
        return list(self._candidates)

    def is_solved(self) -> bool:
        return self._solved

    def is_exhausted(self) -> bool:
        """True when no corpus word fits the feedback (and we haven't won)."""
        return not self._solved and not self._candidates

    # ---- turn protocol ----

    def next_guess(self, turn: int | None = None) -> str:
        """
        Propose the next probe word.

        Args:
          turn: guesses already made (defaults to this game's own count)

        Raises:
          ContradictionError when no candidate remains.
        """
        if self._solved:
            return self.history[-1][0]
        if not self._candidates:
            raise ContradictionError("no possible words remain")

        turn = self.turn if turn is None else int(turn)
        if len(self._candidates) == 1:
            guess = self._candidates[0]
        else:
            state = {
                "turn": turn,
                "candidates": self._candidates,
                "corpus": self.corpus,
                "constraints": self.store,
            }
            guess = self.solver.next_guess(state)
            if guess in self._rejected:
                guess = self._candidates[0]

        self._say("%d possible words remain. Try: %s", len(self._candidates), guess)
        return guess

    def apply_feedback(self, guess: str, outcome: str) -> List[str]:
        """
        Record the outcome of playing `guess` and narrow the candidates.

        Both inputs are validated first; InvalidGuessError or
        InvalidFeedbackError leaves the game untouched.

        Returns the new (ranked) candidate list.
        """
        guess = normalize_word(guess)
        outcome = parse_outcome(outcome)

        self.store.apply(guess, outcome)
        self.history.append((guess, outcome))
        self.turn += 1
        if outcome == ALL_HIT:
            self._solved = True

        before = len(self._candidates)
        self._refilter()
        self._say("%s %s: %d -> %d candidates", guess, outcome, before, len(self._candidates))

        if self.is_exhausted():
            self.log.warning("No possible words remain after %d guesses (last %s %s)",
                             self.turn, guess, outcome)
        return self._candidates

    def reject_guess(self, guess: str) -> None:
        """
        The game refused `guess` as a word: keep it out of the candidate
        view for the rest of this game. Constraints are left untouched.
        """
        guess = normalize_word(guess)
        self._rejected.add(guess)
        self._candidates = [w for w in self._candidates if w != guess]
        self._say("%s rejected; %d candidates left", guess, len(self._candidates))


def new_game(corpus: Corpus | Iterable[str], **options) -> Game:
    """Shorthand for Game(corpus, **options)."""
    return Game(corpus, **options)
