"""
Exception types raised by the engine and the game layer.

The hierarchy mirrors the three ways a solve can go wrong:
  - the caller hands us something malformed (guess word or feedback string),
  - the corpus is unusable from the start,
  - the accumulated feedback contradicts every word we know.

Malformed-input errors also subclass ValueError so callers that only care
about "bad argument" can catch that.
"""


class SolverError(Exception):
    """Base class for everything wordsieve raises on purpose."""


class InvalidFeedbackError(SolverError, ValueError):
    """Feedback string has the wrong length or a symbol outside G/Y/X."""


class InvalidGuessError(SolverError, ValueError):
    """Probe word is not exactly five letters a-z."""


class EmptyCorpusError(SolverError, ValueError):
    """No usable five-letter word in the corpus."""


class ContradictionError(SolverError):
    """No corpus word satisfies the constraints gathered so far."""
