from .scoring import feedback, WORD_LENGTH, HIT, PRESENT, ABSENT, ALL_HIT
from .validation import is_word, normalize_word, parse_outcome, REJECTED
from .errors import (
    SolverError, InvalidFeedbackError, InvalidGuessError, EmptyCorpusError, ContradictionError,
)
from .corpus import Corpus
from .constraints import ConstraintStore, candidate_mask, filter_candidates

__all__ = [
    "feedback", "WORD_LENGTH", "HIT", "PRESENT", "ABSENT", "ALL_HIT",
    "is_word", "normalize_word", "parse_outcome", "REJECTED",
    "SolverError", "InvalidFeedbackError", "InvalidGuessError", "EmptyCorpusError",
    "ContradictionError",
    "Corpus", "ConstraintStore", "candidate_mask", "filter_candidates",
]
