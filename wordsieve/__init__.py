from .engine import Corpus, ConstraintStore, feedback, filter_candidates
from .game import Game, new_game

__all__ = ["Corpus", "ConstraintStore", "feedback", "filter_candidates", "Game", "new_game"]
