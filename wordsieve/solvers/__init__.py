from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

from . import adaptive  # noqa: F401
from . import ranked  # noqa: F401


def create_solver(solver_id: str, **options) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id. Keyword options are
    passed to the solver's constructor (e.g. openers=..., corpus_pool_size=...).
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
