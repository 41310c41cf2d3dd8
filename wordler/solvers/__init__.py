from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

from . import expected_partition  # noqa: F401
from .expected_partition import ExpectedPartitionSolver, select_best, score_guess

DEFAULT_SOLVER = ExpectedPartitionSolver.id


def create_solver(solver_id: str = DEFAULT_SOLVER, **kwargs) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
