from __future__ import annotations
from typing import Dict, List, Type

from wordler.engine import WORD_LEN

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
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, *, workers: int = 1):
        self.N: int = WORD_LEN
        self.allowed: List[str] = []
        self.answers: List[str] = []
        self.workers = workers

    def reset(self, *, allowed: List[str], answers: List[str], N: int) -> None:
        self.allowed = list(allowed)
        self.answers = list(answers)
        self.N = int(N)

    def next_guess(self, state: dict) -> str:
        """
        Pick the next word to guess.

        `state` carries at least "candidates" (answers still possible) and
        "allowed" (words that may be guessed this turn).
        """
        raise NotImplementedError("Override in subclass")
