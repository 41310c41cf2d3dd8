"""
Solve-loop primitives.

- solve_word:    play one puzzle against a known target until solved or out of turns.
- suggest_guess: given live feedback from a real game, pick the next guess.
- run_batch:     solve many targets in sequence ("solve all"), with progress.

These functions are UI-agnostic: the CLI, the play loop and the tests all use
them the same way. The turn budget comes from SolverConfig (6, or the relaxed
hard-mode budget).
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from tqdm import tqdm

from wordler.engine import (
    EmptyCandidatePool, Feedback, GuessBudgetExhausted, Word,
    exclude_guessed, filter_candidates,
)
from wordler.solvers import BaseSolver, create_solver
from .config import SolverConfig

log = logging.getLogger(__name__)


class SolveStatus(Enum):
    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass
class Solution:
    answer: str
    guesses: int
    status: SolveStatus = SolveStatus.SOLVED
    history: List[Feedback] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is SolveStatus.SOLVED

    def raise_for_status(self) -> "Solution":
        """Raise GuessBudgetExhausted unless the puzzle was solved."""
        if not self.success:
            raise GuessBudgetExhausted(
                f"Answer {self.answer!r} was not found in {self.guesses} tries.")
        return self


def _solver_for(config: SolverConfig, solver: Optional[BaseSolver]) -> BaseSolver:
    return solver if solver is not None else create_solver(workers=config.workers)


def solve_word(
        target: str,
        *,
        answers: Sequence[str],
        allowed: Sequence[str],
        config: Optional[SolverConfig] = None,
        solver: Optional[BaseSolver] = None,
) -> Solution:
    """
    Solve for a known `target`, guessing until it is hit or the budget runs out.

    Args:
        target:  the hidden word (need not be in `answers`)
        answers: the answer vocabulary (initial candidate pool)
        allowed: words permitted as guesses (answers first, then extras)
        config:  turn budget, opener, hard mode, ...
        solver:  guess picker; defaults to the registered expected-partition solver

    Returns:
        Solution with status SOLVED or EXHAUSTED.

    Raises:
        EmptyCandidatePool when the feedback rules out every candidate
        (only possible when the target isn't in `answers`).
    """
    config = config or SolverConfig()
    target = Word(target, config.N)
    solver = _solver_for(config, solver)
    solver.reset(allowed=allowed, answers=answers, N=config.N)

    candidates: List[str] = list(answers)
    guesses: List[str] = list(allowed)
    history: List[Feedback] = []

    budget = config.turn_budget
    for turn in range(budget):
        if len(candidates) == 1:
            guess = candidates[0]
        elif turn == 0 and config.first_guess:
            guess = config.first_guess
        else:
            state = {
                "turn": turn + 1,
                "history": list(history),
                "candidates": candidates,
                "allowed": guesses,
                "N": config.N,
            }
            guess = solver.next_guess(state)

        fb = Feedback.from_target(target, guess)
        history.append(fb)
        log.debug("%s: guess #%d %s (%d candidates)", target, turn + 1, fb, len(candidates))

        if guess == target:
            return Solution(target, turn + 1, SolveStatus.SOLVED, history)

        candidates = filter_candidates(candidates, [fb])
        if config.drop_guessed:
            candidates = exclude_guessed(candidates, [fb])
        if config.hard_mode:
            guesses = filter_candidates(guesses, [fb])
        if not candidates:
            raise EmptyCandidatePool(step=turn + 1, feedback=fb)

    return Solution(target, budget, SolveStatus.EXHAUSTED, history)


def suggest_guess(
        feedbacks: Sequence[Feedback],
        *,
        answers: Sequence[str],
        allowed: Sequence[str],
        config: Optional[SolverConfig] = None,
        solver: Optional[BaseSolver] = None,
) -> str:
    """
    Best next guess given the feedback a real game has produced so far.

    With no feedback yet and an opener configured, the opener is returned
    without searching.

    Raises:
        EmptyCandidatePool if no answer fits all of `feedbacks` (a typo in a
        hint, usually).
    """
    config = config or SolverConfig()
    if not feedbacks and config.first_guess:
        return config.first_guess

    candidates = filter_candidates(answers, feedbacks)
    if config.drop_guessed:
        candidates = exclude_guessed(candidates, feedbacks)
    guesses = filter_candidates(allowed, feedbacks) if config.hard_mode else list(allowed)
    if not candidates:
        raise EmptyCandidatePool(step=len(feedbacks) or None,
                                 feedback=feedbacks[-1] if feedbacks else None)

    solver = _solver_for(config, solver)
    solver.reset(allowed=allowed, answers=answers, N=config.N)
    state = {
        "turn": len(feedbacks) + 1,
        "history": list(feedbacks),
        "candidates": candidates,
        "allowed": guesses,
        "N": config.N,
    }
    log.debug("%d candidates remain after %d hints", len(candidates), len(feedbacks))
    return solver.next_guess(state)


def _progress_enabled(mode: str) -> bool:
    if mode == "auto":
        return sys.stderr.isatty()
    return mode == "bar"


def run_batch(
        targets: Iterable[str],
        *,
        answers: Sequence[str],
        allowed: Sequence[str],
        config: Optional[SolverConfig] = None,
        progress: str = "off",
        sample: Optional[int] = None,
) -> List[Solution]:
    """
    Solve every target back-to-back. If `sample` is given only the first K
    targets are used, for quick experiments.

    A target that can't be solved (EmptyCandidatePool) is logged and recorded
    as a FAILED Solution; the batch carries on.
    """
    config = config or SolverConfig()
    solver = create_solver(workers=config.workers)

    pool = list(targets)
    if sample is not None:
        pool = pool[:sample]

    iterator = tqdm(pool, ncols=80, desc="Solving", unit="word") \
        if _progress_enabled(progress) else pool

    out: List[Solution] = []
    for target in iterator:
        try:
            s = solve_word(target, answers=answers, allowed=allowed, config=config, solver=solver)
        except EmptyCandidatePool as e:
            log.warning("giving up on %r: %s", target, e)
            s = Solution(target, e.step or 0, SolveStatus.FAILED)
        if s.status is SolveStatus.EXHAUSTED:
            log.warning("%r not found in %d tries", target, s.guesses)
        out.append(s)

    solved = sum(1 for s in out if s.success)
    log.info("solved %d of %d targets", solved, len(out))
    return out
