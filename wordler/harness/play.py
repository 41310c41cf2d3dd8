"""
Interactive game: the computer hides a word, a human guesses.

I/O goes through two callables so the loop can be driven by a terminal or by
a test script:
  - read_guess(prompt) -> str, or None when the player gives up (EOF)
  - show(text)         -> prints one line
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from wordler.engine import Feedback, Word, filter_candidates, validate_guess
from .config import SolverConfig
from .core import Solution, SolveStatus

log = logging.getLogger(__name__)


def play_game(
        answer: str,
        *,
        allowed: Sequence[str],
        config: Optional[SolverConfig] = None,
        read_guess: Callable[[str], Optional[str]],
        show: Callable[[str], None] = print,
        verbose: bool = True,
) -> Solution:
    """
    Run one game. Invalid guesses don't use up a turn.

    In hard mode every guess must be consistent with the hints shown so far,
    which is enforced by shrinking the allowed set after each hint.
    """
    config = config or SolverConfig()
    answer = Word(answer, config.N)
    allowed_set = set(allowed)
    history: List[Feedback] = []

    for turn in range(1, config.max_turns + 1):
        while True:
            text = read_guess(f"Guess #{turn}: " if verbose else "")
            if text is None:
                log.debug("player gave up after %d guesses", len(history))
                return Solution(answer, len(history), SolveStatus.EXHAUSTED, history)
            text = text.strip()
            if validate_guess(text, allowed_set, config.N):
                break
            show("Invalid guess - try again")

        fb = Feedback.from_target(answer, text)
        history.append(fb)
        if fb.guess == answer:
            if verbose:
                show(f"Correct! Answer \"{answer}\" was found in {turn} tries.")
            return Solution(answer, turn, SolveStatus.SOLVED, history)

        show(f"          {fb.pattern}" if verbose else fb.pattern)
        if config.hard_mode:
            allowed_set = set(filter_candidates(allowed_set, [fb]))

    show(f"Answer \"{answer}\" was not found in {config.max_turns} tries.")
    return Solution(answer, config.max_turns, SolveStatus.EXHAUSTED, history)
