"""
Solver configuration.

One SolverConfig is built per run (the CLI builds it from its options) and
passed explicitly to every harness function; nothing reads global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wordler.engine import InvalidConfig, WORD_LEN, Word

# Single source of truth for the Wordle turn budget.
WORDLE_MAX_TURNS = 6

# Hard mode can't always finish within 6 turns, so give it room.
HARD_MODE_MAX_TURNS = 99

# Computing the opener from scratch is slow; this is what it picks on the
# full Wordle answer and guess lists. The bundled lists are a small subset
# and may compute a different opener.
DEFAULT_FIRST_GUESS = "raise"


@dataclass
class SolverConfig:
    N: int = WORD_LEN
    max_turns: int = WORDLE_MAX_TURNS
    first_guess: Optional[str] = DEFAULT_FIRST_GUESS
    hard_mode: bool = False
    hard_mode_max_turns: int = HARD_MODE_MAX_TURNS
    # Never re-guess a word that already failed (guarantees progress).
    drop_guessed: bool = True
    workers: int = 1

    def __post_init__(self):
        if self.max_turns < 1 or self.hard_mode_max_turns < 1:
            raise InvalidConfig("turn budgets must be at least 1")
        if self.workers < 1:
            raise InvalidConfig(f"workers must be >= 1; got {self.workers}")
        # "" means: compute the first guess too
        self.first_guess = Word(self.first_guess, self.N) if self.first_guess else None

    @property
    def turn_budget(self) -> int:
        return self.hard_mode_max_turns if self.hard_mode else self.max_turns
