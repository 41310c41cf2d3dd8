"""
Vocabulary: the answer list plus the extra words accepted as guesses.

The guess pool is `answers + extra_guesses`, answers first, so that the guess
selector's first-wins tie-break prefers words that could be the answer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from wordler.engine import WORD_LEN, Word
from .io import load_words

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"


def default_paths(N: int = WORD_LEN) -> Tuple[Path, Path]:
    """Bundled (answers, extra guesses) files for word length N."""
    return DATA_DIR / f"answers_{N}.txt", DATA_DIR / f"guesses_{N}.txt"


@dataclass
class Vocabulary:
    answers: List[Word]
    extra_guesses: List[Word] = field(default_factory=list)
    N: int = WORD_LEN

    @property
    def allowed(self) -> List[Word]:
        return self.answers + self.extra_guesses


def load_vocabulary(answers_path: Optional[str | Path] = None,
                    guesses_path: Optional[str | Path] = None,
                    N: int = WORD_LEN) -> Vocabulary:
    """
    Load the answers and extra-guess lists (bundled lists when paths are None).
    The extra-guess file is optional: a missing file means no extra guesses.
    """
    default_answers, default_guesses = default_paths(N)
    answers = load_words(answers_path or default_answers, N)

    gp = Path(guesses_path or default_guesses)
    extra = load_words(gp, N) if (guesses_path or gp.exists()) else []

    log.debug("loaded %d answers and %d extra guesses (N=%d)", len(answers), len(extra), N)
    return Vocabulary(answers, extra, N)
