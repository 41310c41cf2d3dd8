"""
Feedback: a guess word paired with its per-letter hint.

Feedback answers two questions:
  - `Feedback.from_target(target, guess)`: what hint would `guess` earn if
    `target` were the hidden word?
  - `fb.match(candidate)`: could `candidate` be the hidden word, given that
    `fb.guess` earned `fb.hint`?

`match` runs three ordered passes over an "accounted for" marker per
position. Greens claim their letters first, so a letter can be green in one
place and grey (an extra copy) in another; yellows then claim the first free
copy of their letter; greys finally forbid any copy that is still free.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .errors import InvalidHint
from .scoring import score
from .words import WORD_LEN, Word


class HintSymbol(str, Enum):
    GREEN = "g"
    YELLOW = "y"
    GREY = "."

    def __str__(self) -> str:
        return self.value


_SYMBOLS = {s.value: s for s in HintSymbol}


def check_hint(text: str, N: int = WORD_LEN) -> Tuple[HintSymbol, ...]:
    """Parse a hint string like "yy..g", raising InvalidHint if malformed."""
    if not isinstance(text, str) or len(text) != N or any(ch not in _SYMBOLS for ch in text):
        raise InvalidHint(f"Invalid hint: {text!r}")
    return tuple(_SYMBOLS[ch] for ch in text)


@dataclass(frozen=True)
class Feedback:
    guess: Word
    hint: Tuple[HintSymbol, ...]

    def __post_init__(self):
        object.__setattr__(self, "guess", Word(self.guess, len(self.guess)))
        try:
            hint = tuple(HintSymbol(h) for h in self.hint)
        except ValueError as e:
            raise InvalidHint(f"Invalid hint: {self.hint!r}") from e
        if len(hint) != len(self.guess):
            raise InvalidHint(f"Invalid hint: {''.join(hint)!r} for guess {self.guess!r}")
        object.__setattr__(self, "hint", hint)

    @classmethod
    def parse(cls, guess: str, hint: str, N: int = WORD_LEN) -> "Feedback":
        """Build a Feedback from user-supplied text, validating both parts."""
        return cls(Word(guess, N), check_hint(hint, N))

    @classmethod
    def from_target(cls, target: str, guess: str) -> "Feedback":
        """The feedback `guess` receives when `target` is the hidden word."""
        return cls(Word(guess, len(guess)), tuple(_SYMBOLS[ch] for ch in score(guess, target)))

    @property
    def pattern(self) -> str:
        return "".join(s.value for s in self.hint)

    @property
    def solved(self) -> bool:
        return all(s is HintSymbol.GREEN for s in self.hint)

    def match(self, candidate: str) -> bool:
        guess, hint = self.guess, self.hint
        n = len(guess)
        if len(candidate) != n:
            return False
        used: List[bool] = [False] * n

        # Greens
        for i in range(n):
            if hint[i] is HintSymbol.GREEN:
                if candidate[i] != guess[i]:
                    return False
                used[i] = True

        # Yellows: first free copy, never a slot where this letter was itself yellow
        for i in range(n):
            if hint[i] is not HintSymbol.YELLOW:
                continue
            ch = guess[i]
            for j in range(n):
                if (candidate[j] == ch and not used[j]
                        and not (hint[j] is HintSymbol.YELLOW and guess[j] == ch)):
                    used[j] = True
                    break
            else:
                return False

        # Greys
        for i in range(n):
            if hint[i] is HintSymbol.GREY:
                ch = guess[i]
                for j in range(n):
                    if candidate[j] == ch and not used[j]:
                        return False

        return True

    def __str__(self) -> str:
        return f"{self.guess} {self.pattern}"
