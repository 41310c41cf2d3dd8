"""
Exception hierarchy for wordler.

Input problems (bad words, bad hints, bad results lines) are ValueErrors and
are surfaced to the caller straight away. Solve failures are RuntimeErrors:
they end the current solve but never the process, so batch callers can move
on to the next target.
"""

from __future__ import annotations

from typing import Optional


class WordlerError(Exception):
    """Base class for every error raised by wordler."""


class InvalidWord(WordlerError, ValueError):
    pass


class InvalidHint(WordlerError, ValueError):
    pass


class MalformedResultsRecord(WordlerError, ValueError):
    pass


class EmptyCandidatePool(WordlerError, RuntimeError):
    """
    No candidate word is consistent with the hints seen so far.

    `step` is the 1-based number of the feedback that emptied the pool (None
    when the pool was empty to begin with) and `feedback` is that feedback.
    """

    def __init__(self, message: str = "No matching words found.", *,
                 step: Optional[int] = None, feedback=None):
        if step is not None:
            message = f"{message} (after guess #{step}: {feedback})"
        super().__init__(message)
        self.step = step
        self.feedback = feedback


class GuessBudgetExhausted(WordlerError, RuntimeError):
    pass


class InvalidConfig(WordlerError, ValueError):
    pass
