from .errors import (
    WordlerError, InvalidWord, InvalidHint, MalformedResultsRecord, InvalidConfig,
    EmptyCandidatePool, GuessBudgetExhausted,
)
from .words import WORD_LEN, Word, check_word
from .scoring import score
from .feedback import Feedback, HintSymbol, check_hint
from .constraints import filter_candidates, exclude_guessed
from .validation import validate_guess

__all__ = [
    "WordlerError", "InvalidWord", "InvalidHint", "MalformedResultsRecord", "InvalidConfig",
    "EmptyCandidatePool", "GuessBudgetExhausted",
    "WORD_LEN", "Word", "check_word", "score",
    "Feedback", "HintSymbol", "check_hint",
    "filter_candidates", "exclude_guessed", "validate_guess",
]
