"""
Word: a validated, fixed-length, lowercase a–z string.

Word subclasses `str`, so it compares, hashes, sorts and prints exactly like
the plain string; the only thing it adds is validation at construction time.
"""

from __future__ import annotations

import re

from .errors import InvalidWord

# Default word length (classic Wordle).
WORD_LEN = 5

_LETTERS = re.compile(r"[a-z]+")


class Word(str):
    __slots__ = ()

    def __new__(cls, text: str, N: int = WORD_LEN) -> "Word":
        if isinstance(text, Word) and len(text) == N:
            return text
        if not isinstance(text, str) or len(text) != N or not _LETTERS.fullmatch(text):
            raise InvalidWord(f"Invalid word: {text!r}")
        return super().__new__(cls, text)

    def __getnewargs__(self):
        # keep N when pickling (process pools ship Words to workers)
        return str(self), len(self)


def check_word(text: str, N: int = WORD_LEN) -> Word:
    """Return `text` as a Word, raising InvalidWord if it isn't one."""
    return Word(text, N)
