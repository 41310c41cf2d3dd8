"""
Lightweight guess validation.

This module answers the question: "Is this typed guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is lowercase a–z only
  - it has exact length N
  - it exists in the provided `allowed` list/set

The play loop checks every line the player types with this before scoring it.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Union

from .errors import InvalidWord
from .words import Word


def validate_guess(word: str, allowed: Union[AbstractSet[str], Iterable[str]], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess (surrounding whitespace is ignored)
      allowed : allowed words; pass a set when calling this in a loop
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    try:
        w = Word(word.strip(), N)
    except InvalidWord:
        return False

    if not isinstance(allowed, (set, frozenset)):
        allowed = set(allowed)
    return w in allowed
