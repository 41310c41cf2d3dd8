"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the answers list)
  - the feedback seen so far (one Feedback per guess)

Return:
  - the words that are consistent with ALL of that feedback, in pool order.

This is the step that turns feedback into a shrinking candidate set. Both
helpers are pure: the input pool is never modified.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

from .feedback import Feedback

W = TypeVar("W", bound=str)


def filter_candidates(words: Iterable[W], feedbacks: Iterable[Feedback]) -> List[W]:
    """
    Keep only the words for which every Feedback in `feedbacks` matches.

    Args:
      words     : iterable of candidate words
      feedbacks : feedback seen so far (order doesn't matter)

    Returns:
      List of consistent candidates (order preserved as in `words`).
    """
    feedbacks = list(feedbacks)
    return [w for w in words if all(fb.match(w) for fb in feedbacks)]


def exclude_guessed(words: Iterable[W], feedbacks: Sequence[Feedback]) -> List[W]:
    """
    Drop every word that has already been guessed without solving the puzzle.

    A guess can stay consistent with its own feedback (match() is looser than
    an exact pattern comparison), so without this the same word could be
    suggested again and again.
    """
    tried = {fb.guess for fb in feedbacks if not fb.solved}
    return [w for w in words if w not in tried]
