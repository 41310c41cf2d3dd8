"""
Expected Partition solver (minimize expected remaining candidates).

Idea:
  For guess g, every hidden target t in the CURRENT candidates produces some
  feedback; the candidates still consistent with that feedback are what we'd
  be left with. Score g by

      score(g) = sum over t of |{ c : from_target(t, g).match(c) }|

  i.e. the sum of squared partition sizes. Lower is better. The guess with the
  lowest score wins; ties go to the guess listed first in `allowed`, so keeping
  the answers at the front of the guess pool makes ties favour real answers.

Shortcuts:
  - With 1 or 2 candidates, guess the first candidate outright: any computed
    "best" guess can't beat a coin flip on the answer itself.
  - Targets that give the same hint give the same count, so the count is
    computed once per distinct hint string.

Cost is O(|allowed| * |candidates|^2) matches. Guesses are scored
independently, so `workers > 1` spreads `allowed` over a process pool.
"""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from typing import List, Sequence, Tuple

from .base import BaseSolver, register
from wordler.engine import EmptyCandidatePool, Feedback, score as score_fn

log = logging.getLogger(__name__)

# (score, position in allowed, guess)
Scored = Tuple[int, int, str]


def score_guess(guess: str, candidates: Sequence[str]) -> int:
    """Sum over all hypothetical targets of the candidates left standing."""
    buckets = Counter(score_fn(guess, t) for t in candidates)
    total = 0
    for pattern, n_targets in buckets.items():
        fb = Feedback.parse(guess, pattern, len(guess))
        total += n_targets * sum(1 for c in candidates if fb.match(c))
    return total


def _best_in_chunk(start: int, guesses: Sequence[str], candidates: Sequence[str]) -> Scored:
    best: Scored = (-1, -1, "")
    for offset, g in enumerate(guesses):
        s = score_guess(g, candidates)
        if best[0] < 0 or s < best[0]:
            best = (s, start + offset, g)
    return best


def _chunks(seq: Sequence[str], n: int) -> List[Tuple[int, Sequence[str]]]:
    size = -(-len(seq) // n)
    return [(i, seq[i:i + size]) for i in range(0, len(seq), size)]


def select_best(candidates: Sequence[str], allowed: Sequence[str], *, workers: int = 1) -> str:
    """
    Choose the guess expected to cut `candidates` down the most.

    Args:
      candidates : answers still possible (non-empty)
      allowed    : words that may be guessed; scanned in order for tie-breaks.
                   If empty, the candidates themselves are scored.
      workers    : >1 scores chunks of `allowed` in separate processes

    Raises:
      EmptyCandidatePool if there are no candidates.
    """
    if not candidates:
        raise EmptyCandidatePool()
    if len(candidates) <= 2:
        return candidates[0]

    pool = list(allowed) or list(candidates)
    candidates = list(candidates)

    if workers > 1 and len(pool) > workers:
        parts = _chunks(pool, workers)
        with ProcessPoolExecutor(workers) as executor:
            futures = [executor.submit(_best_in_chunk, start, part, candidates)
                       for start, part in parts]
            results = [f.result() for f in futures]
        best = min(results, key=lambda r: (r[0], r[1]))
    else:
        best = _best_in_chunk(0, pool, candidates)

    log.debug("best guess %r: score %d over %d candidates, %d guesses",
              best[2], best[0], len(candidates), len(pool))
    return best[2]


@register
class ExpectedPartitionSolver(BaseSolver):
    id = "expected_partition"
    name = "Expected Partition Size"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]
        return select_best(candidates, allowed, workers=self.workers)
