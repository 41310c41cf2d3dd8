"""
Aggregate statistics over a results log.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from wordler.engine import WordlerError
from .io import ResultsRecord


@dataclass
class ResultsSummary:
    count: int
    min: ResultsRecord
    max: ResultsRecord
    mean: float
    histogram: List[int]   # histogram[k] = number of words solved in k guesses


def summarize(records: Sequence[ResultsRecord]) -> ResultsSummary:
    """
    Summarize records. On ties the first record with the min (max) guess
    count is reported.
    """
    if not records:
        raise WordlerError("No results to summarize.")
    counts = np.array([r.guesses for r in records], dtype=np.int64)
    return ResultsSummary(
        count=len(records),
        min=records[int(np.argmin(counts))],
        max=records[int(np.argmax(counts))],
        mean=float(counts.mean()),
        histogram=np.bincount(counts).tolist(),
    )


def pretty_stats(summary: ResultsSummary) -> str:
    """
    Multi-line report, e.g.:

        Number of results: 3
        Min guesses: 2 for "crane"
        Max guesses: 4 for e.g. "geese"
        Mean guesses: 3.00
        Histogram stats:
        0, 0
        ...
    """
    lines = [
        f"Number of results: {summary.count}",
        f"Min guesses: {summary.min.guesses} for \"{summary.min.answer}\"",
        f"Max guesses: {summary.max.guesses} for e.g. \"{summary.max.answer}\"",
        f"Mean guesses: {summary.mean:.2f}",
        "Histogram stats:",
    ]
    lines += [f"{i}, {n}" for i, n in enumerate(summary.histogram)]
    return "\n".join(lines)
