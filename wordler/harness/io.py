"""
Results log I/O.

A results log is plain text, one solved word per line with the number of
guesses it took, e.g.:

    atlas, 3
    crane, 2

- format_result / write_results: produce that format from Solutions.
- parse_result / load_results:   read it back as ResultsRecords.

The format is shared with existing logs, so it must not change.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, List, NamedTuple, Union

from wordler.engine import InvalidWord, MalformedResultsRecord, WORD_LEN, Word
from .core import Solution


class ResultsRecord(NamedTuple):
    answer: Word
    guesses: int


def format_result(solution: Union[Solution, ResultsRecord]) -> str:
    return f"{solution.answer}, {solution.guesses}"


def write_results(solutions: Iterable[Solution], path: Union[str, Path], *,
                  append: bool = False) -> str:
    """
    Write one line per solved Solution; unsolved ones are skipped.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a" if append else "w", encoding="utf-8") as f:
        for s in solutions:
            if s.success:
                f.write(format_result(s) + "\n")
    return str(p)


def parse_result(line: str, N: int = WORD_LEN) -> ResultsRecord:
    """Parse one "word, count" line."""
    line = line.rstrip("\r\n")
    word, sep, count = line.partition(",")
    if not sep:
        raise MalformedResultsRecord(f"Bad results data: {line!r}")
    try:
        answer = Word(word, N)
    except InvalidWord as e:
        raise MalformedResultsRecord(f"Bad results data: {line!r}") from e
    count = count.strip(" ")
    if not (count.isascii() and count.isdigit()):
        raise MalformedResultsRecord(f"Bad results data: {line!r}")
    return ResultsRecord(answer, int(count))


def load_results(source: Union[str, Path, IO[str], Iterable[str]], N: int = WORD_LEN) -> List[ResultsRecord]:
    """
    Load a results log from a path, an open text stream (e.g. sys.stdin) or
    any iterable of lines. Blank lines are ignored.
    """
    if isinstance(source, (str, Path)):
        p = Path(source)
        if not p.exists():
            raise FileNotFoundError(p)
        lines: Iterable[str] = p.read_text(encoding="utf-8").splitlines()
    else:
        lines = source
    return [parse_result(ln, N) for ln in lines if ln.strip()]
