"""
Word-list validator.

What this module does:
- Validate a pair of word lists: answers_N.txt (the answer vocabulary) and
  guesses_N.txt (extra words accepted as guesses on top of the answers).
- Enforce formatting rules (lowercase a–z only, exact length N, one per line).
- Count duplicates and invalid lines; compute SHA-256 of the raw files.
- Report how many extra guesses are already answers (harmless, but wasted work).
- Return a machine-readable dict and a pretty one-line summary.

Typical use:
    from wordler.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "answers_5.txt", "guesses_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordler.engine import InvalidWord, Word


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # valid words
    sha256: str          # of the raw bytes ("" if missing)
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    N: int
    answers: FileReport
    guesses: FileReport
    overlap: int         # extra guesses that are also answers
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Return (valid_words, invalid_count). Blank lines are ignored; anything
    that isn't a Word of length N counts as invalid.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            try:
                valid.append(Word(w, N))
            except InvalidWord:
                invalid += 1
    return valid, invalid


def _report(path: Path, N: int, issues: List[str], label: str) -> Tuple[FileReport, List[str]]:
    if not path.exists():
        issues.append(f"{label} file not found: {path}")
        return FileReport(str(path), False, 0, "", 0, 0), []

    words, invalid = _load_and_check(path, N)
    rep = FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return rep, words


def validate_wordlists(N: int, answers_path: str, guesses_path: str) -> Dict:
    """
    Validate the answers / extra-guesses lists for length N.

    `passed` is strict for the answers (must exist, be non-empty and have no
    invalid lines) and for the guesses file only if it exists: an absent
    extra-guesses file just means "answers only".
    """
    issues: List[str] = []

    ans_rep, answers = _report(Path(answers_path), N, issues, "answers")
    gp = Path(guesses_path)
    if gp.exists():
        gue_rep, guesses = _report(gp, N, issues, "guesses")
    else:
        gue_rep, guesses = FileReport(str(gp), False, 0, "", 0, 0), []

    if ans_rep.exists and ans_rep.count == 0:
        issues.append("answers file contains 0 valid words")

    overlap = len(set(answers) & set(guesses))
    if overlap:
        issues.append(f"{overlap} extra guess(es) already in answers")

    passed = (
            ans_rep.exists
            and ans_rep.count > 0
            and ans_rep.invalid_lines == 0
            and gue_rep.invalid_lines == 0
    )

    rep = ValidationReport(
        N=N,
        answers=ans_rep,
        guesses=gue_rep,
        overlap=overlap,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner, e.g.:
        N=5 | answers=180 (uniq=180, sha=abc123...) | guesses=90 (uniq=90, sha=def456...) | overlap=0 | OK
    """
    a = report["answers"]
    b = report["guesses"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| guesses={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| overlap={report['overlap']} | {status}"
    )
