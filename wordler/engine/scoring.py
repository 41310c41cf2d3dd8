"""
Wordle-style scoring (feedback) for a single (guess, target) pair.

Conventions (the textual encoding used in results logs and on the CLI):
  - 'g' : green  = correct letter in the correct position
  - 'y' : yellow = correct letter in the wrong position
  - '.' : grey   = letter not present (or present fewer times than guessed)

Algorithm (letters are "consumed" once matched):
  1) Green pass: every position where guess and target agree is green, and
     both letters are blanked out so they can't match again.
  2) Yellow pass: for each remaining guess letter, scan the remaining target
     letters left to right; the first equal one makes it yellow and both
     letters are blanked out.
  3) Everything else stays grey.
"""

from __future__ import annotations

GREEN = "g"
YELLOW = "y"
GREY = "."

# Never equal to a word letter.
_USED = "#"


def score(guess: str, target: str) -> str:
    """
    Compute the hint string that `guess` earns when `target` is hidden.

    Examples:
      score("belle", "level") -> ".gyyy"
      score("raise", "geese") -> "...gg"
    """
    assert len(guess) == len(target), "Guess and target must be the same length"

    g = list(guess)
    t = list(target)
    hint = [GREY] * len(g)

    for i, (cg, ct) in enumerate(zip(g, t)):
        if cg == ct:
            hint[i] = GREEN
            g[i] = t[i] = _USED

    for i, cg in enumerate(g):
        if cg == _USED:
            continue
        for j, ct in enumerate(t):
            if cg == ct:
                hint[i] = YELLOW
                g[i] = t[j] = _USED
                break

    return "".join(hint)
