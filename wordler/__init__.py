"""wordler: a Wordle solver that minimizes the expected number of remaining answers."""

__version__ = "0.1.0"
