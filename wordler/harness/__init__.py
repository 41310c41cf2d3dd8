from .config import SolverConfig, WORDLE_MAX_TURNS, HARD_MODE_MAX_TURNS, DEFAULT_FIRST_GUESS
from .core import Solution, SolveStatus, solve_word, suggest_guess, run_batch
from .play import play_game
from .io import ResultsRecord, format_result, write_results, parse_result, load_results
from .stats import ResultsSummary, summarize, pretty_stats
from .timing import Stopwatch

__all__ = [
    "SolverConfig", "WORDLE_MAX_TURNS", "HARD_MODE_MAX_TURNS", "DEFAULT_FIRST_GUESS",
    "Solution", "SolveStatus", "solve_word", "suggest_guess", "run_batch",
    "play_game",
    "ResultsRecord", "format_result", "write_results", "parse_result", "load_results",
    "ResultsSummary", "summarize", "pretty_stats",
    "Stopwatch",
]
