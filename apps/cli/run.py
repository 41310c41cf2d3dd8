# apps/cli/run.py
"""
Command line front end for wordler.

Default mode: the arguments are the hints seen so far, as pairs of
  <guess> <hint>     hint letters: 'g' green, 'y' yellow, '.' grey
and the best next guess is printed, e.g.

    python -m apps.cli.run raise y.gy. thumb yg...

Other modes:
  --solve WORD...   solve for the given answers and show the guesses
  --all             solve every answer in the list ("word, count" lines) - slow!
  --stats [FILE]    statistics over a results file (stdin if omitted)
  --play            play a game against a random answer
  --assist          suggest guesses for a live game; type each hint back in
  --test N          debugging helpers (1: match words, 2: list matches, 3: hint)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from wordler.datasets import (
    Vocabulary, default_paths, load_vocabulary, pretty_summary, validate_wordlists,
)
from wordler.engine import Feedback, InvalidHint, Word, WordlerError, filter_candidates
from wordler.harness import (
    DEFAULT_FIRST_GUESS, SolverConfig, Stopwatch, format_result, load_results,
    play_game, pretty_stats, run_batch, solve_word, suggest_guess, summarize, write_results,
)

log = logging.getLogger("wordler")


def _read_line(prompt: str) -> Optional[str]:
    """input() that returns None on EOF instead of raising."""
    try:
        return input(prompt)
    except EOFError:
        return None


def _make_hints(args: List[str], N: int) -> List[Feedback]:
    """Each consecutive pair of args is a guess-hint pair."""
    if len(args) % 2:
        raise WordlerError("An even number of arguments is required.")
    return [Feedback.parse(g, h, N) for g, h in zip(args[::2], args[1::2])]


def do_next_guess(args, vocab: Vocabulary, config: SolverConfig, verbose: bool) -> None:
    if not args and config.first_guess:
        print(f"First guess is \"{config.first_guess}\"" if verbose else config.first_guess)
        return
    hints = _make_hints(args, config.N)
    with Stopwatch("next guess") as sw:
        guess = suggest_guess(hints, answers=vocab.answers, allowed=vocab.allowed, config=config)
    if verbose:
        print(f"Time: {sw.elapsed:.02f} seconds")
        print(f"Best guess is \"{guess}\"")
    else:
        print(guess)


def do_assist(vocab: Vocabulary, config: SolverConfig, verbose: bool) -> None:
    hints: List[Feedback] = []
    while True:
        guess = suggest_guess(hints, answers=vocab.answers, allowed=vocab.allowed, config=config)
        print(f"Guess: {guess}")
        text = _read_line("Hint:  " if verbose else "")
        if not text or not text.strip():
            return
        try:
            fb = Feedback.parse(guess, text.strip(), config.N)
        except InvalidHint as e:
            print(e)
            continue
        if fb.solved:
            if verbose:
                print(f"Solved in {len(hints) + 1} guesses.")
            return
        hints.append(fb)


def do_play(vocab: Vocabulary, config: SolverConfig, verbose: bool, seed: Optional[int]) -> None:
    answer = random.Random(seed).choice(vocab.answers)
    log.debug("answer is %s", answer)
    play_game(answer, allowed=vocab.allowed, config=config, read_guess=_read_line, verbose=verbose)


def do_solve(args, vocab: Vocabulary, config: SolverConfig, verbose: bool) -> None:
    for arg in args:
        target = Word(arg, config.N)
        if verbose:
            print(f"Target: \"{target}\"")
        with Stopwatch(f"solve {target}") as sw:
            s = solve_word(target, answers=vocab.answers, allowed=vocab.allowed, config=config)
        for i, fb in enumerate(s.history, start=1):
            print(f"Guess #{i} is \"{fb.guess}\"" if verbose else fb.guess)
        s.raise_for_status()
        if verbose:
            print(f"Time: {sw.elapsed:.02f} seconds")
            print(f"Answer: \"{s.answer}\" in {s.guesses} tries")
        else:
            print(s.guesses)


def do_solve_all(vocab: Vocabulary, config: SolverConfig, progress: str, out: Optional[str]) -> None:
    results = run_batch(vocab.answers, answers=vocab.answers, allowed=vocab.allowed,
                        config=config, progress=progress)
    for s in results:
        if s.success:
            print(format_result(s))
    if out:
        print(f"Wrote: {write_results(results, out)}", file=sys.stderr)


def do_show_stats(args, N: int) -> None:
    records = load_results(args[0], N) if args else load_results(sys.stdin, N)
    print(pretty_stats(summarize(records)))


def do_test(test: int, args, vocab: Vocabulary, N: int, verbose: bool) -> None:
    if test == 1:
        # match words against a hint, e.g.: raise .y..g geese evade amaze
        if len(args) < 3:
            raise WordlerError("Requires 3+ args")
        hint = Feedback.parse(args[0], args[1], N)
        if verbose:
            print(f"hint: {hint}")
        for arg in args[2:]:
            word = Word(arg, N)
            print(f"{word} {str(hint.match(word)).lower()}")
    elif test == 2:
        # list the answers matching some hints, e.g.: raise .y..g grill y..y.
        matches = filter_candidates(vocab.answers, _make_hints(args, N))
        print(f"{len(matches)} matches" if verbose else len(matches))
        print(" ".join(matches))
    elif test == 3:
        # hint for a target and a guess, e.g.: grade guess
        if len(args) != 2:
            raise WordlerError("Requires 2 args")
        target, guess = Word(args[0], N), Word(args[1], N)
        if verbose:
            print(f"Target: {target} Guess: {guess}")
        print(Feedback.from_target(target, guess))
    else:
        raise WordlerError("Invalid test number")


def build_parser() -> argparse.ArgumentParser:
    default_answers, default_guesses = default_paths()
    ap = argparse.ArgumentParser(
        prog="wordler",
        description="Wordle solver - given a series of hints, compute which word to guess next",
        epilog="Example: wordler raise y.gy. thumb yg...")
    ap.add_argument("args", nargs="*",
                    help="hints as <guess> <hint> pairs, or mode-specific arguments")
    ap.add_argument("-i", "--init", default=DEFAULT_FIRST_GUESS,
                    help=f"initial guess word (default \"{DEFAULT_FIRST_GUESS}\", may be empty)")
    ap.add_argument("-d", "--hard", action="store_true", help="hard mode - guesses must match hints")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-p", "--play", action="store_true", help="play a game")
    mode.add_argument("--assist", action="store_true",
                      help="suggest guesses for a live game, reading hints from stdin")
    mode.add_argument("-s", "--solve", action="store_true", help="solve for the given answers")
    mode.add_argument("-a", "--all", action="store_true",
                      help="solve all possible answers - slow!")
    mode.add_argument("-x", "--stats", action="store_true",
                      help="display stats from a results file (or stdin if omitted)")
    mode.add_argument("-t", "--test", type=int, default=0, help="test mode (1, 2 or 3)")
    ap.add_argument("-v", "--verbose", action=argparse.BooleanOptionalAction, default=True,
                    help="display more output (default true)")
    ap.add_argument("--answers", default=str(default_answers), help="answers list, one per line")
    ap.add_argument("--guesses", default=str(default_guesses),
                    help="extra allowed guesses, one per line")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--workers", type=int, default=1,
                    help="processes used to score guesses")
    ap.add_argument("--seed", type=int, help="RNG seed for --play")
    ap.add_argument("--out", help="with --all: also write the results to this file")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar for --all (auto = bar if stderr is a terminal)")
    ap.add_argument("--debug", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    opts = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if opts.debug else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        config = SolverConfig(N=opts.N, first_guess=opts.init, hard_mode=opts.hard,
                              workers=opts.workers)
        if opts.stats:
            do_show_stats(opts.args, opts.N)
            return 0

        if opts.debug:
            log.debug(pretty_summary(validate_wordlists(opts.N, opts.answers, opts.guesses)))
        vocab = load_vocabulary(opts.answers, opts.guesses, opts.N)

        if opts.play:
            do_play(vocab, config, opts.verbose, opts.seed)
        elif opts.assist:
            do_assist(vocab, config, opts.verbose)
        elif opts.solve:
            do_solve(opts.args, vocab, config, opts.verbose)
        elif opts.all:
            do_solve_all(vocab, config, opts.progress, opts.out)
        elif opts.test:
            do_test(opts.test, opts.args, vocab, opts.N, opts.verbose)
        else:
            do_next_guess(opts.args, vocab, config, opts.verbose)
    except (WordlerError, OSError) as e:
        print(f"{ap.prog}: Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
