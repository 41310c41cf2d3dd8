import pytest
from wordler.datasets import load_vocabulary
from wordler.engine import EmptyCandidatePool, Feedback, GuessBudgetExhausted, InvalidConfig
from wordler.harness import (
    Solution, SolveStatus, SolverConfig, play_game, run_batch, solve_word, suggest_guess,
)

ANSWERS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop",
           "geese", "level", "those", "amaze", "evade", "cloud", "plaid"]
ALLOWED = ANSWERS + ["slate", "adieu"]


@pytest.fixture(scope="module")
def vocab():
    return load_vocabulary()


def test_solve_crane_bundled_vocabulary(vocab):
    # bundled lists are a subset of the full ones; the opener is the configured default
    s = solve_word("crane", answers=vocab.answers, allowed=vocab.allowed)
    assert s.success and s.status is SolveStatus.SOLVED
    assert 1 <= s.guesses <= 6
    assert s.history[0].guess == "raise"
    assert s.history[-1].solved and s.history[-1].guess == "crane"


def test_first_guess_is_computed_deterministically():
    cfg = SolverConfig(first_guess="")
    a = solve_word("crane", answers=ANSWERS, allowed=ALLOWED, config=cfg)
    b = solve_word("crane", answers=ANSWERS, allowed=ALLOWED, config=cfg)
    assert a.success
    assert a.history[0].guess == b.history[0].guess
    assert [fb.guess for fb in a.history] == [fb.guess for fb in b.history]


@pytest.mark.parametrize("target", ANSWERS)
def test_every_answer_solved_without_repeats(target):
    s = solve_word(target, answers=ANSWERS, allowed=ALLOWED, config=SolverConfig(first_guess=""))
    assert s.success and s.guesses <= 6
    guesses = [fb.guess for fb in s.history]
    assert len(guesses) == len(set(guesses))


def test_unknown_target_terminates():
    try:
        s = solve_word("fjord", answers=ANSWERS, allowed=ALLOWED)
    except EmptyCandidatePool as e:
        assert e.step is not None and e.step >= 1
        assert isinstance(e.feedback, Feedback)
    else:
        assert not s.success
        assert s.status is SolveStatus.EXHAUSTED


def test_exhausted_solution_raises_for_status():
    s = solve_word("cloud", answers=ANSWERS, allowed=ALLOWED,
                   config=SolverConfig(max_turns=1))
    assert s.status is SolveStatus.EXHAUSTED and s.guesses == 1
    with pytest.raises(GuessBudgetExhausted):
        s.raise_for_status()


def test_hard_mode_guesses_respect_hints():
    cfg = SolverConfig(hard_mode=True, first_guess="")
    assert cfg.turn_budget == 99
    s = solve_word("level", answers=ANSWERS, allowed=ALLOWED, config=cfg)
    assert s.success
    for i, fb in enumerate(s.history):
        assert all(prev.match(fb.guess) for prev in s.history[:i])


def test_suggest_opener_and_followup(vocab):
    assert suggest_guess([], answers=vocab.answers, allowed=vocab.allowed) == "raise"
    fb = Feedback.from_target("crane", "raise")
    nxt = suggest_guess([fb], answers=vocab.answers, allowed=vocab.allowed)
    assert nxt != "raise"
    assert nxt in vocab.allowed


def test_suggest_small_pools():
    fbs = [Feedback.parse("raise", "yy..g"), Feedback.parse("trace", ".gggg")]
    answers = ANSWERS + ["brace", "grace"]
    assert suggest_guess(fbs, answers=answers, allowed=ALLOWED) == "brace"
    assert suggest_guess(fbs, answers=ANSWERS + ["grace"], allowed=ALLOWED) == "grace"


def test_suggest_inconsistent_hints():
    fbs = [Feedback.parse("raise", "ggggg"), Feedback.parse("crane", "ggggg")]
    with pytest.raises(EmptyCandidatePool) as exc:
        suggest_guess(fbs, answers=ANSWERS, allowed=ALLOWED)
    assert exc.value.step == 2


def test_run_batch_records_failures():
    results = run_batch(["crane", "fjord", "level"], answers=ANSWERS, allowed=ALLOWED)
    assert [s.answer for s in results] == ["crane", "fjord", "level"]
    assert results[0].success and results[2].success
    assert not results[1].success
    assert run_batch(ANSWERS, answers=ANSWERS, allowed=ALLOWED, sample=2)[1].answer == "raise"


def _scripted(lines):
    it = iter(lines)
    return lambda prompt: next(it, None)


def test_play_game_win():
    shown = []
    s = play_game("crane", allowed=ALLOWED, read_guess=_scripted(["xxxxx", "raise", "crane"]),
                  show=shown.append)
    assert s.success and s.guesses == 2
    assert shown[0] == "Invalid guess - try again"
    assert shown[1].strip() == "yy..g"
    assert "found in 2 tries" in shown[-1]


def test_play_game_give_up_and_lose():
    s = play_game("crane", allowed=ALLOWED, read_guess=_scripted(["raise"]), show=lambda t: None)
    assert not s.success and s.guesses == 1

    shown = []
    s = play_game("crane", allowed=ALLOWED, read_guess=_scripted(["raise"] * 6),
                  show=shown.append, verbose=False)
    assert s.status is SolveStatus.EXHAUSTED and s.guesses == 6
    assert shown[-1] == "Answer \"crane\" was not found in 6 tries."


def test_play_hard_mode_rejects_inconsistent_guess():
    shown = []
    s = play_game("crane", allowed=ALLOWED, config=SolverConfig(hard_mode=True),
                  read_guess=_scripted(["raise", "scoop", "crane"]), show=shown.append)
    assert s.success and s.guesses == 2
    assert "Invalid guess - try again" in shown


def test_config_validation():
    with pytest.raises(ValueError):
        SolverConfig(first_guess="toolong")
    with pytest.raises(InvalidConfig):
        SolverConfig(workers=0)
    with pytest.raises(InvalidConfig):
        SolverConfig(max_turns=0)
    assert SolverConfig(first_guess="").first_guess is None
    assert isinstance(Solution("crane", 1), Solution)
