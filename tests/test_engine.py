import pytest
from wordler.engine import (
    Feedback, HintSymbol, InvalidHint, InvalidWord, Word, check_hint, score,
    exclude_guessed, filter_candidates, validate_guess,
)

# --- N=5 golden tests (duplicates + placements); score(guess, target) ---
@pytest.mark.parametrize("guess,target,expected", [
    ("belle","level",".gyyy"),
    ("level","level","ggggg"),
    ("lemon","level","gg..."),
    ("cools","scoop","yyg.y"),
    ("scoop","scoop","ggggg"),
    ("crane","crane","ggggg"),
    ("raise","crane","yy..g"),
    ("stare","crane","..gyg"),
    ("raise","geese","...gg"),
    ("erase","geese","y..gg"),
    ("eerie","geese","yg..g"),
    ("geese","those","...gg"),
])
def test_score_n5_golden(guess, target, expected):
    assert score(guess, target) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,target,expected", [
    ("settle","letter",".gggyy"),
    ("little","letter","g.gg.y"),
    ("planet","palate","gyy.yy"),
    ("kitten","tinket","ygyygy"),
])
def test_score_n6_samples(guess, target, expected):
    assert score(guess, target) == expected


def test_word_validation():
    assert Word("crane") == "crane"
    assert Word("letter", 6) == "letter"
    for bad in ["cranes", "CRANE", "cr4ne", "", "crané"]:
        with pytest.raises(InvalidWord):
            Word(bad)
    with pytest.raises(InvalidWord):
        Word(Word("crane"), 6)


def test_hint_validation():
    assert check_hint("gy.y.") == (HintSymbol.GREEN, HintSymbol.YELLOW, HintSymbol.GREY,
                                   HintSymbol.YELLOW, HintSymbol.GREY)
    for bad in ["gy.y", "gy.yx", "GY.Y."]:
        with pytest.raises(InvalidHint):
            Feedback.parse("raise", bad)
    with pytest.raises(InvalidWord):
        Feedback.parse("rais", "gy.y.")
    with pytest.raises(InvalidWord):
        Feedback("RA1SE", ".....")
    assert isinstance(Feedback("raise", "yy..g").guess, Word)


def test_feedback_text_form():
    fb = Feedback.parse("raise", "yy..g")
    assert fb.pattern == "yy..g"
    assert str(fb) == "raise yy..g"
    assert not fb.solved
    assert Feedback.from_target("crane", "crane").solved


@pytest.mark.parametrize("word,expected", [
    ("geese", False),   # no 'a'
    ("evade", True),
    ("amaze", True),
    ("fubar", False),   # green 'e' missing
    ("exact", False),
    ("blend", False),
])
def test_match_against_hint(word, expected):
    assert Feedback.parse("raise", ".y..g").match(word) is expected


def test_all_grey_excludes_letters():
    fb = Feedback.parse("raise", ".....")
    assert not fb.match("geese")
    assert not fb.match("crane")
    assert fb.match("cloud")


def test_yellow_cannot_sit_in_its_own_slot():
    fb = Feedback.parse("crane", "..y..")
    assert not fb.match("plaid")
    assert fb.match("about")


def test_green_and_grey_copy_of_same_letter():
    # the second 'e' of "geese" is green, the others grey: only one 'e' allowed
    fb = Feedback.from_target("those", "geese")
    assert fb.pattern == "...gg"
    assert fb.match("those")
    assert not fb.match("geese")
    assert not fb.match("eerie")


WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop",
         "geese", "level", "belle", "eerie", "those", "amaze", "evade"]


@pytest.mark.parametrize("target", WORDS)
@pytest.mark.parametrize("guess", WORDS)
def test_derived_feedback_matches_its_target(target, guess):
    assert Feedback.from_target(target, guess).match(target)


@pytest.mark.parametrize("w", WORDS)
def test_reflexive_feedback_is_all_green(w):
    assert Feedback.from_target(w, w).pattern == "ggggg"


def test_filter_candidates_keeps_order():
    words = ["crane","raise","stare","trace","cared","racer","scoop"]
    cand = filter_candidates(words, [Feedback.parse("raise", "yy..g")])
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand
    assert cand == [w for w in words if w in cand]


def test_filter_is_idempotent_and_shrinks():
    fb = Feedback.from_target("crane", "stare")
    once = filter_candidates(WORDS, [fb])
    assert filter_candidates(once, [fb]) == once
    assert len(once) <= len(WORDS)
    assert WORDS == ["crane", "raise", "stare", "trace", "cared", "racer", "scoop",
                     "geese", "level", "belle", "eerie", "those", "amaze", "evade"]


def test_filter_candidates_n6_basic():
    words = ["letter","settle","little","tattle","better"]
    cand = filter_candidates(words, [Feedback.parse("settle", ".gggyy", 6)])
    assert "letter" in cand and "better" not in cand


def test_exclude_guessed_keeps_solved_words():
    fbs = [Feedback.from_target("crane", "trace"), Feedback.from_target("crane", "crane")]
    assert exclude_guessed(["trace", "crane", "cared"], fbs) == ["crane", "cared"]


def test_validate_guess_n5():
    allowed = {"crane","raise","stare"}
    assert validate_guess("crane", allowed, N=5) is True
    assert validate_guess(" crane\n", ["crane"], N=5) is True
    assert validate_guess("CRANE", allowed, N=5) is False
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("trace", allowed, N=5) is False
    assert validate_guess(None, allowed, N=5) is False
