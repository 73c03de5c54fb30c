import random

import pytest
from wordmastermind.engine import MAX_GUESS, EmptyWordListError, RoundEngine


def test_empty_word_list_is_fatal():
    with pytest.raises(EmptyWordListError):
        RoundEngine([])


def test_secret_always_from_word_list():
    words = ["crane", "night", "plant", "stone"]
    engine = RoundEngine(words, seed=7)
    for _ in range(50):
        assert engine.secret in words
        engine.start_round()


def test_seeded_engines_draw_same_secrets():
    words = ["crane", "night", "plant", "stone", "audio"]
    a = RoundEngine(words, seed=42)
    b = RoundEngine(words, rng=random.Random(42))
    for _ in range(10):
        assert a.secret == b.secret
        a.start_round()
        b.start_round()


def test_win_increments_once_and_restarts():
    engine = RoundEngine(["crane"])
    engine.submit_guess("light")
    engine.submit_guess("plant")
    before = engine.guess_count

    out = engine.submit_guess("crane")
    assert out.kind == "won"
    assert out.guess_count == before + 1
    assert out.secret == "crane"
    assert out.feedback == ()
    assert out.round_over
    # new round already running
    assert engine.guess_count == 0
    assert engine.feedback == ()
    assert engine.history == []
    assert engine.rounds_won == 1


def test_first_guess_win():
    engine = RoundEngine(["crane"])
    out = engine.submit_guess("crane\n")
    assert out.kind == "won" and out.guess_count == 1


@pytest.mark.parametrize("bad", ["abc", "aabbc", "ab1de", "CRANE", "", "crane "])
def test_illegal_guess_does_not_count(bad):
    engine = RoundEngine(["crane"])
    engine.submit_guess("light")
    out = engine.submit_guess(bad)
    assert out.kind == "invalid"
    assert engine.guess_count == 1
    assert out.remaining == MAX_GUESS - 1
    assert engine.history == [("light", ("miss", "miss", "miss", "miss", "miss"))]


def test_feedback_outcome():
    engine = RoundEngine(["night"])
    out = engine.submit_guess("light")
    assert out.kind == "feedback"
    assert out.feedback == ("miss", "exact", "exact", "exact", "exact")
    assert out.guess_count == 1
    assert out.remaining == MAX_GUESS - 1
    assert out.secret is None
    assert engine.feedback == out.feedback


def test_exit_token_leaves_state_alone():
    engine = RoundEngine(["crane"])
    engine.submit_guess("light")
    out = engine.submit_guess("/\n")
    assert out.kind == "exit"
    assert engine.guess_count == 1


def test_exhaustion_loses_and_restarts():
    engine = RoundEngine(["crane"])
    for n in range(1, MAX_GUESS):
        out = engine.submit_guess("light")
        assert out.kind == "feedback"
        assert out.remaining == MAX_GUESS - n

    out = engine.submit_guess("light")
    assert out.kind == "lost"
    assert out.guess_count == MAX_GUESS
    assert out.remaining == 0
    assert out.secret == "crane"
    assert len(out.feedback) == 5
    assert engine.guess_count == 0
    assert engine.rounds_lost == 1


def test_win_on_last_guess_is_a_win():
    engine = RoundEngine(["crane"])
    for _ in range(MAX_GUESS - 1):
        engine.submit_guess("light")
    out = engine.submit_guess("crane")
    assert out.kind == "won"
    assert out.guess_count == MAX_GUESS
    assert engine.rounds_lost == 0


def test_invalid_guesses_never_exhaust_round():
    engine = RoundEngine(["crane"])
    for _ in range(MAX_GUESS * 2):
        assert engine.submit_guess("hello").kind == "invalid"
    assert engine.guess_count == 0


def test_illegal_words_never_become_secrets():
    engine = RoundEngine(["hello", "crane", "CRANE", "abc"], seed=5)
    assert engine.words == ("crane",)
    for _ in range(10):
        assert engine.secret == "crane"
        engine.start_round()
    assert engine.submit_guess("crane").kind == "won"


def test_word_list_with_only_illegal_words_is_fatal():
    with pytest.raises(EmptyWordListError):
        RoundEngine(["hello", "aabbc", "ab1de"])
