import pytest
from wordle_assistant.engine import EMPTY_STATE, ConstraintState, to_candidate
from wordle_assistant.errors import InvalidFeedbackError, NoGuessesLeftError
from wordle_assistant.harness.session import next_guesses, parse_reply, play_session

CANDS = [to_candidate(w) for w in ["crane", "slate", "abbey", "geese"]]


def _scripted(*replies):
    it = iter(replies)

    def ask(prompt):
        reply = next(it)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    return ask


def _run(cands, *replies, **kw):
    out = []
    r = play_session(cands, ask=_scripted(*replies), tell=out.append, **kw)
    return r, out


def test_wins_in_two():
    r, out = _run(CANDS, "..g.g", "ggggg")
    assert r.won and r.turns == 2
    assert r.history == [("crane", "..g.g"), ("slate", "ggggg")]
    assert out == ["Guess 'crane'", "Guess 'slate'", "You win!"]
    assert dict(r.state.greens) == {"a": {2}, "e": {4}}


def test_win_regardless_of_state():
    state = ConstraintState(grays={"z"}, yellows={"q": {1}})
    r, out = _run([to_candidate("quart")], "ggggg", state=state)
    assert r.won and r.turns == 1


def test_invalid_feedback_reprompts_same_guess():
    r, out = _run(CANDS, "gg", "..g-g", "..g.g", "ggggg")
    assert r.won and r.turns == 2
    assert sum(1 for line in out if line.startswith("Invalid result:")) == 2
    assert out[0] == "Guess 'crane'" and out[3] == "Guess 'slate'"


def test_played_other_word():
    cands = [to_candidate(w) for w in ["crane", "slate", "pious"]]
    r, out = _run(cands, "..g.g SLATE", "ggggg")
    assert r.won
    assert r.history == [("slate", "..g.g"), ("crane", "ggggg")]


def test_exhaustion_is_fatal():
    r, out = _run([to_candidate("crane")], ".....")
    assert r.outcome == "exhausted"
    assert out[-1] == "ERROR: No valid guesses left!"


def test_empty_dictionary_exhausts_immediately():
    r, out = _run([], "ggggg")
    assert r.outcome == "exhausted" and r.turns == 0


def test_end_of_input_aborts():
    r, out = _run(CANDS, "..g.g", EOFError())
    assert r.outcome == "aborted" and r.turns == 1


def test_unexpected_error_is_reported_not_raised():
    r, out = _run(CANDS, "ggggg", ranker="nope")
    assert r.outcome == "error"
    assert out[-1].startswith("ERROR: Unknown ranker id")


def test_show_prints_runners_up():
    r, out = _run(CANDS, "ggggg", show=True)
    assert out[:2] == ["Guess 'crane'", "Also: slate, abbey, geese"]


def test_next_guesses_raises_when_empty():
    with pytest.raises(NoGuessesLeftError):
        next_guesses(ConstraintState(greens={"a": {0}, "b": {0}}), CANDS)
    assert next_guesses(EMPTY_STATE, CANDS, limit=1) == ["crane"]


@pytest.mark.parametrize("reply,expected", [
    ("..gy.", ("crane", "..gy.")),
    ("  GGGGG ", ("crane", "ggggg")),
    ("..gy. Slate", ("slate", "..gy.")),
])
def test_parse_reply(reply, expected):
    assert parse_reply(reply, "crane") == expected


@pytest.mark.parametrize("reply", ["", "..gy. slate extra", "..gy. sl4te", "..gy"])
def test_parse_reply_rejects(reply):
    with pytest.raises(InvalidFeedbackError):
        parse_reply(reply, "crane")
