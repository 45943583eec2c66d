"""
The interactive loop: suggest a word, read the game's feedback, fold it in.

The loop owns no I/O of its own. It talks through two hooks:
  - ask(prompt) -> str : read one line of feedback (default: input)
  - tell(message)      : show one line to the user (default: print)
so the CLI, tests and any future front end drive the same code.

Each turn:
  1) suggest from the current state; no survivors ends the session
  2) show "Guess '<word>'" and read a result line
  3) "ggggg" wins; otherwise update the state and go again

A result line is either "<feedback>" (the suggestion was played) or
"<feedback> <word>" (the user played something else). Bad lines are
rejected and the same guess is asked again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from wordle_assistant.config import DEFAULT_RANKER, SUGGESTION_LIMIT
from wordle_assistant.engine import (
    EMPTY_STATE, Candidate, ConstraintState, is_win, suggest, update_state,
    validate_feedback, validate_guess,
)
from wordle_assistant.errors import InvalidFeedbackError, NoGuessesLeftError

log = logging.getLogger(__name__)

WON = "won"
EXHAUSTED = "exhausted"
ABORTED = "aborted"
ERROR = "error"


@dataclass
class SessionResult:
    outcome: str
    state: ConstraintState
    history: List[Tuple[str, str]] = field(default_factory=list)
    message: str = ""

    @property
    def turns(self) -> int:
        return len(self.history)

    @property
    def won(self) -> bool:
        return self.outcome == WON


def next_guesses(
        state: ConstraintState,
        candidates: Sequence[Candidate],
        *,
        limit: int = SUGGESTION_LIMIT,
        ranker: str = DEFAULT_RANKER,
) -> List[str]:
    """Like suggest(), but an empty result raises NoGuessesLeftError."""
    words = suggest(state, candidates, limit=limit, ranker=ranker)
    if not words:
        raise NoGuessesLeftError(state)
    return words


def parse_reply(reply: str, suggested: str) -> Tuple[str, str]:
    """
    Split a result line into (played word, feedback).

    Raises InvalidFeedbackError for anything but one or two tokens.
    """
    parts = reply.split()
    if len(parts) == 1:
        return suggested, validate_feedback(parts[0])
    if len(parts) == 2:
        return validate_guess(parts[1]), validate_feedback(parts[0])
    raise InvalidFeedbackError("expected '<feedback>' or '<feedback> <word>', e.g. '..gy.'")


def play_session(
        candidates: Sequence[Candidate],
        *,
        ask: Optional[Callable[[str], str]] = None,
        tell: Optional[Callable[[str], None]] = None,
        state: ConstraintState = EMPTY_STATE,
        limit: int = SUGGESTION_LIMIT,
        ranker: str = DEFAULT_RANKER,
        show: bool = False,
) -> SessionResult:
    """
    Run one game to a win, exhaustion, end of input, or an unexpected fault.

    Never raises for ordinary failures; the outcome says how it ended.
    """
    ask = ask or input
    tell = tell or print
    history: List[Tuple[str, str]] = []
    try:
        while True:
            words = next_guesses(state, candidates, limit=limit, ranker=ranker)
            guess = words[0]
            tell(f"Guess '{guess}'")
            if show and len(words) > 1:
                tell("Also: " + ", ".join(words[1:]))

            while True:
                try:
                    reply = ask("Result: ")
                except (EOFError, KeyboardInterrupt):
                    tell("")
                    return SessionResult(ABORTED, state, history, "input closed")
                try:
                    played, feedback = parse_reply(reply, guess)
                    break
                except InvalidFeedbackError as e:
                    tell(f"Invalid result: {e}")

            history.append((played, feedback))
            if is_win(feedback):
                tell("You win!")
                return SessionResult(WON, state, history)

            state = update_state(state, played, feedback)
            log.debug("after %s/%s: %r", played, feedback, state)

    except NoGuessesLeftError as e:
        tell(f"ERROR: {e}")
        return SessionResult(EXHAUSTED, state, history, str(e))
    except Exception as e:  # loop boundary: report, don't crash
        log.debug("session aborted by unexpected error", exc_info=True)
        tell(f"ERROR: {e}")
        return SessionResult(ERROR, state, history, str(e))
