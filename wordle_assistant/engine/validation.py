"""
Shape checks for user-supplied guesses and feedback.

Feedback is one character per board position:
  - 'g' : green  = right letter, right position
  - 'y' : yellow = letter is in the word, but not here
  - '.' : gray   = letter is absent (or does not occur again)

Both helpers normalise (strip + lowercase) and return the clean string, or
raise InvalidFeedbackError. Extra or missing characters are never guessed at.
"""

from wordle_assistant.config import WORD_LENGTH
from wordle_assistant.errors import InvalidFeedbackError

GREEN = "g"
YELLOW = "y"
GRAY = "."
FEEDBACK_CHARS = frozenset(GREEN + YELLOW + GRAY)
WIN_FEEDBACK = GREEN * WORD_LENGTH


def validate_feedback(feedback: str) -> str:
    if not isinstance(feedback, str):
        raise InvalidFeedbackError(f"feedback must be a string; got {type(feedback).__name__}")
    f = feedback.strip().lower()
    if len(f) != WORD_LENGTH:
        raise InvalidFeedbackError(
            f"feedback must be exactly {WORD_LENGTH} characters; got {len(f)} ({f!r})")
    bad = sorted(set(f) - FEEDBACK_CHARS)
    if bad:
        raise InvalidFeedbackError(
            f"feedback may only use 'g', 'y' and '.'; got {''.join(bad)!r}")
    return f


def validate_guess(word: str) -> str:
    """
    Return the normalised guess if it has the right length and is a-z only.

    Dictionary membership is deliberately not checked: the user may have
    played a word the local dictionary does not know.
    """
    if not isinstance(word, str):
        raise InvalidFeedbackError(f"guess must be a string; got {type(word).__name__}")
    w = word.strip().lower()
    if len(w) != WORD_LENGTH or not (w.isascii() and w.isalpha()):
        raise InvalidFeedbackError(f"guess must be {WORD_LENGTH} letters a-z; got {word!r}")
    return w


def is_win(feedback: str) -> bool:
    return feedback.strip().lower() == WIN_FEEDBACK
