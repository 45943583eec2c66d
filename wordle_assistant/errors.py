"""
Exception types raised by the assistant.

Everything here derives from WordleAssistantError so a CLI can catch the
whole family at its boundary. Feedback problems are also ValueErrors.
"""


class WordleAssistantError(Exception):
    """Base class for assistant errors."""


class InvalidFeedbackError(WordleAssistantError, ValueError):
    """A guess or feedback string has the wrong shape or alphabet."""


class NoGuessesLeftError(WordleAssistantError):
    """No dictionary word satisfies the accumulated constraints."""

    def __init__(self, state=None):
        super().__init__("No valid guesses left!")
        self.state = state


class WordSourceError(WordleAssistantError):
    """The word source could not produce a candidate universe."""
