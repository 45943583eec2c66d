"""
wordle_assistant: suggest guesses for a five-letter word-deduction game.
"""

__version__ = "0.1.0"
