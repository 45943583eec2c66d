"""
The game's own feedback for a guess against a known answer.

Used to auto-play the assistant in simulations: the interactive loop gets
feedback from a human, the harness gets it from here. Output uses the same
alphabet the user types ('g', 'y', '.').

Two passes, duplicate-safe:
  1) mark greens and count the answer letters that were not matched
  2) mark yellows only while that letter still has unmatched copies
"""

from collections import Counter

from .validation import GRAY, GREEN, YELLOW


def score(guess: str, answer: str) -> str:
    """
    Examples:
      score("belle", "level") -> ".gyyy"
      score("lemon", "level") -> "gg..."
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer must be the same length: {guess!r} vs {answer!r}")

    pattern = [GRAY] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = GREEN
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return "".join(pattern)
