"""
Defaults for the assistant and the CLIs.

Constants are the single source of truth; Settings.from_env() lets the
environment override the ones a user is likely to tweak, and the CLIs let
argparse flags override those in turn.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

WORD_LENGTH = 5

# How many suggestions the engine returns per turn.
SUGGESTION_LIMIT = 10

# Wordle turn budget; only the simulation harness enforces it.
WORDLE_MAX_TURNS = 6

DEFAULT_SOURCE = "aspell"
DEFAULT_RANKER = "distinct"
ASPELL_COMMAND = ("aspell", "dump", "master")

ENV_SOURCE = "WORDLE_ASSISTANT_SOURCE"
ENV_LIMIT = "WORDLE_ASSISTANT_LIMIT"
ENV_RANKER = "WORDLE_ASSISTANT_RANKER"


def positive_int(value: str) -> int:
    """Parse a count that must be at least 1 (argparse `type=` and env values)."""
    n = int(value)
    if n < 1:
        raise ValueError(f"must be >= 1; got {n}")
    return n


@dataclass(frozen=True)
class Settings:
    source: str = DEFAULT_SOURCE
    limit: int = SUGGESTION_LIMIT
    ranker: str = DEFAULT_RANKER

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read overrides from the environment (or any mapping, for tests).

        Raises ValueError if WORDLE_ASSISTANT_LIMIT is not a positive integer.
        """
        env = os.environ if environ is None else environ
        limit_raw = env.get(ENV_LIMIT)
        limit = SUGGESTION_LIMIT
        if limit_raw:
            try:
                limit = positive_int(limit_raw)
            except ValueError as e:
                raise ValueError(f"{ENV_LIMIT} must be a positive integer; got {limit_raw!r}") from e
        return cls(
            source=env.get(ENV_SOURCE) or DEFAULT_SOURCE,
            limit=limit,
            ranker=env.get(ENV_RANKER) or DEFAULT_RANKER,
        )
