"""
Word sources: where the candidate universe comes from.

A word source is any zero-argument callable returning a finite sequence of
strings. It is called exactly once, at startup, before the first turn. The
tokens may be in any case and contain junk; load_candidates() keeps only
playable words (see engine.candidate.is_wordle_word).

Sources:
  - aspell_words : `aspell dump master` (the system spell-check dictionary)
  - file_words   : a newline-delimited text file
  - url_words    : a newline-delimited list over HTTP
  - static_words : an in-memory list (tests, embedding)

make_source("aspell" | "file:<path>" | "url:<url>" | "<path>") picks one
from a config string.
"""

from __future__ import annotations

import functools
import logging
import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, Sequence

import requests

from wordle_assistant.config import ASPELL_COMMAND
from wordle_assistant.engine.candidate import Candidate, is_wordle_word, to_candidate
from wordle_assistant.errors import WordSourceError
from .io import read_lines, unique_preserve_order

log = logging.getLogger(__name__)

WordSource = Callable[[], Sequence[str]]

URL_TIMEOUT_S = 30


def aspell_words(command: Sequence[str] = ASPELL_COMMAND) -> List[str]:
    """
    Every word in the aspell master dictionary.

    Blocks until the tool exits; there is no timeout. Undecodable bytes
    become U+FFFD, so such tokens simply fail the playable-word check.
    """
    try:
        out = subprocess.run(
            list(command), check=True, capture_output=True,
            encoding="utf-8", errors="replace",
        ).stdout
    except FileNotFoundError as e:
        raise WordSourceError(f"word source command not found: {command[0]}") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise WordSourceError(
            f"word source command failed ({' '.join(command)}, exit {e.returncode}): {stderr}"
        ) from e
    return out.split("\n")


def file_words(path: Path | str) -> List[str]:
    try:
        return read_lines(path)
    except OSError as e:
        raise WordSourceError(f"cannot read word list {path}: {e}") from e


def url_words(url: str, timeout: float = URL_TIMEOUT_S) -> List[str]:
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise WordSourceError(f"cannot fetch word list {url}: {e}") from e
    return r.text.splitlines()


def static_words(words: Iterable[str]) -> WordSource:
    frozen = tuple(words)
    return lambda: list(frozen)


def make_source(spec: str) -> WordSource:
    """
    Turn a config string into a word source (not yet called).

    Raises ValueError for an empty spec.
    """
    spec = (spec or "").strip()
    if not spec:
        raise ValueError("word source spec must not be empty")
    if spec == "aspell":
        return aspell_words
    if spec.startswith("file:"):
        return functools.partial(file_words, spec[len("file:"):])
    if spec.startswith("url:"):
        return functools.partial(url_words, spec[len("url:"):])
    if spec.startswith(("http://", "https://")):
        return functools.partial(url_words, spec)
    return functools.partial(file_words, spec)


def playable_words(words: Iterable[str]) -> List[str]:
    """Playable tokens in first-seen order, duplicates dropped."""
    stripped = (w.strip() for w in words)
    return unique_preserve_order(w for w in stripped if is_wordle_word(w))


def load_candidates(source: WordSource) -> List[Candidate]:
    """
    Call `source` once and build the candidate universe.

    Raises WordSourceError if the source fails or yields no playable word.
    """
    raw = source()
    words = playable_words(raw)
    log.debug("word source returned %d tokens, %d playable", len(raw), len(words))
    if not words:
        raise WordSourceError("word source produced no five-letter lowercase words")
    return [to_candidate(w) for w in words]
