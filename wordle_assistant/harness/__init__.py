from .core import run_case, run_batch, summarize
from .io import write_csv, write_manifest
from .session import SessionResult, play_session, next_guesses, parse_reply

__all__ = [
    "run_case", "run_batch", "summarize", "write_csv", "write_manifest",
    "SessionResult", "play_session", "next_guesses", "parse_reply",
]
