from .validator import validate_words, pretty_summary
from .io import read_lines, write_lines
from .source import (
    aspell_words, file_words, url_words, static_words, make_source,
    playable_words, load_candidates,
)

__all__ = [
    "validate_words", "pretty_summary", "read_lines", "write_lines",
    "aspell_words", "file_words", "url_words", "static_words", "make_source",
    "playable_words", "load_candidates",
]
