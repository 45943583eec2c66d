"""
Plain-text word list I/O: one token per line, UTF-8.
"""

from __future__ import annotations
from pathlib import Path
from typing import Callable, Hashable, Iterable, List, Optional


def read_lines(p: Path | str, *, skip_blank: bool = False) -> List[str]:
    """
    Read a word list into a list of lines, stripping trailing CR/LF.
    With skip_blank, whitespace-only lines are dropped.
    Undecodable bytes are replaced with U+FFFD rather than raising.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines = [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8", errors="replace").splitlines()]
    if skip_blank:
        lines = [ln for ln in lines if ln.strip()]
    return lines


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one token per line with a trailing newline, creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def unique_preserve_order(items: Iterable[str],
                          key: Optional[Callable[[str], Hashable]] = None) -> List[str]:
    """Drop repeats, keeping the first occurrence of each (by `key`)."""
    seen, out = set(), []
    for s in items:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out
