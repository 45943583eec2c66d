"""
Word list report for the candidate universe.

What this module does:
- Count the raw tokens a word source returned and how many are playable
  (exactly five lowercase letters a-z).
- Count duplicates among the playable words and the rejected tokens.
- Hash the playable list so two runs can be compared.
- Return a machine-readable dict (for manifests) and a one-line summary.

Typical use:
    from wordle_assistant.datasets import validate_words, pretty_summary
    rep = validate_words(aspell_words())
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List
import hashlib

from wordle_assistant.engine.candidate import is_wordle_word


@dataclass
class WordListReport:
    total: int           # raw tokens returned by the source (blank lines excluded)
    count: int           # playable tokens, duplicates included
    unique_count: int    # playable tokens after dedupe
    invalid: int         # tokens rejected by the validity rule
    sha256: str          # SHA-256 of the unique playable words, newline-joined
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_words(words: Iterable[str]) -> str:
    h = hashlib.sha256()
    for w in words:
        h.update(w.encode("utf-8"))
        h.update(b"\n")
    return h.hexdigest()


def validate_words(words: Iterable[str]) -> Dict:
    """
    Summarise a raw word list.

    `passed` only requires at least one playable word: rejected tokens are
    normal for a spell-check dictionary (proper nouns, other lengths).
    """
    tokens = [w.strip() for w in words if w.strip()]
    valid = [w for w in tokens if is_wordle_word(w)]
    unique = list(dict.fromkeys(valid))

    issues: List[str] = []
    if not unique:
        issues.append("word list contains 0 playable words")
    if len(valid) != len(unique):
        issues.append(f"word list has {len(valid) - len(unique)} duplicate playable word(s)")

    rep = WordListReport(
        total=len(tokens),
        count=len(valid),
        unique_count=len(unique),
        invalid=len(tokens) - len(valid),
        sha256=_sha256_words(unique),
        passed=bool(unique),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console.

    Example:
        words=5163 (uniq=5163, sha=abc123def456) | tokens=123456 | rejected=118293 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| tokens={report['total']} | rejected={report['invalid']} | {status}"
    )
