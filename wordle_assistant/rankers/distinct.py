"""
Distinct-letter ranker (the default).

Prefers words with more distinct letters: each guess then probes more of the
alphabet. "crane" (5) beats "geese" (2). Ties are left to the caller's stable
sort, i.e. dictionary order.
"""

from __future__ import annotations

from .base import BaseRanker, register


@register
class DistinctLettersRanker(BaseRanker):
    id = "distinct"
    name = "Distinct letters"
    version = "1.0.0"

    def score(self, candidate) -> int:
        return len(candidate.letter_set)
