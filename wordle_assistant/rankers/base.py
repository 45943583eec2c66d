from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Sequence, Type

if TYPE_CHECKING:
    from wordle_assistant.engine.candidate import Candidate

# ---- Global ranker registry ----
REGISTRY: Dict[str, Type["BaseRanker"]] = {}


def register(cls: Type["BaseRanker"]) -> Type["BaseRanker"]:
    """
    Decorator: @register on a ranker class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate ranker id: {rid}")
    REGISTRY[rid] = cls
    return cls


# ---- Base class that rankers inherit ----
class BaseRanker:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def prepare(self, pool: Sequence["Candidate"]) -> None:
        """Called once per turn with the surviving candidates, before scoring."""

    def score(self, candidate: "Candidate") -> float:
        """Higher is better. Must be deterministic."""
        raise NotImplementedError("Override in subclass")
