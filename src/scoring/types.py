"""Typed contracts for guess scoring."""

from dataclasses import asdict, dataclass, replace
import math
from typing import Any


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative scores (0.5 -> 1)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


@dataclass(frozen=True)
class SimilarityBreakdown:
    coverage: float
    semantic: float
    unigram: float
    bigram: float
    length_penalty: float
    score: float

    def rounded(self, digits: int = 2) -> "SimilarityBreakdown":
        return replace(
            self,
            coverage=round_half_up(self.coverage, digits),
            semantic=round_half_up(self.semantic, digits),
            unigram=round_half_up(self.unigram, digits),
            bigram=round_half_up(self.bigram, digits),
            length_penalty=round_half_up(self.length_penalty, digits),
            score=round_half_up(self.score, digits),
        )


@dataclass(frozen=True)
class GuessVerdict:
    is_correct: bool
    similarity: float
    method: str
    breakdown: SimilarityBreakdown | None = None
    guess_tokens: tuple[str, ...] = ()
    prompt_tokens: tuple[str, ...] = ()
    error: str | None = None

    def to_dict(self, include_debug: bool = True) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "is_correct": self.is_correct,
            "similarity": self.similarity,
            "method": self.method,
        }
        if self.error:
            payload["error"] = self.error
        if include_debug and self.breakdown is not None:
            payload["debug"] = {
                "guess_tokens": list(self.guess_tokens),
                "prompt_tokens": list(self.prompt_tokens),
                "breakdown": asdict(self.breakdown.rounded()),
            }
        return payload


@dataclass(frozen=True)
class ScoreResult:
    base_score: int
    time_bonus: int
    multiplier: float
    final_score: int
