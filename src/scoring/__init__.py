"""Guess correctness and point scoring."""

from .pipeline import check_guess, score_guess
from .points import compute_final_score
from .types import GuessVerdict, ScoreResult, SimilarityBreakdown

__all__ = [
    "GuessVerdict",
    "ScoreResult",
    "SimilarityBreakdown",
    "check_guess",
    "compute_final_score",
    "score_guess",
]
