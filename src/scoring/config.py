"""Fixed constants for guess scoring."""

from dataclasses import dataclass

STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "the",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "is",
        "it",
        "and",
        "or",
    }
)


@dataclass(frozen=True)
class ScoringConfig:
    """Constants controlling guess correctness and point awards."""

    ngram_size: int = 2

    coverage_weight: float = 0.35
    semantic_weight: float = 0.30
    unigram_weight: float = 0.20
    bigram_weight: float = 0.05
    length_weight: float = 0.10

    word_match_coverage: float = 0.99
    word_match_length_ratio: float = 0.8
    word_match_similarity: float = 0.98

    single_word_threshold: float = 0.90
    multi_word_coverage: float = 0.70
    multi_word_threshold: float = 0.75
    fallback_coverage: float = 0.90

    fast_bonus_seconds: float = 10.0
    fast_bonus: int = 20
    medium_bonus_seconds: float = 30.0
    medium_bonus: int = 10
    slow_bonus: int = 5
    max_time_ms: int = 60000

    human_multiplier: float = 1.5
    model_multiplier: float = 1.0

    def weights(self) -> tuple[float, float, float, float, float]:
        """Return weights in breakdown order."""
        return (
            self.coverage_weight,
            self.semantic_weight,
            self.unigram_weight,
            self.bigram_weight,
            self.length_weight,
        )


DEFAULT_SCORING_CONFIG = ScoringConfig()
