"""Point award for a scored guess: base score, time bonus, role multiplier."""

from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from .types import ScoreResult, round_half_up


def time_bonus(
    elapsed_ms: float,
    max_time_ms: float | None = None,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> int:
    """Tiered bonus by elapsed seconds (strictly-less-than boundaries)."""
    if max_time_ms is None:
        max_time_ms = config.max_time_ms
    seconds = elapsed_ms / 1000
    if seconds < config.fast_bonus_seconds:
        return config.fast_bonus
    if seconds < config.medium_bonus_seconds:
        return config.medium_bonus
    if seconds < max_time_ms / 1000:
        return config.slow_bonus
    return 0


def compute_final_score(
    semantic_score: float,
    elapsed_ms: float,
    is_human: bool = False,
) -> ScoreResult:
    """Points for a guess given its semantic score, speed and guesser role.

    ``semantic_score`` is expected in [0, 1]; callers clamp before calling.
    """
    config = DEFAULT_SCORING_CONFIG
    base_score = int(round_half_up(semantic_score * 100))
    bonus = time_bonus(elapsed_ms)
    multiplier = config.human_multiplier if is_human else config.model_multiplier
    final_score = int(round_half_up((base_score + bonus) * multiplier))

    return ScoreResult(
        base_score=base_score,
        time_bonus=bonus,
        multiplier=multiplier,
        final_score=final_score,
    )
