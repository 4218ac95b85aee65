"""Weighted combination of lexical and semantic signals.

Responsibilities:
- Compute coverage, unigram/bigram Jaccard and length penalty for a guess.
- Fuse them with a semantic similarity into one score.
- Apply the correctness thresholds for single- and multi-word prompts.

Non-Responsibilities:
- No embedding calls; the semantic value is supplied by the caller.
"""

from typing import Sequence

from .config import DEFAULT_SCORING_CONFIG
from .tokenize import coverage, jaccard, ngrams
from .types import GuessVerdict, SimilarityBreakdown, round_half_up

_CONFIG = DEFAULT_SCORING_CONFIG


def length_penalty(guess_tokens: Sequence[str], prompt_tokens: Sequence[str]) -> float:
    """Square root of the capped guess/prompt length ratio."""
    if not prompt_tokens:
        return 1.0
    ratio = min(len(guess_tokens) / len(prompt_tokens), 1.0)
    return ratio**0.5


def combine(
    guess_tokens: Sequence[str],
    prompt_tokens: Sequence[str],
    semantic: float,
) -> SimilarityBreakdown:
    """Compute every signal and the weighted score."""
    cov = coverage(guess_tokens, prompt_tokens)
    unigram = jaccard(guess_tokens, prompt_tokens)
    bigram = jaccard(
        ngrams(guess_tokens, _CONFIG.ngram_size),
        ngrams(prompt_tokens, _CONFIG.ngram_size),
    )
    penalty = length_penalty(guess_tokens, prompt_tokens)

    score = (
        _CONFIG.coverage_weight * cov
        + _CONFIG.semantic_weight * semantic
        + _CONFIG.unigram_weight * unigram
        + _CONFIG.bigram_weight * bigram
        + _CONFIG.length_weight * penalty
    )

    return SimilarityBreakdown(
        coverage=cov,
        semantic=semantic,
        unigram=unigram,
        bigram=bigram,
        length_penalty=penalty,
        score=score,
    )


def is_word_match(guess_tokens: Sequence[str], prompt_tokens: Sequence[str]) -> bool:
    """All prompt words present and the guess is not much shorter."""
    return (
        coverage(guess_tokens, prompt_tokens) >= _CONFIG.word_match_coverage
        and len(guess_tokens) >= len(prompt_tokens) * _CONFIG.word_match_length_ratio
    )


def is_correct(breakdown: SimilarityBreakdown, prompt_token_count: int) -> bool:
    """Threshold rule for the combined score."""
    if prompt_token_count == 1:
        return breakdown.score >= _CONFIG.single_word_threshold
    return (
        breakdown.coverage >= _CONFIG.multi_word_coverage
        and breakdown.score >= _CONFIG.multi_word_threshold
    )


def judge(
    guess_tokens: Sequence[str],
    prompt_tokens: Sequence[str],
    semantic: float,
) -> GuessVerdict:
    """Combined-score verdict for a guess that missed both short-circuits."""
    breakdown = combine(guess_tokens, prompt_tokens, semantic)
    return GuessVerdict(
        is_correct=is_correct(breakdown, len(prompt_tokens)),
        similarity=round_half_up(breakdown.score, 2),
        method="combined",
        breakdown=breakdown,
        guess_tokens=tuple(guess_tokens),
        prompt_tokens=tuple(prompt_tokens),
    )


def fallback_verdict(
    guess_tokens: Sequence[str],
    prompt_tokens: Sequence[str],
    error: str | None = None,
) -> GuessVerdict:
    """Coverage-only verdict used when combined scoring breaks."""
    cov = coverage(guess_tokens, prompt_tokens)
    return GuessVerdict(
        is_correct=cov >= _CONFIG.fallback_coverage,
        similarity=round_half_up(cov, 2),
        method="fallback",
        guess_tokens=tuple(guess_tokens),
        prompt_tokens=tuple(prompt_tokens),
        error=error,
    )
