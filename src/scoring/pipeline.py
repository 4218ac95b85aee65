"""Guess scoring orchestration.

Two independent decisions consume semantic similarity:
- ``check_guess`` answers "is this guess right" (boolean + similarity).
- ``score_guess`` answers "how many points is it worth".
"""

import logging

from .composite import fallback_verdict, is_word_match, judge
from .config import DEFAULT_SCORING_CONFIG
from .points import compute_final_score
from .semantic import QueryEmbedder, semantic_similarity
from .tokenize import normalize, tokenize
from .types import GuessVerdict

log = logging.getLogger(__name__)

FALLBACK_ERROR = "Combined scoring failed, used word coverage"


def _safe_tokenize(text: str) -> tuple[str, ...]:
    try:
        return tokenize(text)
    except Exception:
        log.exception("Tokenization failed during fallback scoring")
        return ()


def _check(
    guess: str,
    prompt: str,
    embedder: QueryEmbedder | None,
    timeout: float | None,
) -> GuessVerdict:
    normalized_guess = normalize(guess)
    normalized_prompt = normalize(prompt)

    if normalized_guess == normalized_prompt:
        log.debug(f"Exact match for prompt {normalized_prompt!r}")
        return GuessVerdict(is_correct=True, similarity=1.0, method="exact")

    guess_tokens = tokenize(guess)
    prompt_tokens = tokenize(prompt)

    if is_word_match(guess_tokens, prompt_tokens):
        log.debug(f"Word match for prompt {normalized_prompt!r}")
        return GuessVerdict(
            is_correct=True,
            similarity=DEFAULT_SCORING_CONFIG.word_match_similarity,
            method="word_match",
            guess_tokens=guess_tokens,
            prompt_tokens=prompt_tokens,
        )

    semantic = semantic_similarity(
        normalized_guess, normalized_prompt, embedder, timeout=timeout
    )
    return judge(guess_tokens, prompt_tokens, semantic)


def check_guess(
    guess: str,
    prompt: str,
    *,
    embedder: QueryEmbedder | None = None,
    timeout: float | None = None,
) -> GuessVerdict:
    """Decide whether ``guess`` names ``prompt``.

    Tries an exact match, then a full word match, then the weighted
    combination of lexical and semantic signals. If the embedder fails the
    semantic signal is 0; if anything else fails the verdict falls back to
    word coverage alone. Never raises.
    """
    try:
        return _check(guess, prompt, embedder, timeout)
    except Exception:
        log.exception("Combined scoring failed, falling back to word coverage")
        return fallback_verdict(
            _safe_tokenize(guess), _safe_tokenize(prompt), error=FALLBACK_ERROR
        )


def score_guess(
    guess: str,
    answer: str,
    *,
    elapsed_ms: float | None = None,
    is_human: bool = False,
    embedder: QueryEmbedder | None = None,
    timeout: float | None = None,
) -> dict:
    """Award points for a guess by semantic closeness and speed."""
    semantic_score = semantic_similarity(
        guess.lower().strip(), answer.lower().strip(), embedder, timeout=timeout
    )
    result = compute_final_score(
        semantic_score,
        elapsed_ms or DEFAULT_SCORING_CONFIG.max_time_ms,
        is_human,
    )

    return {
        "guess": guess,
        "answer": answer,
        "semantic_score": semantic_score,
        "base_score": result.base_score,
        "time_bonus": result.time_bonus,
        "multiplier": result.multiplier,
        "final_score": result.final_score,
    }
