"""Embedding-based semantic similarity with graceful degradation."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError, wait
import logging
import math
from typing import Protocol, Sequence

log = logging.getLogger(__name__)


class QueryEmbedder(Protocol):
    def embed(self, text: str) -> list[float]: ...


def clamp_01(value: float | int | None) -> float:
    """Clamp a numeric score into [0, 1]."""
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(score) or score < 0.0:
        return 0.0
    if score > 1.0:
        return 1.0
    return score


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors; 0 if either is zero."""
    if len(a) != len(b):
        raise ValueError(f"Vectors must have the same length ({len(a)} != {len(b)})")

    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(a, b):
        dot += x * y
        norm_a += x * x
        norm_b += y * y

    magnitude = math.sqrt(norm_a) * math.sqrt(norm_b)
    if magnitude == 0:
        return 0.0
    return dot / magnitude


def embed_pair(
    first: str,
    second: str,
    embedder: QueryEmbedder,
    *,
    timeout: float | None = None,
) -> tuple[list[float], list[float]]:
    """Fetch both embeddings concurrently.

    Raises TimeoutError if either call is still pending after ``timeout``
    seconds. The pool is not joined, so a hung call does not block the caller.
    """
    pool = ThreadPoolExecutor(max_workers=2)
    try:
        futures = [
            pool.submit(embedder.embed, first),
            pool.submit(embedder.embed, second),
        ]
        _, pending = wait(futures, timeout=timeout)
        if pending:
            raise TimeoutError(f"Embedding did not finish within {timeout}s")
        return futures[0].result(), futures[1].result()
    finally:
        pool.shutdown(wait=False)


def semantic_similarity(
    guess: str,
    prompt: str,
    embedder: QueryEmbedder | None,
    *,
    timeout: float | None = None,
) -> float:
    """Clamped cosine similarity of guess and prompt embeddings.

    Any failure of the embedder (error, timeout, bad vectors) yields 0.0 so
    scoring can continue on lexical signals alone.
    """
    if embedder is None:
        return 0.0
    try:
        guess_vec, prompt_vec = embed_pair(guess, prompt, embedder, timeout=timeout)
        return clamp_01(cosine_similarity(guess_vec, prompt_vec))
    except Exception as e:
        log.warning(f"Embedding failed, continuing without semantic score: {e!r}")
        return 0.0
