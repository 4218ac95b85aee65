"""Deterministic normalization and lexical overlap metrics."""

import re
from typing import Iterable, Sequence

from .config import STOP_WORDS

_STRIP_RE = re.compile(r"[^a-z0-9\s]")
_WS_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Lowercase, drop punctuation, collapse whitespace."""
    if not text:
        return ""
    stripped = _STRIP_RE.sub("", text.lower())
    return _WS_RE.sub(" ", stripped).strip()


def tokenize(text: str | None) -> tuple[str, ...]:
    """Split normalized text into content tokens (stop words removed)."""
    return tuple(
        word
        for word in normalize(text).split(" ")
        if word and word not in STOP_WORDS
    )


def ngrams(tokens: Sequence[str], n: int) -> frozenset[str]:
    """Collect contiguous n-token windows as space-joined strings."""
    if n <= 0 or len(tokens) < n:
        return frozenset()
    return frozenset(
        " ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)
    )


def jaccard(a: Iterable[str], b: Iterable[str]) -> float:
    """Intersection over union; two empty sets are identical."""
    set_a = set(a)
    set_b = set(b)
    if not set_a and not set_b:
        return 1.0
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(set_a | set_b)


def coverage(guess_tokens: Sequence[str], prompt_tokens: Sequence[str]) -> float:
    """Fraction of prompt tokens found in the guess.

    An empty prompt counts as fully covered.
    """
    if not prompt_tokens:
        return 1.0
    guess_set = set(guess_tokens)
    matched = sum(1 for token in prompt_tokens if token in guess_set)
    return matched / len(prompt_tokens)
