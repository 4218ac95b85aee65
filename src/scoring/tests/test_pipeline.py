import pytest

from src.scoring import pipeline
from src.scoring.pipeline import FALLBACK_ERROR, check_guess, score_guess


class _Embedder:
    """Returns fixed vectors per text and counts calls."""

    def __init__(self, vectors: dict[str, list[float]] | None = None):
        self.vectors = vectors or {}
        self.calls: list[str] = []

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        return self.vectors.get(text, [1.0, 0.0])


class _FailingEmbedder:
    def __init__(self):
        self.calls: list[str] = []

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        raise ConnectionError("embedding provider unreachable")


def test_exact_match_skips_embeddings():
    embedder = _Embedder()

    verdict = check_guess("A Cat", "a cat", embedder=embedder)

    assert verdict.is_correct is True
    assert verdict.method == "exact"
    assert verdict.similarity == 1.0
    assert embedder.calls == []


def test_word_match_skips_embeddings():
    embedder = _Embedder()

    verdict = check_guess("a very happy dog indeed", "happy dog", embedder=embedder)

    assert verdict.is_correct is True
    assert verdict.method == "word_match"
    assert verdict.similarity == 0.98
    assert embedder.calls == []


def test_combined_uses_normalized_text_for_embeddings():
    embedder = _Embedder()

    verdict = check_guess("Red fire-truck!", "  Big RED fire truck", embedder=embedder)

    assert sorted(embedder.calls) == ["big red fire truck", "red firetruck"]
    assert verdict.method == "combined"


def test_combined_correct_multi_word_guess():
    embedder = _Embedder(
        {
            "red fire truck": [1.0, 0.0],
            "big red fire truck": [0.95, (1 - 0.95**2) ** 0.5],
        }
    )

    verdict = check_guess("red fire truck", "big red fire truck", embedder=embedder)

    assert verdict.method == "combined"
    assert verdict.is_correct is True
    assert verdict.breakdown.semantic == pytest.approx(0.95)
    assert verdict.similarity == pytest.approx(0.82)
    assert len(embedder.calls) == 2


def test_embedding_failure_degrades_to_lexical_signals():
    embedder = _FailingEmbedder()

    first = check_guess("red fire truck", "big red fire truck", embedder=embedder)
    second = check_guess("red fire truck", "big red fire truck", embedder=embedder)

    assert len(embedder.calls) == 4
    assert first == second
    assert first.method == "combined"
    assert first.is_correct is False
    assert first.breakdown.semantic == 0.0
    assert first.similarity == pytest.approx(0.53)


def test_pipeline_failure_falls_back_to_coverage(monkeypatch):
    def _boom(*args, **kwargs):
        raise RuntimeError("scoring broke")

    monkeypatch.setattr(pipeline, "judge", _boom)

    verdict = check_guess("red fire truck", "big red fire truck", embedder=_Embedder())

    assert verdict.method == "fallback"
    assert verdict.is_correct is False
    assert verdict.similarity == 0.75
    assert verdict.error == FALLBACK_ERROR


def test_fallback_survives_one_sided_tokenization_failure(monkeypatch):
    real_tokenize = pipeline.tokenize

    def _tokenize(text):
        if text == "big red fire truck":
            raise RuntimeError("tokenizer broke")
        return real_tokenize(text)

    monkeypatch.setattr(pipeline, "tokenize", _tokenize)

    verdict = check_guess("red fire truck", "big red fire truck", embedder=_Embedder())

    assert verdict.method == "fallback"
    assert verdict.guess_tokens == ("red", "fire", "truck")
    assert verdict.prompt_tokens == ()


def test_malformed_input_never_raises():
    verdict = check_guess(123, "cat", embedder=_Embedder())  # type: ignore[arg-type]

    assert verdict.method == "fallback"
    assert verdict.is_correct is False


def test_verdict_to_dict_includes_rounded_debug():
    verdict = check_guess(
        "happy purple lizard", "happy purple dragon", embedder=_FailingEmbedder()
    )

    payload = verdict.to_dict()

    assert payload["method"] == "combined"
    assert payload["debug"]["prompt_tokens"] == ["happy", "purple", "dragon"]
    assert payload["debug"]["breakdown"]["coverage"] == 0.67
    assert "debug" not in verdict.to_dict(include_debug=False)


def test_score_guess_defaults_to_full_round_time():
    embedder = _Embedder({"kitten": [0.8, 0.6], "cat": [1.0, 0.0]})

    result = score_guess("Kitten ", "CAT", embedder=embedder)

    assert result["semantic_score"] == pytest.approx(0.8)
    assert result["base_score"] == 80
    assert result["time_bonus"] == 0
    assert result["multiplier"] == 1.0
    assert result["final_score"] == 80


def test_score_guess_human_fast_guess():
    embedder = _Embedder({"kitten": [0.8, 0.6], "cat": [1.0, 0.0]})

    result = score_guess(
        "kitten", "cat", elapsed_ms=9999, is_human=True, embedder=embedder
    )

    assert result["time_bonus"] == 20
    assert result["final_score"] == 150


def test_score_guess_embedding_failure_scores_zero_semantic():
    result = score_guess("kitten", "cat", elapsed_ms=5000, embedder=_FailingEmbedder())

    assert result["semantic_score"] == 0.0
    assert result["final_score"] == 20
