"""Tests for the sentence-transformers embedder wrapper."""

from src.vector import embedder as embedder_module
from src.vector.embedder import DEFAULT_MODEL, MAX_CHARS, Embedder


class _Vector(list):
    def tolist(self) -> list[float]:
        return list(self)


class _FakeModel:
    def __init__(self, name: str):
        self.name = name
        self.encoded: list[str] = []

    def get_sentence_embedding_dimension(self) -> int:
        return 3

    def encode(self, text, normalize_embeddings=False, show_progress_bar=True):
        self.encoded.append(text)
        return _Vector([0.0, 0.6, 0.8])


class TestEmbedder:
    def test_embed_lowercases_and_trims(self, monkeypatch):
        monkeypatch.setattr(embedder_module, "SentenceTransformer", _FakeModel)

        emb = Embedder("fake-model")

        assert emb.embed("  Happy Dog  ") == [0.0, 0.6, 0.8]
        assert emb.model.encoded == ["happy dog"]
        assert emb.dimensions == 3

    def test_embed_caps_long_input(self, monkeypatch):
        monkeypatch.setattr(embedder_module, "SentenceTransformer", _FakeModel)

        emb = Embedder("fake-model")
        emb.embed("x" * (MAX_CHARS + 50))

        assert len(emb.model.encoded[0]) == MAX_CHARS

    def test_model_from_env(self, monkeypatch):
        monkeypatch.setattr(embedder_module, "SentenceTransformer", _FakeModel)
        monkeypatch.setenv("EMBEDDING_MODEL", "env-model")

        assert Embedder().model.name == "env-model"

    def test_default_model_without_env(self, monkeypatch):
        monkeypatch.setattr(embedder_module, "SentenceTransformer", _FakeModel)
        monkeypatch.delenv("EMBEDDING_MODEL", raising=False)

        assert Embedder().model.name == DEFAULT_MODEL
