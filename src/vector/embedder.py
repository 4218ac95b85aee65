"""Local embedding generation using sentence-transformers."""

import logging
import os

from sentence_transformers import SentenceTransformer

log = logging.getLogger(__name__)

# Options:
# - sentence-transformers/all-MiniLM-L6-v2: Small and fast, 90MB, good for short phrases
# - BAAI/bge-base-en-v1.5: Better quality, 440MB
DEFAULT_MODEL = "sentence-transformers/all-MiniLM-L6-v2"
MAX_CHARS = 2000


def model_from_env() -> str:
    return os.environ.get("EMBEDDING_MODEL", DEFAULT_MODEL)


class Embedder:
    """Generate embeddings for guesses and prompts with a local model."""

    def __init__(self, model: str | None = None):
        model = model or model_from_env()
        log.info(f"Loading embedding model: {model}")
        self.model = SentenceTransformer(model)
        self.dimensions = self.model.get_sentence_embedding_dimension()
        log.info(f"Model loaded. Dimensions: {self.dimensions}")

    def embed(self, text: str) -> list[float]:
        """Generate a normalized embedding for a single phrase.

        Args:
            text: Guess or prompt text

        Returns:
            List of floats representing the embedding
        """
        # Guesses are short; cap pathological input
        text = text.lower().strip()[:MAX_CHARS]

        embedding = self.model.encode(
            text, normalize_embeddings=True, show_progress_bar=False
        )
        return embedding.tolist()
