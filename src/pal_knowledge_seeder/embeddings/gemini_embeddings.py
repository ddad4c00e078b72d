"""
Embeddings Module - Single Responsibility: Generate text embeddings.

It has ONE job: convert text to vector embeddings.
- No store logic, no document handling
- One request per text; throttling is the caller's concern
- Vectors are returned as-is (no normalization or dimension checks)
"""

import hashlib
import os

import numpy as np
from google import genai

from pal_knowledge_seeder.config import DEFAULT_EMBEDDING_MODEL, SeedConfig
from pal_knowledge_seeder.core import EmbeddingProvider


class GeminiEmbeddings:
    """
    Google Gen AI embedding provider.

    Uses gemini-embedding-001 by default. The vector length is whatever
    the service returns for the configured model.
    """

    def __init__(
        self,
        model: str = DEFAULT_EMBEDDING_MODEL,
        api_key: str | None = None,
    ):
        self.model = model
        self._client = genai.Client(api_key=api_key or os.environ.get("GOOGLE_API_KEY"))

    def embed(self, text: str) -> np.ndarray:
        """Generate embedding for a single text."""
        response = self._client.models.embed_content(
            model=self.model,
            contents=text,
        )
        return np.array(response.embeddings[0].values, dtype=np.float32)

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        """Generate embeddings one request at a time, in order."""
        return [self.embed(text) for text in texts]


class MockEmbeddings:
    """
    Mock embedding provider for testing without API calls.

    Generates deterministic pseudo-embeddings from text hashes.
    NOT for production use - only for testing/development.
    """

    def __init__(self, dimensions: int = 768):
        self._dimensions = dimensions
        self.calls: list[str] = []

    def embed(self, text: str) -> np.ndarray:
        """Generate deterministic pseudo-embedding from text hash."""
        self.calls.append(text)
        h = hashlib.sha256(text.encode()).digest()
        # Bytes -> [0, 1) floats; repeat hash to fill dimensions
        values = np.frombuffer(h, dtype=np.uint8).astype(np.float32) / 256.0
        repeats = self._dimensions // values.size + 1
        return np.tile(values, repeats)[:self._dimensions]

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        """Generate embeddings for multiple texts."""
        return [self.embed(text) for text in texts]


def get_embedding_provider(
    config: SeedConfig | None = None,
    use_mock: bool = False,
) -> EmbeddingProvider:
    """
    Factory function to get the appropriate embedding provider.

    Args:
        config: Seed configuration (model and API key)
        use_mock: If True, return MockEmbeddings (for testing)
    """
    if use_mock:
        return MockEmbeddings()
    if config is None:
        return GeminiEmbeddings()
    return GeminiEmbeddings(model=config.embedding_model, api_key=config.google_api_key)
