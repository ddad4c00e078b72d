"""
Embeddings module - text embedding generation.

1. Protocol (EmbeddingProvider, in core) defines the interface
2. Production implementation (GeminiEmbeddings)
3. Test double (MockEmbeddings) for fast testing
4. Factory function (get_embedding_provider)
"""

from pal_knowledge_seeder.embeddings.gemini_embeddings import (
    GeminiEmbeddings,
    MockEmbeddings,
    get_embedding_provider,
)

__all__ = [
    "GeminiEmbeddings",
    "MockEmbeddings",
    "get_embedding_provider",
]
