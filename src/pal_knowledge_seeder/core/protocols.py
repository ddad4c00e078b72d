"""
Core protocols and data types shared by the seeding pipeline.

Every external collaborator (embedding service, vector store) is reached
through a Protocol defined here, so the pipeline can be driven by fakes in
tests and by real clients in production.

PATTERN:
- Protocol defines the contract
- Production adapter implements it (GeminiEmbeddings, chromadb collections)
- Test double implements it (MockEmbeddings, InMemoryCollection)
- Factory functions pick one
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

import numpy as np


# ---------------------------------------------------------------------------
# DATASET TYPES
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SourceIntent:
    """
    One FAQ category from the source dataset.

    Read-only: the pipeline never mutates intents, it only derives
    documents from them.
    """
    intent: str
    text: list[str] = field(default_factory=list)
    responses: list[str] = field(default_factory=list)
    context_out: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SourceIntent":
        """Build an intent from a raw dataset entry."""
        context = raw.get("context") or {}
        text = raw.get("text") or []
        responses = raw.get("responses") or []
        if not isinstance(text, list) or not isinstance(responses, list):
            raise TypeError(f"'text' and 'responses' must be lists in intent {raw.get('intent')!r}")
        return cls(
            intent=raw["intent"],
            text=list(text),
            responses=list(responses),
            context_out=context.get("out") if isinstance(context, dict) else None,
        )


@dataclass
class CandidateDocument:
    """A document ready for embedding, derived from one SourceIntent."""
    id: str
    content: str
    metadata: dict[str, str]


# ---------------------------------------------------------------------------
# EMBEDDING PROVIDER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class EmbeddingProvider(Protocol):
    """
    Contract for embedding generation.

    Implementations:
    - GeminiEmbeddings (production)
    - MockEmbeddings (testing)
    """

    def embed(self, text: str) -> np.ndarray:
        """Generate embedding for a single text."""
        ...

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        """Generate embeddings for multiple texts."""
        ...


# ---------------------------------------------------------------------------
# VECTOR STORE PROTOCOLS
# ---------------------------------------------------------------------------


@runtime_checkable
class VectorCollection(Protocol):
    """
    The subset of a vector-store collection the seeder needs.

    chromadb's Collection satisfies this structurally.
    """

    def count(self) -> int:
        """Number of documents currently stored."""
        ...

    def add(
        self,
        ids: list[str],
        embeddings: list[list[float]],
        documents: list[str],
        metadatas: list[dict[str, str]],
    ) -> None:
        """Append one batch of (id, embedding, document, metadata) tuples."""
        ...


@runtime_checkable
class VectorStoreClient(Protocol):
    """Contract for a client that can open collections by name."""

    def get_or_create_collection(
        self,
        name: str,
        metadata: dict[str, Any] | None = None,
    ) -> VectorCollection:
        """Open the named collection, creating it if needed."""
        ...


# ---------------------------------------------------------------------------
# RUN REPORTING
# ---------------------------------------------------------------------------


class SeedStatus(Enum):
    """Outcome of a seeding run."""
    SEEDED = "seeded"
    SKIPPED = "skipped"


@dataclass
class BatchResult:
    """Result of attempting one batch."""
    start_index: int
    ids: list[str]
    succeeded: bool
    attempts: int = 1
    error: str | None = None
    exception: Exception | None = field(default=None, repr=False, compare=False)


@dataclass
class SeedReport:
    """Summary of one seeding run, printed for the operator."""
    status: SeedStatus
    collection_name: str
    existing_count: int
    prepared: int = 0
    added: int = 0
    final_count: int | None = None
    batches: list[BatchResult] = field(default_factory=list)

    @property
    def failed_batches(self) -> list[BatchResult]:
        return [b for b in self.batches if not b.succeeded]

    @property
    def failed_ids(self) -> list[str]:
        """Ids of every document whose batch was never written."""
        return [doc_id for b in self.failed_batches for doc_id in b.ids]

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "status": self.status.value,
            "collection_name": self.collection_name,
            "existing_count": self.existing_count,
            "prepared": self.prepared,
            "added": self.added,
            "final_count": self.final_count,
            "batches": [
                {
                    "start_index": b.start_index,
                    "size": len(b.ids),
                    "succeeded": b.succeeded,
                    "attempts": b.attempts,
                    "error": b.error,
                }
                for b in self.batches
            ],
            "failed_ids": self.failed_ids,
        }
