"""
Vector store adapters following the gold standard pattern.

Pattern: Protocol → Production impl → Test double → Factory

This module contains:
1. create_chroma_client() - Chroma Cloud or self-hosted Chroma, by config
2. connect_collection() - open the target collection (factory)
3. InMemoryCollection / InMemoryStoreClient - test doubles, no server needed

The seeder only ever counts and appends; similarity search is served by
the application backend, not by this package.
"""

from __future__ import annotations

import logging
from typing import Any

import chromadb

from pal_knowledge_seeder.config import SeedConfig
from pal_knowledge_seeder.core import (
    StoreConnectionError,
    VectorCollection,
    VectorStoreClient,
)

logger = logging.getLogger(__name__)

COLLECTION_METADATA = {"description": "P.A.L. Knowledge Base"}


# ---------------------------------------------------------------------------
# CHROMA (Production)
# ---------------------------------------------------------------------------


def create_chroma_client(config: SeedConfig) -> VectorStoreClient:
    """
    Build a chromadb client from configuration.

    CHROMA_API_KEY selects Chroma Cloud; otherwise an HTTP client for a
    self-hosted server at CHROMA_HOST:CHROMA_PORT.
    """
    if config.use_cloud:
        logger.debug(f"Using Chroma Cloud at {config.resolved_host}")
        return chromadb.CloudClient(
            tenant=config.chroma_tenant,
            database=config.chroma_database,
            api_key=config.chroma_api_key,
            cloud_host=config.resolved_host,
            cloud_port=443,
        )

    logger.debug(f"Using Chroma server at {config.resolved_host}:{config.chroma_port}")
    return chromadb.HttpClient(host=config.resolved_host, port=config.chroma_port)


def connect_collection(
    config: SeedConfig,
    client: VectorStoreClient | None = None,
) -> VectorCollection:
    """
    Open (or create) the configured collection.

    Args:
        config: Seed configuration
        client: Injected client; built from config when omitted

    Raises:
        StoreConnectionError: if the client cannot be built or the
            collection cannot be opened.
    """
    try:
        if client is None:
            client = create_chroma_client(config)
        collection = client.get_or_create_collection(
            name=config.collection_name,
            metadata=COLLECTION_METADATA,
        )
    except Exception as e:
        raise StoreConnectionError(
            f"Failed to open collection '{config.collection_name}': {e}"
        ) from e

    logger.info(f"Connected to collection '{config.collection_name}'")
    return collection


# ---------------------------------------------------------------------------
# IN-MEMORY STORE (Testing/Development)
# ---------------------------------------------------------------------------


class InMemoryCollection:
    """
    In-memory collection for development/testing.

    Implements the same count/add surface as a chromadb Collection and
    records every add() call for assertions.
    """

    def __init__(self, name: str = "test", metadata: dict[str, Any] | None = None):
        self.name = name
        self.metadata = metadata or {}
        self.records: dict[str, dict[str, Any]] = {}
        self.add_calls: list[list[str]] = []
        self.count_calls = 0

    def count(self) -> int:
        self.count_calls += 1
        return len(self.records)

    def add(
        self,
        ids: list[str],
        embeddings: list[list[float]],
        documents: list[str],
        metadatas: list[dict[str, str]],
    ) -> None:
        """Store a batch; rejects mismatched lengths and duplicate ids."""
        if not (len(ids) == len(embeddings) == len(documents) == len(metadatas)):
            raise ValueError("ids, embeddings, documents and metadatas differ in length")
        if len(set(ids)) != len(ids):
            raise ValueError("Expected IDs to be unique within a batch")
        duplicates = [i for i in ids if i in self.records]
        if duplicates:
            raise ValueError(f"IDs already exist: {duplicates}")

        self.add_calls.append(list(ids))
        for doc_id, emb, doc, meta in zip(ids, embeddings, documents, metadatas):
            self.records[doc_id] = {
                "embedding": emb,
                "document": doc,
                "metadata": meta,
            }


class InMemoryStoreClient:
    """In-memory client handing out InMemoryCollection instances by name."""

    def __init__(self):
        self.collections: dict[str, InMemoryCollection] = {}

    def get_or_create_collection(
        self,
        name: str,
        metadata: dict[str, Any] | None = None,
    ) -> InMemoryCollection:
        if name not in self.collections:
            self.collections[name] = InMemoryCollection(name, metadata)
        return self.collections[name]
