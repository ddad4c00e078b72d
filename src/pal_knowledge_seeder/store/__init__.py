"""
Store module - vector-store access for seeding.

- create_chroma_client(): Chroma Cloud or self-hosted client from config
- connect_collection(): Factory that opens the target collection
- InMemoryCollection / InMemoryStoreClient: Test doubles
"""

from pal_knowledge_seeder.store.chroma_store import (
    COLLECTION_METADATA,
    InMemoryCollection,
    InMemoryStoreClient,
    connect_collection,
    create_chroma_client,
)

__all__ = [
    "COLLECTION_METADATA",
    "InMemoryCollection",
    "InMemoryStoreClient",
    "connect_collection",
    "create_chroma_client",
]
