"""
Unit Tests for the Vector Store Adapters

Tests client selection and collection opening without a Chroma server.

PATTERNS:
---------
1. Patch chromadb.HttpClient / chromadb.CloudClient
2. Verify connection settings reach the client
3. Verify failures become StoreConnectionError
"""

from unittest.mock import MagicMock, patch

import pytest

from pal_knowledge_seeder.config import SeedConfig
from pal_knowledge_seeder.core import StoreConnectionError, VectorCollection
from pal_knowledge_seeder.store import (
    COLLECTION_METADATA,
    InMemoryCollection,
    InMemoryStoreClient,
    connect_collection,
    create_chroma_client,
)


# ---------------------------------------------------------------------------
# CLIENT SELECTION
# ---------------------------------------------------------------------------


class TestCreateChromaClient:
    """CHROMA_API_KEY decides between cloud and self-hosted."""

    def test_local_defaults(self):
        with patch("pal_knowledge_seeder.store.chroma_store.chromadb") as mock_chromadb:
            create_chroma_client(SeedConfig())

        mock_chromadb.HttpClient.assert_called_once_with(host="localhost", port=8000)
        mock_chromadb.CloudClient.assert_not_called()

    def test_local_custom_address(self):
        config = SeedConfig(chroma_host="chroma.internal", chroma_port=9000)

        with patch("pal_knowledge_seeder.store.chroma_store.chromadb") as mock_chromadb:
            create_chroma_client(config)

        mock_chromadb.HttpClient.assert_called_once_with(host="chroma.internal", port=9000)

    def test_cloud_when_api_key_set(self):
        config = SeedConfig(chroma_api_key="ck-123", chroma_tenant="uni", chroma_database="pal")

        with patch("pal_knowledge_seeder.store.chroma_store.chromadb") as mock_chromadb:
            create_chroma_client(config)

        mock_chromadb.CloudClient.assert_called_once_with(
            tenant="uni",
            database="pal",
            api_key="ck-123",
            cloud_host="api.trychroma.com",
            cloud_port=443,
        )
        mock_chromadb.HttpClient.assert_not_called()


# ---------------------------------------------------------------------------
# CONNECT COLLECTION
# ---------------------------------------------------------------------------


class TestConnectCollection:

    def test_get_or_create_with_metadata(self):
        client = MagicMock()
        config = SeedConfig(collection_name="kb_test")

        collection = connect_collection(config, client=client)

        client.get_or_create_collection.assert_called_once_with(
            name="kb_test",
            metadata=COLLECTION_METADATA,
        )
        assert collection is client.get_or_create_collection.return_value

    def test_builds_client_from_config_when_not_injected(self):
        with patch("pal_knowledge_seeder.store.chroma_store.chromadb") as mock_chromadb:
            connect_collection(SeedConfig())

        mock_chromadb.HttpClient.return_value.get_or_create_collection.assert_called_once()

    def test_collection_error_wrapped(self):
        client = MagicMock()
        client.get_or_create_collection.side_effect = ValueError("bad tenant")

        with pytest.raises(StoreConnectionError) as exc_info:
            connect_collection(SeedConfig(), client=client)

        assert "pal_knowledge_base" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_client_construction_error_wrapped(self):
        with patch("pal_knowledge_seeder.store.chroma_store.chromadb") as mock_chromadb:
            mock_chromadb.HttpClient.side_effect = ConnectionError("refused")

            with pytest.raises(StoreConnectionError):
                connect_collection(SeedConfig())


# ---------------------------------------------------------------------------
# IN-MEMORY DOUBLES
# ---------------------------------------------------------------------------


class TestInMemoryCollection:

    def test_add_and_count(self):
        collection = InMemoryCollection()
        collection.add(ids=["a", "b"], embeddings=[[0.1], [0.2]], documents=["A", "B"], metadatas=[{}, {}])
        assert collection.count() == 2

    def test_rejects_duplicate_ids(self):
        collection = InMemoryCollection()
        collection.add(ids=["a"], embeddings=[[0.1]], documents=["A"], metadatas=[{}])

        with pytest.raises(ValueError):
            collection.add(ids=["a"], embeddings=[[0.1]], documents=["A"], metadatas=[{}])

    def test_rejects_mismatched_lengths(self):
        with pytest.raises(ValueError):
            InMemoryCollection().add(ids=["a", "b"], embeddings=[[0.1]], documents=["A"], metadatas=[{}])

    def test_satisfies_protocol(self):
        assert isinstance(InMemoryCollection(), VectorCollection)

    def test_client_reuses_collections(self):
        client = InMemoryStoreClient()
        first = client.get_or_create_collection("kb", metadata={"description": "x"})
        assert client.get_or_create_collection("kb") is first
        assert first.metadata == {"description": "x"}
