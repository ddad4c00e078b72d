"""
Seeder configuration loaded from environment variables.

The pipeline never reads the environment itself: callers build a
SeedConfig (usually via SeedConfig.from_env()) and pass it in.

Environment Variables:
    GOOGLE_API_KEY: Credential for the embedding service
    CHROMA_API_KEY: If set, use Chroma Cloud instead of a local server
    CHROMA_TENANT / CHROMA_DATABASE: Cloud addressing
    CHROMA_HOST / CHROMA_PORT: Server address
    CHROMA_COLLECTION_NAME: Target collection (default: pal_knowledge_base)
    PAL_DATASET_PATH: Intents file (default: data/dataset.json)
    PAL_SEED_BATCH_SIZE: Documents per add() call (default: 5)
    PAL_SEED_EMBED_DELAY_MS: Pause after each embedding request (default: 200)
    PAL_SEED_MAX_RETRIES: Extra attempts per failed batch (default: 0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_COLLECTION_NAME = "pal_knowledge_base"
DEFAULT_EMBEDDING_MODEL = "gemini-embedding-001"
CHROMA_CLOUD_HOST = "api.trychroma.com"


@dataclass
class SeedConfig:
    """Everything needed to run one seeding pass."""

    google_api_key: str | None = None
    embedding_model: str = DEFAULT_EMBEDDING_MODEL

    chroma_api_key: str | None = None
    chroma_tenant: str = "default_tenant"
    chroma_database: str = "default_database"
    chroma_host: str | None = None
    chroma_port: int = 8000
    collection_name: str = DEFAULT_COLLECTION_NAME

    dataset_path: Path = Path("data/dataset.json")
    batch_size: int = 5
    embed_delay_ms: int = 200
    max_retries: int = 0
    retry_backoff_seconds: float = 1.0

    @property
    def use_cloud(self) -> bool:
        """Cloud mode is selected by the presence of an API key."""
        return bool(self.chroma_api_key)

    @property
    def resolved_host(self) -> str:
        if self.chroma_host:
            return self.chroma_host
        return CHROMA_CLOUD_HOST if self.use_cloud else "localhost"

    @property
    def embed_delay_seconds(self) -> float:
        return self.embed_delay_ms / 1000.0

    @classmethod
    def from_env(cls) -> "SeedConfig":
        """Load config from environment variables."""
        return cls(
            google_api_key=os.environ.get("GOOGLE_API_KEY") or None,
            chroma_api_key=os.environ.get("CHROMA_API_KEY") or None,
            chroma_tenant=os.environ.get("CHROMA_TENANT", "default_tenant"),
            chroma_database=os.environ.get("CHROMA_DATABASE", "default_database"),
            chroma_host=os.environ.get("CHROMA_HOST") or None,
            chroma_port=int(os.environ.get("CHROMA_PORT", "8000")),
            collection_name=os.environ.get("CHROMA_COLLECTION_NAME", DEFAULT_COLLECTION_NAME),
            dataset_path=Path(os.environ.get("PAL_DATASET_PATH", "data/dataset.json")),
            batch_size=int(os.environ.get("PAL_SEED_BATCH_SIZE", "5")),
            embed_delay_ms=int(os.environ.get("PAL_SEED_EMBED_DELAY_MS", "200")),
            max_retries=int(os.environ.get("PAL_SEED_MAX_RETRIES", "0")),
        )
