"""
Unit Tests for SeedConfig

Environment handling tested with patch.dict("os.environ", ..., clear=True).
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from pal_knowledge_seeder import config as config_module
from pal_knowledge_seeder.config import SeedConfig


class TestSeedConfigFromEnv:

    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = SeedConfig.from_env()

        assert config.google_api_key is None
        assert config.use_cloud is False
        assert config.resolved_host == "localhost"
        assert config.chroma_port == 8000
        assert config.chroma_tenant == "default_tenant"
        assert config.chroma_database == "default_database"
        assert config.collection_name == "pal_knowledge_base"
        assert config.embedding_model == "gemini-embedding-001"
        assert config.batch_size == 5
        assert config.embed_delay_seconds == pytest.approx(0.2)
        assert config.max_retries == 0

    def test_reads_all_variables(self):
        env = {
            "GOOGLE_API_KEY": "g-key",
            "CHROMA_API_KEY": "c-key",
            "CHROMA_TENANT": "campus",
            "CHROMA_DATABASE": "onboarding",
            "CHROMA_HOST": "chroma.example.com",
            "CHROMA_PORT": "9100",
            "CHROMA_COLLECTION_NAME": "faq",
            "PAL_DATASET_PATH": "/tmp/intents.json",
            "PAL_SEED_BATCH_SIZE": "10",
            "PAL_SEED_EMBED_DELAY_MS": "500",
            "PAL_SEED_MAX_RETRIES": "2",
        }
        with patch.dict("os.environ", env, clear=True):
            config = SeedConfig.from_env()

        assert config.google_api_key == "g-key"
        assert config.use_cloud is True
        assert config.chroma_tenant == "campus"
        assert config.chroma_database == "onboarding"
        assert config.resolved_host == "chroma.example.com"
        assert config.chroma_port == 9100
        assert config.collection_name == "faq"
        assert config.dataset_path == Path("/tmp/intents.json")
        assert config.batch_size == 10
        assert config.embed_delay_seconds == pytest.approx(0.5)
        assert config.max_retries == 2

    def test_cloud_host_default(self):
        with patch.dict("os.environ", {"CHROMA_API_KEY": "c-key"}, clear=True):
            config = SeedConfig.from_env()

        assert config.resolved_host == "api.trychroma.com"

    def test_empty_api_key_means_local(self):
        with patch.dict("os.environ", {"CHROMA_API_KEY": ""}, clear=True):
            assert SeedConfig.from_env().use_cloud is False

    def test_no_module_level_config(self):
        assert not hasattr(config_module, "get_config")
        assert not any(isinstance(v, SeedConfig) for v in vars(config_module).values())
