"""Dataset module - loading the FAQ intents file."""

from pal_knowledge_seeder.dataset.loader import load_dataset

__all__ = ["load_dataset"]
