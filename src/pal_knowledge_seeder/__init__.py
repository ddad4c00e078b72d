"""
P.A.L. knowledge-base seeder.

Loads the FAQ intents dataset, turns each informational intent into a
document, embeds it with Gemini and writes it to a Chroma collection.

USAGE:
------
from pal_knowledge_seeder import SeedConfig, seed_knowledge_base

report = seed_knowledge_base(SeedConfig.from_env())
"""

from pal_knowledge_seeder.config import SeedConfig
from pal_knowledge_seeder.seeding import SeedOptions, run_seed, seed_knowledge_base

__version__ = "0.1.0"

__all__ = [
    "SeedConfig",
    "SeedOptions",
    "run_seed",
    "seed_knowledge_base",
]
