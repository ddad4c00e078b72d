"""
Seeding module - the batch embedding and write pipeline.
"""

from pal_knowledge_seeder.seeding.pipeline import (
    SeedOptions,
    run_seed,
    seed_knowledge_base,
)

__all__ = [
    "SeedOptions",
    "run_seed",
    "seed_knowledge_base",
]
