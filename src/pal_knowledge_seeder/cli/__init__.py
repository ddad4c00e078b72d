"""
CLI module - command-line interface for seeding.
"""

from pal_knowledge_seeder.cli.commands import (
    main,
    run_seed_cli,
)

__all__ = [
    "main",
    "run_seed_cli",
]
