"""
CLI commands - entry point for the seeding run.

The command follows a consistent pattern:
1. Parse arguments
2. Load environment
3. Run the pipeline
4. Print results
5. Return exit code

Exit codes:
    0   seeded (even if some batches failed) or skipped by the guard
    1   dataset/collection setup failed, or any unexpected error
    130 interrupted
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from pal_knowledge_seeder.config import SeedConfig
from pal_knowledge_seeder.core import SeedError, SeedStatus
from pal_knowledge_seeder.observability import init_tracing, shutdown_tracing

logger = logging.getLogger("pal_knowledge_seeder")


def _load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _configure_logging(quiet: bool, verbose: bool) -> None:
    level = logging.INFO
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pal-seed",
        description="Seed the P.A.L. knowledge base from an intents dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Connection settings come from the environment (or a .env file):
  GOOGLE_API_KEY, CHROMA_API_KEY, CHROMA_TENANT, CHROMA_DATABASE,
  CHROMA_HOST, CHROMA_PORT, CHROMA_COLLECTION_NAME

Examples:
  pal-seed                           # Seed from data/dataset.json
  pal-seed --dataset data/dataset.json --json
  pal-seed --max-retries 2           # Retry failed batches with backoff
        """,
    )
    parser.add_argument("--dataset", type=Path, help="Intents JSON file (default: $PAL_DATASET_PATH or data/dataset.json)")
    parser.add_argument("--batch-size", type=int, help="Documents per write (default: 5)")
    parser.add_argument("--delay-ms", type=int, help="Pause after each embedding request (default: 200)")
    parser.add_argument("--max-retries", type=int, help="Extra attempts per failed batch (default: 0)")
    parser.add_argument("--json", action="store_true", help="Print the run report as JSON")
    parser.add_argument("--quiet", action="store_true", help="Only warnings and errors")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def _apply_overrides(config: SeedConfig, args: argparse.Namespace) -> SeedConfig:
    overrides = {
        "dataset_path": args.dataset,
        "batch_size": args.batch_size,
        "embed_delay_ms": args.delay_ms,
        "max_retries": args.max_retries,
    }
    return dataclasses.replace(
        config,
        **{key: value for key, value in overrides.items() if value is not None},
    )


def run_seed_cli(argv: list[str] | None = None) -> int:
    """CLI entry point for a seeding run."""
    from pal_knowledge_seeder.seeding import seed_knowledge_base

    args = build_parser().parse_args(argv)
    _load_env()
    _configure_logging(args.quiet, args.verbose)

    init_tracing()

    try:
        config = _apply_overrides(SeedConfig.from_env(), args)
        report = seed_knowledge_base(config)
    except SeedError as e:
        logger.error(str(e))
        return 1
    except Exception:
        logger.exception("Seeding failed")
        return 1
    finally:
        shutdown_tracing()

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    elif report.status is SeedStatus.SEEDED:
        print(f"Prepared: {report.prepared}")
        print(f"Added:    {report.added}")
        print(f"Total in '{report.collection_name}': {report.final_count}")
        if report.failed_ids:
            print(f"Not seeded ({len(report.failed_ids)}):")
            for doc_id in report.failed_ids:
                print(f"  {doc_id}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point (``pal-seed``)."""
    try:
        return run_seed_cli(argv)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
