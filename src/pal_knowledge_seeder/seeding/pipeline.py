"""
Knowledge-base seeding pipeline.

Orchestrates one linear run:

    load -> connect -> guard -> transform -> batch loop -> verify

GUARD:
------
If the collection already holds documents the run is skipped entirely.
Re-seeding means clearing the collection out-of-band first. The check is a
plain count read, so two runs started at the same moment can both pass it.

BATCH LOOP:
-----------
Documents are embedded one request at a time with a fixed pause after each
request, then written with a single add() per batch. A failed batch is
logged (and optionally retried) and the loop moves on; it never aborts
the run.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from pal_knowledge_seeder.config import SeedConfig
from pal_knowledge_seeder.core import (
    BatchResult,
    CandidateDocument,
    EmbeddingProvider,
    SeedReport,
    SeedStatus,
    SourceIntent,
    VectorCollection,
    VectorStoreClient,
)
from pal_knowledge_seeder.dataset import load_dataset
from pal_knowledge_seeder.documents import build_documents
from pal_knowledge_seeder.observability import (
    SEED_BATCH_ATTEMPTS,
    SEED_BATCH_SUCCEEDED,
    SEED_DOCUMENTS_ADDED,
    SEED_DOCUMENTS_PREPARED,
    SEED_EXISTING_COUNT,
    SEED_FINAL_COUNT,
    SEED_STATUS,
    get_tracer,
    seed_batch_attributes,
    seed_run_attributes,
)
from pal_knowledge_seeder.store import connect_collection

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], None]


@dataclass
class SeedOptions:
    """Batching, throttling and retry knobs for the batch loop."""

    batch_size: int = 5
    embed_delay_seconds: float = 0.2
    max_retries: int = 0
    retry_backoff_seconds: float = 1.0
    source: str = "dataset.json"

    def __post_init__(self):
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {self.batch_size}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.embed_delay_seconds < 0:
            raise ValueError(f"embed_delay_seconds must be >= 0, got {self.embed_delay_seconds}")
        if self.retry_backoff_seconds < 0:
            raise ValueError(f"retry_backoff_seconds must be >= 0, got {self.retry_backoff_seconds}")

    @classmethod
    def from_config(cls, config: SeedConfig) -> "SeedOptions":
        return cls(
            batch_size=config.batch_size,
            embed_delay_seconds=config.embed_delay_seconds,
            max_retries=config.max_retries,
            retry_backoff_seconds=config.retry_backoff_seconds,
            source=config.dataset_path.name,
        )


def _embed_documents(
    docs: Sequence[CandidateDocument],
    embeddings: EmbeddingProvider,
    delay_seconds: float,
    sleep: Sleeper,
) -> list[list[float]]:
    """Embed sequentially, pausing after every request."""
    vectors = []
    for doc in docs:
        vector = embeddings.embed(doc.content)
        vectors.append(np.asarray(vector).tolist())
        sleep(delay_seconds)
    return vectors


def _write_batch(
    start_index: int,
    batch: Sequence[CandidateDocument],
    collection: VectorCollection,
    embeddings: EmbeddingProvider,
    options: SeedOptions,
    sleep: Sleeper,
) -> BatchResult:
    """Embed and add one batch, retrying up to options.max_retries times."""
    ids = [doc.id for doc in batch]
    attempts = 0
    last_error: Exception | None = None

    while attempts <= options.max_retries:
        if attempts > 0:
            backoff = options.retry_backoff_seconds * 2 ** (attempts - 1)
            logger.info(f"Retrying batch at index {start_index} in {backoff:.1f}s")
            sleep(backoff)
        attempts += 1

        try:
            vectors = _embed_documents(batch, embeddings, options.embed_delay_seconds, sleep)
            collection.add(
                ids=ids,
                embeddings=vectors,
                documents=[doc.content for doc in batch],
                metadatas=[doc.metadata for doc in batch],
            )
            return BatchResult(start_index=start_index, ids=ids, succeeded=True, attempts=attempts)
        except Exception as e:
            last_error = e
            logger.error(f"Failed batch starting at index {start_index} (attempt {attempts}): {type(e).__name__}: {e}")

    return BatchResult(
        start_index=start_index,
        ids=ids,
        succeeded=False,
        attempts=attempts,
        error=f"{type(last_error).__name__}: {last_error}",
        exception=last_error,
    )


def run_seed(
    intents: Sequence[SourceIntent],
    collection: VectorCollection,
    embeddings: EmbeddingProvider,
    options: SeedOptions | None = None,
    collection_name: str = "",
    model: str | None = None,
    sleep: Sleeper = time.sleep,
) -> SeedReport:
    """
    Guard, transform and write intents into an open collection.

    Args:
        intents: Parsed dataset
        collection: Target collection (count/add)
        embeddings: Embedding provider, called once per document
        options: Batch size, throttle delay and retry policy
        collection_name: Used for reporting only
        model: Embedding model name, recorded on the run span
        sleep: Injected for tests; defaults to time.sleep

    Returns:
        SeedReport; status SKIPPED when the guard short-circuits.
    """
    options = options or SeedOptions()
    tracer = get_tracer()

    with tracer.start_span("seed.run", attributes=seed_run_attributes(collection_name, model)) as span:
        existing = collection.count()
        span.set_attribute(SEED_EXISTING_COUNT, existing)

        if existing > 0:
            logger.warning(
                f"Collection already has {existing} documents. "
                "Skipping seed to avoid duplicates; delete the collection first to re-seed."
            )
            span.set_attribute(SEED_STATUS, SeedStatus.SKIPPED.value)
            return SeedReport(
                status=SeedStatus.SKIPPED,
                collection_name=collection_name,
                existing_count=existing,
            )

        docs = build_documents(intents, source=options.source)
        logger.info(f"Prepared {len(docs)} documents for embedding")
        span.set_attribute(SEED_DOCUMENTS_PREPARED, len(docs))

        report = SeedReport(
            status=SeedStatus.SEEDED,
            collection_name=collection_name,
            existing_count=existing,
            prepared=len(docs),
        )

        total_batches = -(-len(docs) // options.batch_size)
        for batch_num, start in enumerate(range(0, len(docs), options.batch_size), start=1):
            batch = docs[start:start + options.batch_size]

            with tracer.start_span(
                "seed.batch",
                attributes=seed_batch_attributes(start, len(batch)),
            ) as batch_span:
                result = _write_batch(start, batch, collection, embeddings, options, sleep)
                batch_span.set_attribute(SEED_BATCH_ATTEMPTS, result.attempts)
                batch_span.set_attribute(SEED_BATCH_SUCCEEDED, result.succeeded)
                if not result.succeeded:
                    batch_span.set_status("error", result.error)
                    batch_span.record_exception(result.exception)

            report.batches.append(result)
            if result.succeeded:
                report.added += len(batch)
                logger.info(
                    f"Added batch {batch_num}/{total_batches} "
                    f"({report.added}/{report.prepared} docs)"
                )

        logger.info(f"Seeding complete! Added {report.added} documents.")
        if report.failed_ids:
            logger.warning(f"{len(report.failed_ids)} documents were not seeded: {report.failed_ids}")

        report.final_count = collection.count()
        logger.info(f"Total documents in collection: {report.final_count}")

        span.set_attribute(SEED_STATUS, report.status.value)
        span.set_attribute(SEED_DOCUMENTS_ADDED, report.added)
        span.set_attribute(SEED_FINAL_COUNT, report.final_count)

    return report


def seed_knowledge_base(
    config: SeedConfig,
    client: VectorStoreClient | None = None,
    embeddings: EmbeddingProvider | None = None,
    sleep: Sleeper = time.sleep,
) -> SeedReport:
    """
    Full run from an explicit configuration.

    Raises:
        DatasetLoadError: dataset missing or unparsable
        StoreConnectionError: collection cannot be opened
    """
    logger.info("Starting knowledge base seeding")
    options = SeedOptions.from_config(config)

    intents = load_dataset(config.dataset_path)
    collection = connect_collection(config, client=client)

    if embeddings is None:
        from pal_knowledge_seeder.embeddings import get_embedding_provider
        embeddings = get_embedding_provider(config)

    return run_seed(
        intents,
        collection,
        embeddings,
        options=options,
        collection_name=config.collection_name,
        model=config.embedding_model,
        sleep=sleep,
    )
