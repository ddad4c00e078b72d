"""
Semantic Conventions for Span Attributes

OpenTelemetry GenAI keys for embedding calls plus a custom "seed"
namespace for the seeding run.

Reference: https://opentelemetry.io/docs/specs/semconv/gen-ai/
"""

# ---------------------------------------------------------------------------
# GENAI NAMESPACE (OTel standard)
# ---------------------------------------------------------------------------

GEN_AI_SYSTEM = "gen_ai.system"  # "gemini"
GEN_AI_REQUEST_MODEL = "gen_ai.request.model"  # "gemini-embedding-001"


# ---------------------------------------------------------------------------
# SEED NAMESPACE (custom)
# ---------------------------------------------------------------------------

# Run level
SEED_COLLECTION = "seed.collection"
SEED_EXISTING_COUNT = "seed.existing_count"
SEED_STATUS = "seed.status"  # "seeded", "skipped"
SEED_DOCUMENTS_PREPARED = "seed.documents.prepared"
SEED_DOCUMENTS_ADDED = "seed.documents.added"
SEED_FINAL_COUNT = "seed.final_count"

# Batch level
SEED_BATCH_START_INDEX = "seed.batch.start_index"
SEED_BATCH_SIZE = "seed.batch.size"
SEED_BATCH_ATTEMPTS = "seed.batch.attempts"
SEED_BATCH_SUCCEEDED = "seed.batch.succeeded"


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------


def seed_run_attributes(
    collection: str,
    model: str | None = None,
) -> dict:
    """Create attributes dict for the seed.run span."""
    attrs = {SEED_COLLECTION: collection}
    if model:
        attrs[GEN_AI_SYSTEM] = "gemini"
        attrs[GEN_AI_REQUEST_MODEL] = model
    return attrs


def seed_batch_attributes(start_index: int, size: int) -> dict:
    """Create attributes dict for a seed.batch span."""
    return {
        SEED_BATCH_START_INDEX: start_index,
        SEED_BATCH_SIZE: size,
    }
