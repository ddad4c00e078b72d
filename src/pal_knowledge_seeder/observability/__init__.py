"""
Observability Module - OpenTelemetry tracing for seeding runs.

USAGE:
------
# At process startup:
from pal_knowledge_seeder.observability import init_tracing

init_tracing()  # No-op unless PAL_TRACING_ENABLED=true

# In code that needs tracing:
from pal_knowledge_seeder.observability import get_tracer

tracer = get_tracer()
with tracer.start_span("seed.batch", attributes={"seed.batch.size": 5}) as span:
    ...
    span.set_attribute("seed.batch.succeeded", True)
"""

from __future__ import annotations

import logging

from pal_knowledge_seeder.observability.config import (
    TracingConfig,
    get_config,
    reset_config,
)
from pal_knowledge_seeder.observability.tracer import (
    TracerProtocol,
    SpanProtocol,
    NoOpTracer,
    NoOpSpan,
    get_tracer,
    reset_tracer,
)
from pal_knowledge_seeder.observability.attributes import (
    GEN_AI_SYSTEM,
    GEN_AI_REQUEST_MODEL,
    SEED_COLLECTION,
    SEED_EXISTING_COUNT,
    SEED_STATUS,
    SEED_DOCUMENTS_PREPARED,
    SEED_DOCUMENTS_ADDED,
    SEED_FINAL_COUNT,
    SEED_BATCH_START_INDEX,
    SEED_BATCH_SIZE,
    SEED_BATCH_ATTEMPTS,
    SEED_BATCH_SUCCEEDED,
    seed_run_attributes,
    seed_batch_attributes,
)

logger = logging.getLogger(__name__)

_tracing_initialized = False


def init_tracing(config: TracingConfig | None = None) -> bool:
    """
    Install an OpenTelemetry TracerProvider.

    Spans go to the OTLP endpoint when one is configured, otherwise to
    the console.

    Returns:
        True if tracing was initialized, False if disabled or failed
    """
    global _tracing_initialized
    if _tracing_initialized:
        return True

    config = config or get_config()

    if not config.enabled:
        logger.debug("Tracing disabled")
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

        if config.collector_endpoint:
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
            exporter = OTLPSpanExporter(endpoint=config.collector_endpoint)
            logger.info(f"Tracing to OTLP endpoint: {config.collector_endpoint}")
        else:
            exporter = ConsoleSpanExporter()
            logger.info("Tracing to console")

        provider = TracerProvider(
            resource=Resource.create({"service.name": config.service_name})
        )
        provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)

        reset_tracer()
        _tracing_initialized = True
        return True

    except ImportError as e:
        logger.warning(f"OpenTelemetry not installed, tracing disabled: {e}")
        return False
    except Exception as e:
        logger.error(f"Failed to initialize tracing: {e}")
        return False


def shutdown_tracing() -> None:
    """Flush spans and reset tracing state."""
    global _tracing_initialized

    if not _tracing_initialized:
        return

    try:
        from opentelemetry import trace
        provider = trace.get_tracer_provider()
        if hasattr(provider, "shutdown"):
            provider.shutdown()
    except Exception as e:
        logger.warning(f"Error shutting down tracing: {e}")

    reset_tracer()
    reset_config()
    _tracing_initialized = False


__all__ = [
    # Setup
    "init_tracing",
    "shutdown_tracing",
    # Config
    "TracingConfig",
    "get_config",
    "reset_config",
    # Tracer
    "TracerProtocol",
    "SpanProtocol",
    "NoOpTracer",
    "NoOpSpan",
    "get_tracer",
    "reset_tracer",
    # Attributes
    "GEN_AI_SYSTEM",
    "GEN_AI_REQUEST_MODEL",
    "SEED_COLLECTION",
    "SEED_EXISTING_COUNT",
    "SEED_STATUS",
    "SEED_DOCUMENTS_PREPARED",
    "SEED_DOCUMENTS_ADDED",
    "SEED_FINAL_COUNT",
    "SEED_BATCH_START_INDEX",
    "SEED_BATCH_SIZE",
    "SEED_BATCH_ATTEMPTS",
    "SEED_BATCH_SUCCEEDED",
    "seed_run_attributes",
    "seed_batch_attributes",
]
