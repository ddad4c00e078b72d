"""
Unit Tests for Observability Module

Focus:
1. Graceful degradation (NoOpTracer when disabled)
2. Configuration loading from environment
3. Span attributes for seeding runs

Tests work WITHOUT OpenTelemetry installed.
"""

from unittest.mock import patch

from pal_knowledge_seeder.observability import init_tracing
from pal_knowledge_seeder.observability.attributes import (
    GEN_AI_REQUEST_MODEL,
    SEED_BATCH_SIZE,
    SEED_BATCH_START_INDEX,
    SEED_COLLECTION,
    seed_batch_attributes,
    seed_run_attributes,
)
from pal_knowledge_seeder.observability.config import (
    TracingConfig,
    get_config,
    reset_config,
)
from pal_knowledge_seeder.observability.tracer import (
    NoOpSpan,
    NoOpTracer,
    get_tracer,
    reset_tracer,
)


# ---------------------------------------------------------------------------
# CONFIG TESTS
# ---------------------------------------------------------------------------


class TestTracingConfig:

    def setup_method(self):
        reset_config()

    def teardown_method(self):
        reset_config()

    def test_config_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = TracingConfig.from_env()

        assert config.enabled is False
        assert config.service_name == "pal-knowledge-seeder"
        assert config.collector_endpoint is None

    def test_config_enabled_values(self):
        for value in ("true", "1", "yes", "TRUE"):
            with patch.dict("os.environ", {"PAL_TRACING_ENABLED": value}):
                assert TracingConfig.from_env().enabled is True

    def test_config_disabled_values(self):
        for value in ("false", "0", "no"):
            with patch.dict("os.environ", {"PAL_TRACING_ENABLED": value}):
                assert TracingConfig.from_env().enabled is False

    def test_config_collector_endpoint(self):
        with patch.dict("os.environ", {"OTEL_EXPORTER_OTLP_ENDPOINT": "http://otel:4318/v1/traces"}):
            assert TracingConfig.from_env().collector_endpoint == "http://otel:4318/v1/traces"

    def test_get_config_singleton(self):
        assert get_config() is get_config()


# ---------------------------------------------------------------------------
# NOOP TRACER TESTS
# ---------------------------------------------------------------------------


class TestNoOpTracer:

    def test_noop_tracer_creates_spans(self):
        with NoOpTracer().start_span("seed.run") as span:
            assert isinstance(span, NoOpSpan)

    def test_noop_span_accepts_everything(self):
        with NoOpTracer().start_span("seed.batch", attributes={"seed.batch.size": 5}) as span:
            span.set_attribute("seed.batch.succeeded", False)
            span.set_status("error", "quota exceeded")
            span.record_exception(RuntimeError("quota exceeded"))

    def test_noop_tracer_does_not_swallow_exceptions(self):
        raised = False
        try:
            with NoOpTracer().start_span("seed.run"):
                raise ValueError("boom")
        except ValueError:
            raised = True
        assert raised


# ---------------------------------------------------------------------------
# GET_TRACER / INIT TESTS
# ---------------------------------------------------------------------------


class TestGetTracer:

    def setup_method(self):
        reset_tracer()
        reset_config()

    def teardown_method(self):
        reset_tracer()
        reset_config()

    def test_noop_when_disabled(self):
        with patch.dict("os.environ", {"PAL_TRACING_ENABLED": "false"}):
            assert isinstance(get_tracer(), NoOpTracer)

    def test_singleton(self):
        with patch.dict("os.environ", {"PAL_TRACING_ENABLED": "false"}):
            assert get_tracer() is get_tracer()

    def test_enabled_still_returns_usable_tracer(self):
        with patch.dict("os.environ", {"PAL_TRACING_ENABLED": "true"}):
            tracer = get_tracer()
            assert callable(tracer.start_span)

    def test_init_tracing_disabled(self):
        assert init_tracing(TracingConfig(enabled=False)) is False


# ---------------------------------------------------------------------------
# ATTRIBUTE HELPER TESTS
# ---------------------------------------------------------------------------


class TestAttributeHelpers:

    def test_seed_run_attributes(self):
        attrs = seed_run_attributes("pal_knowledge_base", model="gemini-embedding-001")

        assert attrs[SEED_COLLECTION] == "pal_knowledge_base"
        assert attrs[GEN_AI_REQUEST_MODEL] == "gemini-embedding-001"

    def test_seed_run_attributes_minimal(self):
        assert seed_run_attributes("kb") == {SEED_COLLECTION: "kb"}

    def test_seed_batch_attributes(self):
        assert seed_batch_attributes(10, 2) == {SEED_BATCH_START_INDEX: 10, SEED_BATCH_SIZE: 2}
