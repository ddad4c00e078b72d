"""
Tracing Configuration

Loads tracing settings from environment variables.
Tracing is off unless explicitly enabled.
"""

import os
from dataclasses import dataclass


@dataclass
class TracingConfig:
    """Configuration for OpenTelemetry tracing.

    Environment Variables:
        PAL_TRACING_ENABLED: Enable tracing (default: false)
        PAL_TRACING_SERVICE_NAME: Service name on exported spans (default: pal-knowledge-seeder)
        OTEL_EXPORTER_OTLP_ENDPOINT: Remote OTLP endpoint (console exporter if empty)
    """

    enabled: bool = False
    service_name: str = "pal-knowledge-seeder"
    collector_endpoint: str | None = None

    @classmethod
    def from_env(cls) -> "TracingConfig":
        """Load config from environment variables."""
        return cls(
            enabled=os.environ.get("PAL_TRACING_ENABLED", "false").lower() in ("true", "1", "yes"),
            service_name=os.environ.get("PAL_TRACING_SERVICE_NAME", "pal-knowledge-seeder"),
            collector_endpoint=os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT") or None,
        )


# Global config singleton
_config: TracingConfig | None = None


def get_config() -> TracingConfig:
    """Get the global tracing config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = TracingConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
