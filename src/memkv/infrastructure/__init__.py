"""Infrastructure layer - cross-cutting concerns."""

from memkv.infrastructure.config import Config, get_config
from memkv.infrastructure.container import Container, get_container, reset_container
from memkv.infrastructure.logging import setup_logging, get_logger
from memkv.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from memkv.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "Container",
    "get_container",
    "reset_container",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
