"""Prometheus metrics for the key/value engine."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all key/value engine metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Command metrics
        self.commands_total = Counter(
            "memkv_commands_total",
            "Total number of commands handled",
            ["command", "status"],  # status: success, error
            registry=self._registry,
        )

        self.command_latency_seconds = Histogram(
            "memkv_command_latency_seconds",
            "Command latency in seconds",
            ["command"],
            buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
            registry=self._registry,
        )

        # Transaction metrics
        self.transactions_total = Counter(
            "memkv_transactions_total",
            "Total transaction control operations",
            ["status"],  # begin, commit, rollback
            registry=self._registry,
        )

        self.transaction_depth = Gauge(
            "memkv_transaction_depth",
            "Number of open nested transactions",
            registry=self._registry,
        )

        self.undo_operations_total = Counter(
            "memkv_undo_operations_total",
            "Total commands undone by rollbacks",
            registry=self._registry,
        )

        # Store metrics
        self.keys = Gauge(
            "memkv_keys",
            "Number of keys in the store",
            registry=self._registry,
        )

        # Server info
        self.info = Info(
            "memkv_engine",
            "Key/value engine information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying collector registry."""
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8002, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    # Set server info
    from memkv import __version__
    _metrics.info.info({
        "version": __version__,
    })

    # Start HTTP server for Prometheus scraping
    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
