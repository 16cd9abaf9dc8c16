"""Unit tests for the container, logging and metrics helpers."""

from __future__ import annotations

import io
import json

import pytest

from memkv.infrastructure.container import Container, get_container, reset_container
from memkv.infrastructure.logging import get_logger, setup_logging
from memkv.infrastructure.metrics import MetricsRegistry
from memkv.infrastructure.tracing import trace_span


@pytest.mark.unit
class TestContainer:
    """Tests for the DI container."""

    def test_singleton(
        self, container: Container, metrics_registry: MetricsRegistry
    ) -> None:
        """Singletons resolve to the registered instance."""
        container.register_singleton(MetricsRegistry, metrics_registry)

        assert container.has(MetricsRegistry)
        assert container.resolve(MetricsRegistry) is metrics_registry

    def test_factory_is_lazy_and_cached(self, container: Container) -> None:
        """Factories run once, on first resolve."""
        calls: list[int] = []

        def factory(c: Container) -> list[int]:
            calls.append(1)
            return calls

        container.register_factory(list, factory)
        assert calls == []

        first = container.resolve(list)
        second = container.resolve(list)

        assert first is second
        assert calls == [1]

    def test_missing_registration(self, container: Container) -> None:
        """Unregistered types raise KeyError."""
        with pytest.raises(KeyError, match="No registration"):
            container.resolve(dict)

    def test_clear(self, container: Container) -> None:
        """clear() drops every registration."""
        container.register_singleton(str, "x")
        container.clear()
        assert not container.has(str)

    def test_global_container_reset(self) -> None:
        """reset_container() replaces the global container."""
        first = get_container()
        assert get_container() is first

        reset_container()
        assert get_container() is not first
        reset_container()


@pytest.mark.unit
class TestLogging:
    """Tests for structured logging setup."""

    def test_json_logs_to_stream(self, clean_runtime: None) -> None:
        """JSON log lines carry the event, level and bound context."""
        stream = io.StringIO()
        setup_logging(level="INFO", log_format="json", stream=stream)

        get_logger("test", component="store").info("key_written", key="a")
        get_logger("test").debug("filtered_out")

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert len(lines) == 1
        assert lines[0]["event"] == "key_written"
        assert lines[0]["level"] == "info"
        assert lines[0]["component"] == "store"
        assert lines[0]["key"] == "a"
        assert "timestamp" in lines[0]


@pytest.mark.unit
class TestTracing:
    """Tests for tracing helpers."""

    def test_trace_span_sets_attributes(self) -> None:
        """trace_span yields a usable span without a configured provider."""
        with trace_span("memkv.test", {"memkv.command": "GET"}) as span:
            assert span is not None
