"""Pytest configuration and fixtures for memkv tests."""

from __future__ import annotations

from typing import Generator

import pytest
import structlog
from prometheus_client import CollectorRegistry

from memkv.adapters.inbound.command_parser import CommandParser
from memkv.adapters.outbound.in_memory_store import InMemoryKeyValueStore
from memkv.application import CommandDispatcher, KVEngine
from memkv.domain.services import NestedTransactionStack
from memkv.infrastructure.config import get_config
from memkv.infrastructure.container import Container, reset_container
from memkv.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """Provide an empty in-memory store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def transactions(store: InMemoryKeyValueStore) -> NestedTransactionStack:
    """Provide a transaction stack over the test store."""
    return NestedTransactionStack(store)


@pytest.fixture
def parser() -> CommandParser:
    """Provide a command parser."""
    return CommandParser()


@pytest.fixture
def dispatcher(
    store: InMemoryKeyValueStore, transactions: NestedTransactionStack
) -> CommandDispatcher:
    """Provide a dispatcher wired to the test store and stack."""
    return CommandDispatcher(store, transactions)


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def engine(metrics_registry: MetricsRegistry) -> KVEngine:
    """Provide an engine with isolated metrics."""
    return KVEngine(metrics=metrics_registry)


@pytest.fixture
def container() -> Generator[Container, None, None]:
    """Provide a fresh DI container for each test."""
    reset_container()
    c = Container()
    yield c
    c.clear()


@pytest.fixture
def clean_runtime() -> Generator[None, None, None]:
    """Reset cached config, the global container and structlog after a test."""
    get_config.cache_clear()
    reset_container()
    yield
    get_config.cache_clear()
    reset_container()
    structlog.reset_defaults()


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
