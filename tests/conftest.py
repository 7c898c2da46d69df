"""Shared pytest fixtures for logger-manager tests.

Provides environment-independent configs, managers backed by the in-memory
sink, and a counting sink factory for cache tests.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator

import pytest

from logger_manager.config import LoggerManagerConfig
from logger_manager.manager import LoggerManager, set_default_manager
from logger_manager.sinks.memory import InMemoryLogSink


class CountingSinkFactory:
    """Sink factory that records every (subsystem, category) it is asked for."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def __call__(self, subsystem: str, category: str) -> InMemoryLogSink:
        with self._lock:
            self.calls.append((subsystem, category))
        return InMemoryLogSink(subsystem, category)


@pytest.fixture
def default_config() -> LoggerManagerConfig:
    """Return a config with all default values, ignoring any .env file."""
    return LoggerManagerConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def memory_config() -> LoggerManagerConfig:
    """Return a config that builds in-memory sinks."""
    return LoggerManagerConfig(_env_file=None, sink_type="memory")  # type: ignore[call-arg]


@pytest.fixture
def memory_manager(memory_config: LoggerManagerConfig) -> LoggerManager:
    """Return a fresh manager whose sinks record entries in memory."""
    return LoggerManager(memory_config)


@pytest.fixture
def counting_factory() -> CountingSinkFactory:
    return CountingSinkFactory()


@pytest.fixture(autouse=True)
def _reset_default_manager() -> Iterator[None]:
    """Keep the process-wide default manager from leaking between tests."""
    set_default_manager(None)
    yield
    set_default_manager(None)
