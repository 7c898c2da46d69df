"""In-memory sink for tests and post-hoc inspection.

Records every emission as an immutable ``LogEntry`` instead of writing it
anywhere.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from logger_manager.sinks.base import LogSink
from logger_manager.sinks.registry import register_sink

if TYPE_CHECKING:
    from logger_manager.config import LoggerManagerConfig


@dataclass(frozen=True, slots=True)
class LogEntry:
    """Immutable record of a single emission.

    Attributes:
        timestamp_ns: Wall-clock time of emission (nanoseconds since epoch).
        level: ``logging`` level constant.
        subsystem: Subsystem label of the emitting sink.
        category: Category label of the emitting sink.
        message: Message text as passed in.
    """

    timestamp_ns: int
    level: int
    subsystem: str
    category: str
    message: str


@register_sink("memory")
class InMemoryLogSink(LogSink):
    """Collects ``LogEntry`` records in a list."""

    def __init__(
        self,
        subsystem: str,
        category: str,
        config: LoggerManagerConfig | None = None,
    ) -> None:
        super().__init__(subsystem, category, config)
        self._entries: list[LogEntry] = []
        self._lock = threading.Lock()

    def emit(self, level: int, message: str) -> None:
        entry = LogEntry(
            timestamp_ns=time.time_ns(),
            level=level,
            subsystem=self._subsystem,
            category=self._category,
            message=message,
        )
        with self._lock:
            self._entries.append(entry)

    def entries(self) -> list[LogEntry]:
        """Return a copy of all entries recorded so far, oldest first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        """Drop all recorded entries."""
        with self._lock:
            self._entries.clear()
