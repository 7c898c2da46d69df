"""Abstract base class for all log sinks.

A sink is the handle the host logging facility gives back for one
(subsystem, category) pair. It is created once by ``LoggerManager`` and
reused for every message with that pair. Subclasses implement ``emit()``;
the labels are fixed at construction.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logger_manager.config import LoggerManagerConfig

KEY_SEPARATOR = "-"


class LogSink(ABC):
    """Abstract base for all log sinks.

    Args:
        subsystem: Subsystem label the sink is scoped to.
        category: Category label the sink is scoped to.
        config: Active configuration. Sinks that need no settings ignore it.
    """

    def __init__(
        self,
        subsystem: str,
        category: str,
        config: LoggerManagerConfig | None = None,
    ) -> None:
        self._subsystem = subsystem
        self._category = category

    @property
    def subsystem(self) -> str:
        """Subsystem label, e.g. ``'UIComponents'``."""
        return self._subsystem

    @property
    def category(self) -> str:
        """Category label, e.g. ``'UI'``."""
        return self._category

    @property
    def name(self) -> str:
        """Cache key of this sink: ``'<subsystem>-<category>'``."""
        return f"{self._subsystem}{KEY_SEPARATOR}{self._category}"

    @abstractmethod
    def emit(self, level: int, message: str) -> None:
        """Write one message at *level*.

        Args:
            level: A ``logging`` level constant (e.g. ``logging.DEBUG``).
            message: Message text, written as-is.
        """

    def debug(self, message: str) -> None:
        """Write *message* at ``logging.DEBUG``."""
        self.emit(logging.DEBUG, message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._subsystem!r}, {self._category!r})"
