"""Sink backed by the standard ``logging`` module.

Each sink owns the logger ``<namespace>.<subsystem>.<category>`` and wraps it
in a ``LoggerAdapter`` so every record carries ``subsystem`` and ``category``
attributes. Handlers and filters can select on either without parsing the
logger name.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from logger_manager.sinks.base import LogSink
from logger_manager.sinks.registry import register_sink

if TYPE_CHECKING:
    from logger_manager.config import LoggerManagerConfig

_DEFAULT_NAMESPACE = "applog"


@register_sink("stdlib")
class StdlibLogSink(LogSink):
    """``logging.Logger`` wrapper, the default sink.

    Loggers are process-global: ``config.propagate`` is written onto the shared
    logger each time a sink is built, so managers with the same namespace but
    different ``propagate`` values overwrite each other. The last sink built wins.
    """

    def __init__(
        self,
        subsystem: str,
        category: str,
        config: LoggerManagerConfig | None = None,
    ) -> None:
        super().__init__(subsystem, category, config)
        namespace = config.logger_namespace if config is not None else _DEFAULT_NAMESPACE
        base = logging.getLogger(f"{namespace}.{subsystem}.{category}")
        if config is not None:
            base.propagate = config.propagate
        self._adapter = logging.LoggerAdapter(
            base, {"subsystem": subsystem, "category": category}
        )

    @property
    def logger(self) -> logging.Logger:
        """The underlying stdlib logger."""
        return self._adapter.logger

    def emit(self, level: int, message: str) -> None:
        """Log *message* verbatim; ``%`` sequences are not interpolated."""
        self._adapter.log(level, "%s", message)
