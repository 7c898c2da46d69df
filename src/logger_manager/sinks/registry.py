"""Name-to-class map for the sinks ``LoggerManagerConfig.sink_type`` can select.

Sink modules register themselves with ``@register_sink("<name>")`` when they
are imported; ``logger_manager.sinks`` imports the built-in ``"stdlib"`` and
``"memory"`` sinks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from logger_manager.sinks.base import LogSink

if TYPE_CHECKING:
    from collections.abc import Callable

    from logger_manager.config import LoggerManagerConfig


class SinkRegistry:
    """Sink classes keyed by the ``sink_type`` value that selects them."""

    _sinks: ClassVar[dict[str, type[LogSink]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[LogSink]], type[LogSink]]:
        """Decorator that makes a ``LogSink`` subclass selectable as *name*.

        Raises:
            TypeError: If the decorated class is not a ``LogSink`` subclass.
            ValueError: If *name* is already taken.
        """

        def decorator(sink_cls: type[LogSink]) -> type[LogSink]:
            if not (isinstance(sink_cls, type) and issubclass(sink_cls, LogSink)):
                raise TypeError(f"Log sink {name!r} must subclass LogSink, got {sink_cls!r}")
            if name in cls._sinks:
                raise ValueError(f"Log sink {name!r} is already registered")
            cls._sinks[name] = sink_cls
            return sink_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[LogSink]:
        """Return the sink class registered as *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        try:
            return cls._sinks[name]
        except KeyError:
            available = ", ".join(sorted(cls._sinks)) or "(none)"
            raise KeyError(f"Unknown log sink: {name!r}. Available: {available}") from None

    @classmethod
    def build(cls, subsystem: str, category: str, config: LoggerManagerConfig) -> LogSink:
        """Create the ``config.sink_type`` sink for one (subsystem, category) pair."""
        return cls.get(config.sink_type)(subsystem, category, config)

    @classmethod
    def names(cls) -> list[str]:
        """Sorted names of every registered sink."""
        return sorted(cls._sinks)


register_sink = SinkRegistry.register
