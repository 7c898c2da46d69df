"""Log sink subsystem for logger-manager.

Re-exports the ABC, registry, and built-in sinks::

    from logger_manager.sinks import LogSink, SinkRegistry
    from logger_manager.sinks import StdlibLogSink, InMemoryLogSink
"""

from logger_manager.sinks.base import KEY_SEPARATOR, LogSink
from logger_manager.sinks.memory import InMemoryLogSink, LogEntry
from logger_manager.sinks.registry import SinkRegistry, register_sink
from logger_manager.sinks.stdlib import StdlibLogSink

__all__ = [
    "KEY_SEPARATOR",
    "InMemoryLogSink",
    "LogEntry",
    "LogSink",
    "SinkRegistry",
    "StdlibLogSink",
    "register_sink",
]
