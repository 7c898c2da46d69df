"""Categorized logging with one cached sink per (subsystem, category) pair.

``LoggerManager`` is the registry: it derives a key from the subsystem and
category labels, creates the sink for that key on first use, and reuses it
afterwards. Applications build one manager at their composition root and
pass it to whatever needs to log; :func:`send_log` and
:func:`send_custom_log` at module level go through a lazily created default
instance for call sites that have no manager at hand::

    manager = LoggerManager()
    manager.send_log(
        "Accept button tapped",
        category=LoggerCategory.UI_INTERACTION,
        subsystem=LoggerSubsystem.UI_COMPONENTS,
    )

The entry above is written by the sink keyed ``"UIComponents-UI"``.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from logger_manager.categories import LoggerCategory, LoggerSubsystem
from logger_manager.config import LoggerManagerConfig
from logger_manager.sinks import KEY_SEPARATOR, SinkRegistry

if TYPE_CHECKING:
    from collections.abc import Callable

    from logger_manager.sinks.base import LogSink

logger = logging.getLogger("logger_manager")


def _subsystem_label(subsystem: LoggerSubsystem | None) -> str:
    return subsystem.label if subsystem is not None else LoggerCategory.DEFAULT.label


class LoggerManager:
    """Lazily creates and caches one sink per (subsystem, category) pair.

    The lookup-or-create step runs under a lock, so concurrent callers with
    the same pair always end up sharing a single sink. Emission happens
    outside the lock.

    Args:
        config: Settings for new sinks. Loaded from the environment if omitted.
        sink_factory: Optional ``(subsystem, category) -> LogSink`` callable
            that replaces the registry lookup of ``config.sink_type``.
            It runs while the cache lock is held and must not log through
            this manager; the lock is not reentrant and the call would
            deadlock.
    """

    def __init__(
        self,
        config: LoggerManagerConfig | None = None,
        sink_factory: Callable[[str, str], LogSink] | None = None,
    ) -> None:
        self._config = config if config is not None else LoggerManagerConfig()
        self._sink_factory = sink_factory
        self._loggers: dict[str, LogSink] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> LoggerManagerConfig:
        return self._config

    @staticmethod
    def make_key(category: str, subsystem: LoggerSubsystem | None = None) -> str:
        """Return the cache key for a category label and optional subsystem.

        A missing subsystem is labelled with the default category's label.
        """
        return _subsystem_label(subsystem) + KEY_SEPARATOR + category

    def send_log(
        self,
        message: str,
        category: LoggerCategory | str = LoggerCategory.DEFAULT,
        subsystem: LoggerSubsystem | None = None,
    ) -> None:
        """Log *message* at debug level under a known category.

        Args:
            message: Text to log. Any string is accepted.
            category: A ``LoggerCategory``, or the exact label of one.
            subsystem: Originating subsystem. ``None`` logs under ``"Default"``.

        Raises:
            UnknownCategoryError: If *category* is a string that is not a
                known category label. Nothing is logged in that case.
        """
        if not isinstance(category, LoggerCategory):
            category = LoggerCategory.from_label(category)
        self._dispatch(message, category.label, subsystem)

    def send_custom_log(
        self,
        message: str,
        category: str,
        subsystem: LoggerSubsystem | None = None,
    ) -> None:
        """Log *message* at debug level under an arbitrary category label.

        The label is not checked against ``LoggerCategory``; each distinct
        label gets its own cached sink.
        """
        self._dispatch(message, category, subsystem)

    def get_logger(self, category: str, subsystem: LoggerSubsystem | None = None) -> LogSink:
        """Return the sink for *category* and *subsystem*, creating it once.

        Args:
            category: Category label.
            subsystem: Originating subsystem, or ``None`` for ``"Default"``.

        Returns:
            The cached sink for the pair. Repeated calls return the same object.
        """
        if isinstance(category, LoggerCategory):
            category = category.label
        key = self.make_key(category, subsystem)
        with self._lock:
            existing = self._loggers.get(key)
            if existing is not None:
                return existing

            sink = self._create_sink(_subsystem_label(subsystem), category)
            self._loggers[key] = sink

        logger.debug("Created log sink %r for key %r", sink, key)
        return sink

    def registered_keys(self) -> list[str]:
        """Return the keys of all sinks created so far, sorted."""
        with self._lock:
            return sorted(self._loggers)

    def _create_sink(self, subsystem: str, category: str) -> LogSink:
        if self._sink_factory is not None:
            return self._sink_factory(subsystem, category)
        return SinkRegistry.build(subsystem, category, self._config)

    def _dispatch(self, message: str, category: str, subsystem: LoggerSubsystem | None) -> None:
        try:
            self.get_logger(category, subsystem).debug(message)
        except Exception:  # Intentional: a failing sink must not break the caller
            # Raw arguments only; key derivation may be what failed.
            logger.warning(
                "Failed to log to sink for subsystem=%r category=%r",
                subsystem,
                category,
                exc_info=True,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._loggers


_default_manager: LoggerManager | None = None
_default_lock = threading.Lock()


def get_default_manager() -> LoggerManager:
    """Return the process-wide default manager, creating it on first call."""
    global _default_manager
    with _default_lock:
        if _default_manager is None:
            _default_manager = LoggerManager()
        return _default_manager


def set_default_manager(manager: LoggerManager | None) -> None:
    """Install *manager* as the default. ``None`` resets to lazy creation."""
    global _default_manager
    with _default_lock:
        _default_manager = manager


def send_log(
    message: str,
    category: LoggerCategory | str = LoggerCategory.DEFAULT,
    subsystem: LoggerSubsystem | None = None,
) -> None:
    """Shortcut for ``get_default_manager().send_log(...)``."""
    get_default_manager().send_log(message, category=category, subsystem=subsystem)


def send_custom_log(
    message: str,
    category: str,
    subsystem: LoggerSubsystem | None = None,
) -> None:
    """Shortcut for ``get_default_manager().send_custom_log(...)``."""
    get_default_manager().send_custom_log(message, category=category, subsystem=subsystem)
