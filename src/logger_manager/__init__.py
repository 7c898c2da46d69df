"""logger-manager: categorized debug logging with cached per-pair loggers.

Tags every message with a category (UI interaction, request, response, ...)
and a subsystem (the originating module), and keeps exactly one logger per
(subsystem, category) pair for the life of the manager.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("logger-manager")
except PackageNotFoundError:
    __version__ = "0.0.0"

from logger_manager.categories import LoggerCategory, LoggerSubsystem
from logger_manager.config import LoggerManagerConfig
from logger_manager.exceptions import LoggerManagerError, UnknownCategoryError
from logger_manager.manager import (
    LoggerManager,
    get_default_manager,
    send_custom_log,
    send_log,
    set_default_manager,
)

__all__ = [
    "LoggerCategory",
    "LoggerManager",
    "LoggerManagerConfig",
    "LoggerManagerError",
    "LoggerSubsystem",
    "UnknownCategoryError",
    "__version__",
    "get_default_manager",
    "send_custom_log",
    "send_log",
    "set_default_manager",
]
