"""Closed sets of log categories and subsystems.

Labels are kept verbatim (including ``"database"`` and ``"Funcionalities"``)
so existing filters in log tooling keep matching.
"""

from __future__ import annotations

from enum import Enum

from logger_manager.exceptions import UnknownCategoryError


class LoggerCategory(str, Enum):
    """Kind of event a log entry describes."""

    DEFAULT = "Default"
    REQUEST = "Request"
    DATABASE = "database"
    UI_INTERACTION = "UI"
    RESPONSE = "Response"
    RESPONSE_ERROR = "ResponseError"

    @property
    def label(self) -> str:
        """String attached to log entries for this category."""
        return self.value

    @classmethod
    def from_label(cls, label: str) -> LoggerCategory:
        """Look up a category by its label.

        Args:
            label: Exact label, e.g. ``"UI"`` or ``"database"``.

        Returns:
            The matching category.

        Raises:
            UnknownCategoryError: If *label* is not a known category label.
        """
        try:
            return cls(label)
        except ValueError:
            available = ", ".join(repr(c.value) for c in cls)
            raise UnknownCategoryError(
                f"Unknown log category: {label!r}. Available: {available}"
            ) from None


class LoggerSubsystem(str, Enum):
    """Module or package a log entry originates from."""

    ENVIRONMENT = "Environment"
    COMMON_UTILS = "CommonUtils"
    UI_COMPONENTS = "UIComponents"
    PERSISTENCE = "Persistence"
    NETWORK = "Network"
    APP_DELEGATE = "AppDelegate"
    FUNCTIONALITIES = "Funcionalities"

    @property
    def label(self) -> str:
        """String attached to log entries for this subsystem."""
        return self.value
