"""Tests for LoggerCategory and LoggerSubsystem."""

from __future__ import annotations

import pytest

from logger_manager.categories import LoggerCategory, LoggerSubsystem
from logger_manager.exceptions import LoggerManagerError, UnknownCategoryError


class TestLoggerCategory:
    """Labels must stay stable; log filters match on them."""

    def test_labels(self) -> None:
        assert {c.name: c.label for c in LoggerCategory} == {
            "DEFAULT": "Default",
            "REQUEST": "Request",
            "DATABASE": "database",
            "UI_INTERACTION": "UI",
            "RESPONSE": "Response",
            "RESPONSE_ERROR": "ResponseError",
        }

    def test_is_str(self) -> None:
        assert LoggerCategory.UI_INTERACTION == "UI"
        assert isinstance(LoggerCategory.UI_INTERACTION, str)

    def test_from_label(self) -> None:
        assert LoggerCategory.from_label("database") is LoggerCategory.DATABASE
        assert LoggerCategory.from_label("ResponseError") is LoggerCategory.RESPONSE_ERROR

    def test_from_label_is_case_sensitive(self) -> None:
        with pytest.raises(UnknownCategoryError):
            LoggerCategory.from_label("Database")

    def test_from_label_unknown_lists_available(self) -> None:
        with pytest.raises(UnknownCategoryError, match="'Request'") as exc_info:
            LoggerCategory.from_label("CustomCategory")
        assert isinstance(exc_info.value, LoggerManagerError)
        assert isinstance(exc_info.value, ValueError)


class TestLoggerSubsystem:
    def test_labels(self) -> None:
        assert [s.label for s in LoggerSubsystem] == [
            "Environment",
            "CommonUtils",
            "UIComponents",
            "Persistence",
            "Network",
            "AppDelegate",
            "Funcionalities",
        ]

    def test_lookup_by_label(self) -> None:
        assert LoggerSubsystem("Funcionalities") is LoggerSubsystem.FUNCTIONALITIES
