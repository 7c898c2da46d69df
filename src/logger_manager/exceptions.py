"""Exception hierarchy for logger-manager.

Logging calls themselves never raise on sink failure. These exceptions cover
programming errors detected before anything is logged.
"""


class LoggerManagerError(Exception):
    """Base exception for all logger-manager errors."""


class UnknownCategoryError(LoggerManagerError, ValueError):
    """A free-form category string was passed where a known category is required.

    Raised by ``LoggerManager.send_log()`` when the category is a string that
    matches none of the ``LoggerCategory`` labels. Use ``send_custom_log()``
    for categories outside the closed set.
    """
