"""Error hierarchy for clockwords.

Scanning itself never raises: a candidate whose time cannot be resolved is
simply dropped. The errors below are raised at construction or configuration
time, when a language module or a settings file is unusable.

Usage:
    from clockwords.errors import ClockwordsError

    try:
        scanner = scanner_from_settings(load_settings(path))
    except ClockwordsError as e:
        print(e.to_dict())
"""

from __future__ import annotations


class ClockwordsError(Exception):
    """Base exception for all clockwords errors.

    Attributes:
        code: Error code for categorization
        details: Additional error details for debugging
    """

    code: str = "CLOCKWORDS_ERROR"
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class LanguageModuleError(ClockwordsError):
    """A language module does not satisfy the language contract.

    Common causes:
    - Missing language code
    - Typing prefix shorter than the minimum length
    - A rule without a compiled pattern or resolver
    """

    code = "LANGUAGE_MODULE_ERROR"
    default_message = "Invalid language module"


class ConfigurationError(ClockwordsError):
    """Scanner settings could not be loaded or validated."""

    code = "CONFIGURATION_ERROR"
    default_message = "Invalid clockwords configuration"
