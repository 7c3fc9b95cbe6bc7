#!/usr/bin/env python3
"""
Exception hierarchy for android-i18n.

Every failure surfaced to the CLI boundary derives from I18nError so the
caller can report it uniformly. Nothing here is retried: these are data and
format errors, not transient ones.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all android-i18n failures."""


class ConfigError(I18nError):
    """Raised for an unreadable or malformed configuration file."""


class ValidationError(I18nError):
    """
    Raised for a malformed translation key or an empty key/translation.

    Attributes:
        key: Offending key, when known
        row: 1-based spreadsheet row number, when raised during an import
        locale: Locale column being processed, when raised during an import
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        row: Optional[int] = None,
        locale: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.key = key
        self.row = row
        self.locale = locale

    def with_context(self, row: int, locale: str) -> "ValidationError":
        """Return a copy of this error located at a spreadsheet row/locale."""
        return ValidationError(
            f"Row {row}, locale '{locale}': {self.message}",
            key=self.key,
            row=row,
            locale=locale,
        )


class NotFoundError(I18nError, FileNotFoundError):
    """Raised when a source path is missing, blank or unresolvable."""


class UnsupportedFormatError(I18nError):
    """Raised when a source/target spreadsheet format is not supported."""


class ResourceIOError(I18nError, OSError):
    """Raised when a resource directory or file cannot be created, written or read."""
