"""Custom exception hierarchy for localekit."""

from __future__ import annotations


class LocaleError(Exception):
    """Base exception for all localekit errors."""


class LocaleConfigError(LocaleError):
    """Invalid or missing configuration."""


class LocaleNotResolvedError(LocaleError):
    """No locale is active and none was passed to a formatting call."""


class LocaleFormatError(LocaleError):
    """The formatter could not render a value."""

    def __init__(
        self,
        message: str,
        *,
        locale: str | None = None,
        value: object = None,
    ) -> None:
        self.locale = locale
        self.value = value
        super().__init__(message)


class InvalidDateError(LocaleFormatError, ValueError):
    """Input could not be normalized to a datetime.

    Raised for strings that are neither epoch milliseconds nor ISO-8601,
    and for values of an unsupported type.
    """


class InvalidNumberError(LocaleFormatError, ValueError):
    """Input could not be parsed as a number."""
