"""localekit - Active locale tracking and locale-aware formatting."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("localekit")
except PackageNotFoundError:
    __version__ = "0+local"
from localekit._dates import ValidDate, to_datetime
from localekit.config import LocaleSettings
from localekit.currency import CurrencyResolver
from localekit.defaults import get_default_options, resolve_options
from localekit.exceptions import (
    InvalidDateError,
    InvalidNumberError,
    LocaleConfigError,
    LocaleError,
    LocaleFormatError,
    LocaleNotResolvedError,
)
from localekit.formatter import BabelFormatter, Formatter
from localekit.models import (
    DateFormatOptions,
    FormatDefaults,
    FormatKind,
    LocaleConfig,
    NumberFormatOptions,
)
from localekit.resolver import LocaleResolver
from localekit.service import LocaleService
from localekit.source import ActiveLanguage, LanguageSource
from localekit.state.events import LocaleChanges, Subscription
from localekit.state.store import LocaleStore
from localekit.validation import is_valid_locale

__all__ = [
    "__version__",
    "ActiveLanguage",
    "BabelFormatter",
    "CurrencyResolver",
    "DateFormatOptions",
    "FormatDefaults",
    "FormatKind",
    "Formatter",
    "InvalidDateError",
    "InvalidNumberError",
    "LanguageSource",
    "LocaleChanges",
    "LocaleConfig",
    "LocaleConfigError",
    "LocaleError",
    "LocaleFormatError",
    "LocaleNotResolvedError",
    "LocaleResolver",
    "LocaleService",
    "LocaleSettings",
    "LocaleStore",
    "NumberFormatOptions",
    "Subscription",
    "ValidDate",
    "get_default_options",
    "is_valid_locale",
    "resolve_options",
    "to_datetime",
]
