"""Locale to currency resolution."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from localekit.models.options import FormatKind, NumberFormatOptions

if TYPE_CHECKING:
    from localekit.formatter import Formatter

_PIVOT = 0

# Bidi marks some CLDR locales wrap around the currency symbol.
_STRIP_CHARS = "\u200e\u200f\u061c"

_SYMBOL_OPTIONS = {
    "currency_display": "symbol",
    "minimum_fraction_digits": 0,
    "maximum_fraction_digits": 0,
}


class CurrencyResolver:
    """Resolve the currency of a locale, falling back to a process-wide default."""

    def __init__(self, locale_currency_mapping: Mapping[str, str], default_currency: str) -> None:
        self._mapping = locale_currency_mapping
        self._default = default_currency

    @property
    def default_currency(self) -> str:
        return self._default

    def resolve_currency(self, locale: str) -> str:
        return self._mapping.get(locale) or self._default

    def resolve_currency_symbol(self, locale: str, formatter: Formatter) -> str:
        """Return the display symbol of the locale's currency.

        Formats a zero amount without fraction digits and keeps the first
        non-numeric part. Returns ``""`` when nothing but digits came back,
        which callers treat as "symbol unavailable".
        """
        options = NumberFormatOptions(currency=self.resolve_currency(locale), **_SYMBOL_OPTIONS)
        formatted = formatter.format_number(_PIVOT, FormatKind.CURRENCY, locale, options)
        for part in formatted.split(str(_PIVOT)):
            symbol = part.strip().strip(_STRIP_CHARS).strip()
            if symbol:
                return symbol
        return ""
