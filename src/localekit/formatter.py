"""Formatter collaborator and its Babel-backed default implementation.

The formatter only renders: it receives an already normalized value, a
locale and fully resolved options. Choosing the options is the service's
job.
"""

from __future__ import annotations

import copy
import functools
import logging
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from typing import Protocol, runtime_checkable

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from localekit.exceptions import InvalidNumberError, LocaleFormatError
from localekit.models.options import DateFormatOptions, FormatKind, NumberFormatOptions

_logger = logging.getLogger(__name__)

_DEFAULT_DATE_STYLE = "short"


@runtime_checkable
class Formatter(Protocol):
    def format_date(self, value: datetime, locale: str, options: DateFormatOptions) -> str: ...

    def format_number(
        self,
        value: int | float | Decimal | str,
        kind: FormatKind,
        locale: str,
        options: NumberFormatOptions,
    ) -> str: ...


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale: str) -> Locale:
    """Parse a hyphenated locale into a cached Babel ``Locale``.

    Raises
    ------
    LocaleFormatError
        If Babel has no data for the locale or cannot parse it.
    """
    try:
        return Locale.parse(locale, sep="-")
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise LocaleFormatError(f"Unsupported locale {locale!r}: {exc}", locale=locale) from exc


def to_decimal(value: int | float | Decimal | str) -> Decimal:
    """Coerce a numeric input to ``Decimal``; strings must parse fully."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidNumberError(f"Unable to format {value!r} as a number", value=value)
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidNumberError(f"{value!r} is not a valid number", value=value) from exc
    raise InvalidNumberError(f"Unable to format {type(value).__name__} as a number", value=value)


def unquote_glue(template: str) -> str:
    """Resolve CLDR quoting in a date-time glue pattern such as ``"{1} 'at' {0}"``.

    Quoted text is kept literally and ``''`` is an escaped apostrophe, both
    inside and outside quotes.
    """
    # Splitting on the escape first keeps "''" from reading as two quote marks.
    return "'".join(part.replace("'", "") for part in template.split("''"))


def _in_zone(value: datetime, time_zone: str | None) -> datetime:
    if time_zone is None:
        return value
    tz = babel_dates.get_timezone(time_zone)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(tz)


class BabelFormatter:
    """CLDR formatting through Babel."""

    def format_date(self, value: datetime, locale: str, options: DateFormatOptions) -> str:
        babel_locale = get_babel_locale(locale)
        try:
            value = _in_zone(value, options.time_zone)
            if options.pattern:
                return babel_dates.format_datetime(value, options.pattern, locale=babel_locale)

            date_style = options.date_style
            time_style = options.time_style
            if date_style and time_style:
                template = babel_dates.get_datetime_format(date_style, locale=babel_locale)
                return (
                    unquote_glue(template)
                    .replace("{0}", babel_dates.format_time(value, time_style, locale=babel_locale))
                    .replace("{1}", babel_dates.format_date(value, date_style, locale=babel_locale))
                )
            if time_style:
                return babel_dates.format_time(value, time_style, locale=babel_locale)
            return babel_dates.format_date(value, date_style or _DEFAULT_DATE_STYLE, locale=babel_locale)
        except (LookupError, ValueError, AttributeError) as exc:
            raise LocaleFormatError(f"Date formatting failed for {value!r}: {exc}", locale=locale, value=value) from exc

    def format_number(
        self,
        value: int | float | Decimal | str,
        kind: FormatKind,
        locale: str,
        options: NumberFormatOptions,
    ) -> str:
        number = to_decimal(value)
        babel_locale = get_babel_locale(locale)
        group_separator = options.use_grouping is not False

        try:
            if kind == FormatKind.CURRENCY:
                return self._format_currency(number, babel_locale, options, group_separator)
            if kind == FormatKind.PERCENT:
                pattern = babel_locale.percent_formats[None]
            elif kind == FormatKind.DECIMAL:
                pattern = babel_locale.decimal_formats[None]
            else:
                raise LocaleFormatError(f"{kind!r} is not a number format kind", locale=locale, value=value)

            pattern = self._with_fraction_digits(pattern, pattern.frac_prec, options)
            return pattern.apply(number, babel_locale, group_separator=group_separator)
        except (LookupError, ValueError, InvalidOperation) as exc:
            msg = f"Number formatting failed for {value!r}: {exc}"
            raise LocaleFormatError(msg, locale=locale, value=value) from exc

    def _format_currency(
        self,
        number: Decimal,
        babel_locale: Locale,
        options: NumberFormatOptions,
        group_separator: bool,
    ) -> str:
        currency = options.currency
        if not currency:
            raise LocaleFormatError("Currency formatting requires a currency code", locale=str(babel_locale))

        if options.currency_display == "name":
            return babel_numbers.format_currency(
                number,
                currency,
                locale=babel_locale,
                format_type="name",
                group_separator=group_separator,
            )

        pattern = babel_locale.currency_formats["standard"]
        digits = babel_numbers.get_currency_precision(currency)
        custom_digits = options.minimum_fraction_digits is not None or options.maximum_fraction_digits is not None
        pattern = self._with_fraction_digits(pattern, (digits, digits), options)
        if options.currency_display == "code":
            pattern = copy.copy(pattern)
            pattern.prefix = tuple(part.replace("¤", "¤¤") for part in pattern.prefix)
            pattern.suffix = tuple(part.replace("¤", "¤¤") for part in pattern.suffix)
        return pattern.apply(
            number,
            babel_locale,
            currency=currency,
            currency_digits=not custom_digits,
            group_separator=group_separator,
        )

    @staticmethod
    def _with_fraction_digits(
        pattern: babel_numbers.NumberPattern,
        base: tuple[int, int],
        options: NumberFormatOptions,
    ) -> babel_numbers.NumberPattern:
        lo = options.minimum_fraction_digits
        hi = options.maximum_fraction_digits
        if lo is None and hi is None:
            return pattern
        base_lo, base_hi = base
        if lo is None:
            lo = min(base_lo, hi) if hi is not None else base_lo
        if hi is None:
            hi = max(base_hi, lo)
        # Locale patterns are shared CLDR data; never mutate them in place.
        pattern = copy.copy(pattern)
        pattern.frac_prec = (lo, hi)
        return pattern
