from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from localekit.exceptions import InvalidNumberError, LocaleFormatError
from localekit.formatter import BabelFormatter, Formatter, to_decimal, unquote_glue
from localekit.models import DateFormatOptions, FormatKind, NumberFormatOptions

_DATE = datetime(2019, 10, 7, 12, 0, 0)


@pytest.fixture
def formatter() -> BabelFormatter:
    return BabelFormatter()


def test_babel_formatter_satisfies_protocol(formatter: BabelFormatter) -> None:
    assert isinstance(formatter, Formatter)


def test_decimal_defaults(formatter: BabelFormatter) -> None:
    assert formatter.format_number(1234567890, FormatKind.DECIMAL, "en-US", NumberFormatOptions()) == "1,234,567,890"
    assert formatter.format_number(1234.5, FormatKind.DECIMAL, "de-DE", NumberFormatOptions()) == "1.234,5"


def test_decimal_fraction_digits(formatter: BabelFormatter) -> None:
    fixed = NumberFormatOptions(minimum_fraction_digits=2, maximum_fraction_digits=2)
    assert formatter.format_number(1234.5, FormatKind.DECIMAL, "en-US", fixed) == "1,234.50"
    capped = NumberFormatOptions(maximum_fraction_digits=2)
    assert formatter.format_number("1234.5678", FormatKind.DECIMAL, "en-US", capped) == "1,234.57"


def test_decimal_without_grouping(formatter: BabelFormatter) -> None:
    options = NumberFormatOptions(use_grouping=False)
    assert formatter.format_number(1234567, FormatKind.DECIMAL, "en-US", options) == "1234567"


def test_percent(formatter: BabelFormatter) -> None:
    assert formatter.format_number(0.5, FormatKind.PERCENT, "en-US", NumberFormatOptions()) == "50%"
    options = NumberFormatOptions(maximum_fraction_digits=1)
    assert formatter.format_number(0.1234, FormatKind.PERCENT, "en-US", options) == "12.3%"


def test_currency(formatter: BabelFormatter) -> None:
    usd = NumberFormatOptions(currency="USD")
    assert formatter.format_number(1000, FormatKind.CURRENCY, "en-US", usd) == "$1,000.00"
    eur = NumberFormatOptions(currency="EUR")
    assert formatter.format_number(1000, FormatKind.CURRENCY, "de-DE", eur) == "1.000,00\xa0€"


def test_currency_without_fraction_digits(formatter: BabelFormatter) -> None:
    options = NumberFormatOptions(currency="USD", maximum_fraction_digits=0)
    assert formatter.format_number(1000, FormatKind.CURRENCY, "en-US", options) == "$1,000"


def test_currency_code_display(formatter: BabelFormatter) -> None:
    options = NumberFormatOptions(currency="USD", currency_display="code")
    result = formatter.format_number(1000, FormatKind.CURRENCY, "en-US", options)
    assert result.startswith("USD")
    assert result.endswith("1,000.00")


def test_currency_requires_code(formatter: BabelFormatter) -> None:
    with pytest.raises(LocaleFormatError):
        formatter.format_number(1000, FormatKind.CURRENCY, "en-US", NumberFormatOptions())


def test_malformed_number_string(formatter: BabelFormatter) -> None:
    with pytest.raises(InvalidNumberError):
        formatter.format_number("12abc", FormatKind.DECIMAL, "en-US", NumberFormatOptions())


def test_unknown_locale(formatter: BabelFormatter) -> None:
    with pytest.raises(LocaleFormatError):
        formatter.format_number(1, FormatKind.DECIMAL, "xx-XX", NumberFormatOptions())


def test_to_decimal() -> None:
    assert to_decimal(" 12.50 ") == Decimal("12.50")
    assert to_decimal(3) == Decimal(3)
    assert to_decimal(0.1) == Decimal("0.1")
    with pytest.raises(InvalidNumberError):
        to_decimal(True)
    with pytest.raises(InvalidNumberError):
        to_decimal(None)  # type: ignore[arg-type]


def test_date_default_is_short(formatter: BabelFormatter) -> None:
    assert formatter.format_date(_DATE, "en-US", DateFormatOptions()) == "10/7/19"


def test_date_styles(formatter: BabelFormatter) -> None:
    assert formatter.format_date(_DATE, "en-US", DateFormatOptions(date_style="medium")) == "Oct 7, 2019"
    assert formatter.format_date(_DATE, "de-DE", DateFormatOptions(date_style="medium")) == "07.10.2019"


def test_date_and_time_styles(formatter: BabelFormatter) -> None:
    result = formatter.format_date(_DATE, "en-US", DateFormatOptions(date_style="medium", time_style="short"))
    assert "Oct 7, 2019" in result
    assert "12:00" in result


def test_time_style_only(formatter: BabelFormatter) -> None:
    result = formatter.format_date(_DATE, "en-US", DateFormatOptions(time_style="short"))
    assert "12:00" in result
    assert "2019" not in result


def test_pattern_overrides_styles(formatter: BabelFormatter) -> None:
    options = DateFormatOptions(date_style="full", pattern="yyyy-MM-dd")
    assert formatter.format_date(_DATE, "en-US", options) == "2019-10-07"


def test_time_zone_conversion(formatter: BabelFormatter) -> None:
    value = datetime(2019, 10, 7, 23, 30, tzinfo=UTC)
    options = DateFormatOptions(time_zone="Asia/Tokyo", pattern="yyyy-MM-dd HH:mm")
    assert formatter.format_date(value, "en-US", options) == "2019-10-08 08:30"


def test_unknown_time_zone(formatter: BabelFormatter) -> None:
    with pytest.raises(LocaleFormatError):
        formatter.format_date(_DATE, "en-US", DateFormatOptions(time_zone="Mars/Olympus"))


def test_unquote_glue() -> None:
    assert unquote_glue("{1}, {0}") == "{1}, {0}"
    assert unquote_glue("{1} 'at' {0}") == "{1} at {0}"
    assert unquote_glue("{1} '' {0}") == "{1} ' {0}"
    assert unquote_glue("{1} 'o''clock' {0}") == "{1} o'clock {0}"
