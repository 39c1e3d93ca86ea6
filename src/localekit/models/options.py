"""Formatting option models, one per family of format kinds."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import Field, field_validator, model_validator

from localekit.models._base import LocaleBaseModel

Style = Literal["full", "long", "medium", "short"]


class FormatKind(StrEnum):
    DATE = "date"
    DECIMAL = "decimal"
    PERCENT = "percent"
    CURRENCY = "currency"


NUMBER_KINDS: frozenset[FormatKind] = frozenset({FormatKind.DECIMAL, FormatKind.PERCENT, FormatKind.CURRENCY})


class DateFormatOptions(LocaleBaseModel):
    """Options for date/time rendering.

    ``pattern`` is a CLDR date pattern (``"yyyy-MM-dd HH:mm"``) and takes
    precedence over the style fields when set.
    """

    date_style: Style | None = None
    time_style: Style | None = None
    time_zone: str | None = Field(default=None, description="IANA time zone name")
    pattern: str | None = None


class NumberFormatOptions(LocaleBaseModel):
    """Options for decimal, percent and currency rendering."""

    minimum_fraction_digits: int | None = Field(default=None, ge=0, le=20)
    maximum_fraction_digits: int | None = Field(default=None, ge=0, le=20)
    use_grouping: bool | None = None
    currency: str | None = Field(default=None, description="ISO 4217 currency code")
    currency_display: Literal["symbol", "code", "name"] | None = None

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, value: str | None) -> str | None:
        if value is None:
            return None
        code = value.upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"currency must be a 3-letter ISO 4217 code, got {value!r}")
        return code

    @model_validator(mode="after")
    def _check_fraction_range(self) -> NumberFormatOptions:
        lo = self.minimum_fraction_digits
        hi = self.maximum_fraction_digits
        if lo is not None and hi is not None and lo > hi:
            raise ValueError("minimum_fraction_digits must not exceed maximum_fraction_digits")
        return self


FormatOptions = DateFormatOptions | NumberFormatOptions
