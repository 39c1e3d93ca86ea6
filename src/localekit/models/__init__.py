"""Option and configuration models."""

from localekit.models.locale_config import FormatDefaults, LocaleConfig
from localekit.models.options import (
    NUMBER_KINDS,
    DateFormatOptions,
    FormatKind,
    FormatOptions,
    NumberFormatOptions,
)

__all__ = [
    "NUMBER_KINDS",
    "DateFormatOptions",
    "FormatDefaults",
    "FormatKind",
    "FormatOptions",
    "LocaleConfig",
    "NumberFormatOptions",
]
