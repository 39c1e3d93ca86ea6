"""Per-locale and global formatting defaults."""

from __future__ import annotations

from pydantic import Field

from localekit.models._base import LocaleBaseModel
from localekit.models.options import DateFormatOptions, FormatKind, FormatOptions, NumberFormatOptions


class FormatDefaults(LocaleBaseModel):
    """Default options for each format kind; unset kinds defer to the next layer."""

    date: DateFormatOptions | None = None
    decimal: NumberFormatOptions | None = None
    percent: NumberFormatOptions | None = None
    currency: NumberFormatOptions | None = None

    def for_kind(self, kind: FormatKind) -> FormatOptions | None:
        options: FormatOptions | None = getattr(self, kind.value)
        return options


class LocaleConfig(LocaleBaseModel):
    """Formatting defaults keyed by locale, plus a global fallback layer.

    Accepts the same shape as the browser-side configuration::

        {
            "global": {"date": {"dateStyle": "long"}},
            "localeBased": {"en-US": {"decimal": {"maximumFractionDigits": 2}}},
        }
    """

    global_: FormatDefaults = Field(default_factory=FormatDefaults, alias="global")
    locale_based: dict[str, FormatDefaults] = Field(default_factory=dict)
