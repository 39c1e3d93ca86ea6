"""Base model for option and configuration payloads.

Every localekit model inherits from :class:`LocaleBaseModel` which
provides:

* ``alias_generator=to_camel`` so camelCase keys (``dateStyle``,
  ``minimumFractionDigits``) map to snake_case fields. Option tables
  written for browser ``Intl`` APIs therefore load unchanged.
* ``extra="forbid"`` so a misspelt option fails at load time instead of
  being silently ignored at format time.
* Frozen instances, so a resolved option set can be shared between calls.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LocaleBaseModel(BaseModel):
    """Base for localekit models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        str_strip_whitespace=True,
    )

    def to_options(self) -> dict[str, Any]:
        """Return the set (non-``None``) fields keyed by their camelCase alias."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def is_empty(self) -> bool:
        """Whether no field carries a value."""
        return not self.model_dump(exclude_none=True)
