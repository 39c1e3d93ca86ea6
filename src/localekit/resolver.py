"""Language tag to locale resolution."""

from __future__ import annotations

from collections.abc import Mapping

from localekit.validation import is_valid_locale


class LocaleResolver:
    """Map a language tag or candidate locale string to a locale.

    The mapping table is consulted first, so a curated entry wins even
    when the input already looks like a locale. Inputs that are neither
    mapped nor structurally valid resolve to ``None``.
    """

    def __init__(self, lang_locale_mapping: Mapping[str, str]) -> None:
        self._mapping = lang_locale_mapping

    def resolve(self, value: str) -> str | None:
        mapped = self._mapping.get(value) if isinstance(value, str) else None
        if mapped:
            return mapped
        if is_valid_locale(value):
            return value
        return None
