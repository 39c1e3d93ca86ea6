"""Static configuration tables for localekit."""

from __future__ import annotations

import dataclasses
import json
import os
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from localekit.exceptions import LocaleConfigError
from localekit.models.locale_config import LocaleConfig


def _env_json(env: Mapping[str, str], key: str) -> Any:
    raw = env.get(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LocaleConfigError(f"{key} is not valid JSON: {exc}") from exc


def _string_mapping(value: Any, name: str) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise LocaleConfigError(f"{name} must be a mapping, got {type(value).__name__}")
    result: dict[str, str] = {}
    for key, item in value.items():
        if not isinstance(key, str) or not isinstance(item, str):
            raise LocaleConfigError(f"{name} entries must be str -> str, got {key!r}: {item!r}")
        result[key] = item
    return result


@dataclasses.dataclass(frozen=True)
class LocaleSettings:
    """Lookup tables and defaults supplied by the host application.

    Parameters
    ----------
    lang_locale_mapping : Mapping[str, str]
        Application language tag to locale (e.g. ``{"en": "en-US"}``).
        Entries are trusted and not re-validated.
    default_locale : str or None
        Locale to start from. When ``None`` the active language of the
        upstream source is resolved instead.
    default_currency : str
        ISO 4217 code used when a locale has no currency mapping.
    locale_config : LocaleConfig
        Per-locale and global formatting defaults. A plain ``dict`` in the
        camelCase shape is accepted and validated.
    locale_currency_mapping : Mapping[str, str]
        Locale to ISO 4217 currency code.
    """

    lang_locale_mapping: Mapping[str, str] = dataclasses.field(default_factory=dict)
    default_locale: str | None = None
    default_currency: str = "USD"
    locale_config: LocaleConfig = dataclasses.field(default_factory=LocaleConfig)
    locale_currency_mapping: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        currency = self.default_currency
        if not isinstance(currency, str) or len(currency) != 3 or not currency.isalpha():
            raise LocaleConfigError(f"default_currency must be a 3-letter ISO 4217 code, got {currency!r}")
        object.__setattr__(self, "default_currency", currency.upper())

        # Freeze the tables so the settings stay immutable for the service lifetime.
        object.__setattr__(
            self,
            "lang_locale_mapping",
            MappingProxyType(_string_mapping(self.lang_locale_mapping, "lang_locale_mapping")),
        )
        object.__setattr__(
            self,
            "locale_currency_mapping",
            MappingProxyType(_string_mapping(self.locale_currency_mapping, "locale_currency_mapping")),
        )

        if not isinstance(self.locale_config, LocaleConfig):
            try:
                config = LocaleConfig.model_validate(self.locale_config)
            except ValidationError as exc:
                raise LocaleConfigError(f"Invalid locale_config: {exc}") from exc
            object.__setattr__(self, "locale_config", config)

    @classmethod
    def from_env(cls, **overrides: Any) -> LocaleSettings:
        """Create settings from environment variables.

        Reads ``LOCALEKIT_DEFAULT_LOCALE`` and ``LOCALEKIT_DEFAULT_CURRENCY``
        as plain strings, and ``LOCALEKIT_LANG_LOCALE_MAPPING``,
        ``LOCALEKIT_LOCALE_CURRENCY_MAPPING`` and ``LOCALEKIT_LOCALE_CONFIG``
        as JSON documents. Explicit keyword arguments override environment
        values.

        Raises
        ------
        LocaleConfigError
            If a JSON variable does not parse or has the wrong shape.
        """
        env = os.environ
        kwargs: dict[str, Any] = {}

        _ENV_STR_MAP = {
            "LOCALEKIT_DEFAULT_LOCALE": "default_locale",
            "LOCALEKIT_DEFAULT_CURRENCY": "default_currency",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                kwargs[field_name] = val.strip()

        _ENV_JSON_MAP = {
            "LOCALEKIT_LANG_LOCALE_MAPPING": "lang_locale_mapping",
            "LOCALEKIT_LOCALE_CURRENCY_MAPPING": "locale_currency_mapping",
            "LOCALEKIT_LOCALE_CONFIG": "locale_config",
        }
        for env_key, field_name in _ENV_JSON_MAP.items():
            if field_name in overrides:
                continue
            val = _env_json(env, env_key)
            if val is not None:
                kwargs[field_name] = val

        kwargs.update(overrides)
        return cls(**kwargs)
