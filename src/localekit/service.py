"""High-level locale service: active locale plus locale-aware formatting."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any

from pydantic import ValidationError

from localekit._dates import ValidDate, to_datetime
from localekit.config import LocaleSettings
from localekit.currency import CurrencyResolver
from localekit.defaults import resolve_options
from localekit.exceptions import LocaleConfigError, LocaleFormatError, LocaleNotResolvedError
from localekit.formatter import BabelFormatter, Formatter
from localekit.models.options import NUMBER_KINDS, DateFormatOptions, FormatKind, NumberFormatOptions
from localekit.resolver import LocaleResolver
from localekit.source import LanguageSource
from localekit.state.events import LocaleChanges, Subscription
from localekit.state.store import LocaleStore


OptionsInput = DateFormatOptions | NumberFormatOptions | Mapping[str, Any] | None


def _coerce_options(options: OptionsInput, model: type[DateFormatOptions] | type[NumberFormatOptions]) -> Any:
    if options is None or isinstance(options, model):
        return options
    if isinstance(options, Mapping):
        try:
            return model.model_validate(dict(options))
        except ValidationError as exc:
            raise LocaleConfigError(f"Invalid {model.__name__}: {exc}") from exc
    raise TypeError(f"Expected {model.__name__} or a mapping, got {type(options).__name__}")


class LocaleService:
    """Locale state and formatting for one application.

    Usage::

        source = ActiveLanguage("en")
        settings = LocaleSettings(lang_locale_mapping={"en": "en-US", "de": "de-DE"})
        with LocaleService(source, settings) as locales:
            locales.localize_number(1000, "currency")  # '$1,000.00'
            source.set_active_lang("de")
            locales.get_locale()  # 'de-DE'
    """

    def __init__(
        self,
        source: LanguageSource,
        settings: LocaleSettings | None = None,
        *,
        formatter: Formatter | None = None,
    ) -> None:
        self._settings = settings or LocaleSettings()
        self._formatter: Formatter = formatter or BabelFormatter()
        self._resolver = LocaleResolver(self._settings.lang_locale_mapping)
        self._currency = CurrencyResolver(
            self._settings.locale_currency_mapping,
            self._settings.default_currency,
        )
        self._store = LocaleStore(
            source,
            self._resolver,
            default_locale=self._settings.default_locale,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> LocaleService:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Detach from the language source. Idempotent."""
        self._store.close()

    @property
    def closed(self) -> bool:
        return self._store.closed

    @property
    def settings(self) -> LocaleSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Locale state
    # ------------------------------------------------------------------

    @property
    def locale_changes(self) -> LocaleChanges:
        return self._store.changes

    def get_locale(self) -> str | None:
        return self._store.get_locale()

    def set_locale(self, locale: str) -> None:
        self._store.set_locale(locale)

    def subscribe(self, callback: Callable[[str], None], *, replay: bool = False) -> Subscription:
        """Call *callback* with each new locale; see :meth:`LocaleChanges.subscribe`."""
        return self._store.subscribe(callback, replay=replay)

    def _require_locale(self, locale: str | None) -> str:
        if locale:
            return locale
        current = self._store.get_locale()
        if current is None:
            raise LocaleNotResolvedError("No active locale; pass one explicitly or set a default locale")
        return current

    # ------------------------------------------------------------------
    # Currency
    # ------------------------------------------------------------------

    def resolve_currency_code(self, locale: str | None = None) -> str:
        return self._currency.resolve_currency(self._require_locale(locale))

    def get_currency_symbol(self, locale: str | None = None) -> str:
        """Get the currency symbol for *locale*, or for the active locale.

        Returns ``""`` when the formatter yields no symbol text.
        """
        return self._currency.resolve_currency_symbol(self._require_locale(locale), self._formatter)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def resolve_options(
        self,
        kind: FormatKind | str,
        locale: str | None = None,
        options: OptionsInput = None,
    ) -> DateFormatOptions | NumberFormatOptions:
        """Return the options a format call for *kind* would hand to the formatter."""
        kind = FormatKind(kind)
        locale = self._require_locale(locale)
        model = DateFormatOptions if kind == FormatKind.DATE else NumberFormatOptions
        explicit = _coerce_options(options, model)
        currency = self._currency.resolve_currency(locale) if kind == FormatKind.CURRENCY else None
        return resolve_options(locale, kind, self._settings.locale_config, explicit, currency=currency)

    def localize_date(
        self,
        value: ValidDate,
        locale: str | None = None,
        options: DateFormatOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Transform a date into the locale's date format.

        *value* may be a ``datetime``/``date``, epoch milliseconds, or an
        ISO-8601 string.

        Examples::

            localize_date(datetime(2019, 10, 7, 12, 0), "en-US")  # '10/7/19'
            localize_date("2019-02-08", "en-US", {"dateStyle": "medium"})  # 'Feb 8, 2019'
            localize_date(1, "en-US", {"dateStyle": "medium", "timeZone": "UTC"})  # 'Jan 1, 1970'

        Raises
        ------
        InvalidDateError
            If *value* cannot be converted to a date.
        """
        moment = to_datetime(value)
        locale = self._require_locale(locale)
        resolved = self.resolve_options(FormatKind.DATE, locale, options)
        return self._formatter.format_date(moment, locale, resolved)  # type: ignore[arg-type]

    def localize_number(
        self,
        value: int | float | Decimal | str,
        kind: FormatKind | str,
        locale: str | None = None,
        options: NumberFormatOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Transform a number into the locale's format for *kind*.

        Examples::

            localize_number(1234567890, "decimal", "en-US")  # '1,234,567,890'
            localize_number(0.5, "percent", "en-US")  # '50%'
            localize_number(1000, "currency", "en-US")  # '$1,000.00'

        Raises
        ------
        InvalidNumberError
            If *value* is a string that does not parse as a number.
        """
        kind = FormatKind(kind)
        if kind not in NUMBER_KINDS:
            raise LocaleFormatError(f"{kind.value!r} is not a number format kind", value=value)
        locale = self._require_locale(locale)
        resolved = self.resolve_options(kind, locale, options)
        return self._formatter.format_number(value, kind, locale, resolved)  # type: ignore[arg-type]
