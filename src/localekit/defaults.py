"""Layered resolution of formatting options."""

from __future__ import annotations

from localekit.models.locale_config import LocaleConfig
from localekit.models.options import DateFormatOptions, FormatKind, FormatOptions, NumberFormatOptions


def _empty_options(kind: FormatKind) -> FormatOptions:
    if kind == FormatKind.DATE:
        return DateFormatOptions()
    return NumberFormatOptions()


def get_default_options(locale: str, kind: FormatKind, config: LocaleConfig) -> FormatOptions:
    """Pick the configured options for *kind* in *locale*.

    Layers, first hit wins:
    - ``config.locale_based[locale]`` for the kind
    - ``config.global`` for the kind
    - empty options (the formatter's own defaults)

    Layers are not merged field by field; a locale entry replaces the
    global one entirely.
    """
    settings = config.locale_based.get(locale)
    if settings is not None:
        options = settings.for_kind(kind)
        if options is not None:
            return options
    options = config.global_.for_kind(kind)
    if options is not None:
        return options
    return _empty_options(kind)


def resolve_options(
    locale: str,
    kind: FormatKind,
    config: LocaleConfig,
    explicit: FormatOptions | None = None,
    *,
    currency: str | None = None,
) -> FormatOptions:
    """Resolve the options used for one format call.

    Non-empty *explicit* options are used as-is. For the currency kind,
    *currency* is injected afterwards when the resolved set has none.
    """
    if explicit is not None and not explicit.is_empty():
        resolved = explicit
    else:
        resolved = get_default_options(locale, kind, config)

    if kind == FormatKind.CURRENCY and isinstance(resolved, NumberFormatOptions):
        if not resolved.currency and currency:
            resolved = resolved.model_copy(update={"currency": currency})
    return resolved
