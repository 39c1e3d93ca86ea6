"""Current-locale state manager.

This is the only component allowed to change the active locale.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from localekit.resolver import LocaleResolver
from localekit.source import LanguageSource
from localekit.state.events import LocaleChanges, Subscription
from localekit.validation import is_valid_locale

_logger = logging.getLogger(__name__)


class LocaleStore:
    """Holds the active locale and keeps it in sync with a language source.

    States:
    - Unset: ``get_locale()`` is ``None``; only until the first successful
      resolution.
    - Active: ``get_locale()`` is a valid locale.

    Explicit ``set_locale`` calls and upstream language changes go through
    the same transition, so validation and de-duplication apply to both.
    """

    def __init__(
        self,
        source: LanguageSource,
        resolver: LocaleResolver,
        *,
        default_locale: str | None = None,
    ) -> None:
        self._resolver = resolver
        self._locale = self._initial_locale(source, default_locale)
        self._changes = LocaleChanges(self._locale)
        self._upstream: Subscription | None = source.subscribe(self._on_language_change)
        _logger.debug("Locale store ready locale=%s", self._locale)

    def _initial_locale(self, source: LanguageSource, default_locale: str | None) -> str | None:
        if default_locale is not None:
            resolved = self._resolver.resolve(default_locale)
            if resolved is not None and is_valid_locale(resolved):
                return resolved
            _logger.warning("Default locale %r could not be resolved; using the active language", default_locale)

        resolved = self._resolver.resolve(source.get_active_lang())
        if resolved is not None and is_valid_locale(resolved):
            return resolved
        return None

    @property
    def changes(self) -> LocaleChanges:
        return self._changes

    @property
    def closed(self) -> bool:
        return self._upstream is None

    def get_locale(self) -> str | None:
        return self._locale

    def set_locale(self, locale: str) -> None:
        """Make *locale* the active locale and publish it.

        Invalid values are logged and ignored; the state is left unchanged.
        """
        if not is_valid_locale(locale):
            _logger.error("%s isn't a valid locale format", locale)
            return

        self._locale = locale
        if self._changes.publish(locale):
            _logger.debug("Locale changed locale=%s", locale)

    def subscribe(self, callback: Callable[[str], None], *, replay: bool = False) -> Subscription:
        return self._changes.subscribe(callback, replay=replay)

    def _on_language_change(self, lang: str) -> None:
        locale = self._resolver.resolve(lang)
        # Languages without a locale are expected (e.g. during rollout); drop quietly.
        if locale is None:
            return
        self.set_locale(locale)

    def close(self) -> None:
        """Release the upstream subscription. Safe to call more than once."""
        upstream = self._upstream
        if upstream is None:
            return
        self._upstream = None
        upstream.unsubscribe()
        _logger.debug("Locale store closed locale=%s", self._locale)
