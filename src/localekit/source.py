"""Upstream language sources."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from localekit.state.events import Listeners, Subscription

_logger = logging.getLogger(__name__)


@runtime_checkable
class LanguageSource(Protocol):
    """Where the application's active translation language comes from.

    ``subscribe`` delivers subsequent changes only; the current value is
    read with ``get_active_lang``.
    """

    def get_active_lang(self) -> str: ...

    def subscribe(self, callback: Callable[[str], None]) -> Subscription: ...


class ActiveLanguage:
    """In-process language source.

    Hosts without their own translation layer can drive localekit with it::

        source = ActiveLanguage("en")
        service = LocaleService(source, settings)
        source.set_active_lang("de")
    """

    def __init__(self, lang: str) -> None:
        self._lang = lang
        self._listeners: Listeners[str] = Listeners("language change")

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def get_active_lang(self) -> str:
        return self._lang

    def set_active_lang(self, lang: str) -> None:
        """Set the active language and notify every subscriber."""
        self._lang = lang
        _logger.debug("Active language set lang=%s listeners=%d", lang, len(self._listeners))
        self._listeners.notify(lang)

    def subscribe(self, callback: Callable[[str], None]) -> Subscription:
        return self._listeners.add(callback)
