"""Listener registries and subscription handles.

Delivery is synchronous and single-threaded: callbacks run in
registration order on the thread that published the value.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Handle returned by ``subscribe``; releasing it detaches the callback.

    ``unsubscribe`` is idempotent. The release hook is dropped on the first
    call so the handle no longer references the source.
    """

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    @property
    def closed(self) -> bool:
        return self._release is None

    def unsubscribe(self) -> None:
        release = self._release
        if release is None:
            return
        self._release = None
        release()


class Listeners(Generic[T]):
    """Ordered set of callbacks notified with each published value."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._ids = itertools.count()
        self._callbacks: dict[int, Callable[[T], None]] = {}

    def __len__(self) -> int:
        return len(self._callbacks)

    def add(self, callback: Callable[[T], None]) -> Subscription:
        key = next(self._ids)
        self._callbacks[key] = callback
        return Subscription(lambda: self._callbacks.pop(key, None))

    def deliver(self, callback: Callable[[T], None], value: T) -> None:
        """Call one listener; a failure is logged and never reaches the publisher."""
        try:
            callback(value)
        except Exception:
            _logger.warning("%s listener failed for value=%r", self._name, value, exc_info=True)

    def notify(self, value: T) -> None:
        # Snapshot: callbacks may subscribe or unsubscribe while being notified.
        for callback in list(self._callbacks.values()):
            self.deliver(callback, value)


class LocaleChanges:
    """Change stream that only emits when the locale differs from the last one.

    The last-published value is the single de-duplication gate for every
    origin of a change.

    Publishing from inside a listener is delivered depth-first: the nested
    value reaches every listener before the outer delivery resumes, so
    listeners after the re-entrant one see the newer locale first.
    """

    def __init__(self, initial: str | None = None) -> None:
        self._last = initial
        self._listeners: Listeners[str] = Listeners("locale change")

    @property
    def last(self) -> str | None:
        return self._last

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, callback: Callable[[str], None], *, replay: bool = False) -> Subscription:
        """Register *callback* for subsequent locale transitions.

        With ``replay=True`` the current locale, if any, is delivered
        immediately.
        """
        subscription = self._listeners.add(callback)
        if replay and self._last is not None:
            self._listeners.deliver(callback, self._last)
        return subscription

    def publish(self, locale: str) -> bool:
        """Emit *locale* unless it equals the last published value."""
        if locale == self._last:
            return False
        self._last = locale
        self._listeners.notify(locale)
        return True
