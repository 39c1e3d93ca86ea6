from __future__ import annotations

import logging

import pytest

from localekit.state.events import Listeners, LocaleChanges, Subscription


def test_subscription_release_runs_once() -> None:
    calls: list[str] = []
    subscription = Subscription(lambda: calls.append("released"))

    assert subscription.closed is False
    subscription.unsubscribe()
    subscription.unsubscribe()

    assert calls == ["released"]
    assert subscription.closed is True


def test_listeners_notify_in_registration_order() -> None:
    listeners: Listeners[int] = Listeners("test")
    seen: list[tuple[str, int]] = []
    listeners.add(lambda v: seen.append(("a", v)))
    listeners.add(lambda v: seen.append(("b", v)))

    listeners.notify(1)

    assert seen == [("a", 1), ("b", 1)]


def test_unsubscribed_listener_is_detached() -> None:
    listeners: Listeners[int] = Listeners("test")
    seen: list[int] = []
    subscription = listeners.add(seen.append)

    subscription.unsubscribe()
    listeners.notify(1)

    assert seen == []
    assert len(listeners) == 0


def test_same_callback_registered_twice_is_released_independently() -> None:
    listeners: Listeners[int] = Listeners("test")
    seen: list[int] = []
    first = listeners.add(seen.append)
    listeners.add(seen.append)

    first.unsubscribe()
    listeners.notify(7)

    assert seen == [7]


def test_failing_listener_does_not_block_others(caplog: pytest.LogCaptureFixture) -> None:
    listeners: Listeners[int] = Listeners("test")
    seen: list[int] = []

    def _boom(_: int) -> None:
        raise RuntimeError("boom")

    listeners.add(_boom)
    listeners.add(seen.append)

    with caplog.at_level(logging.WARNING, logger="localekit.state.events"):
        listeners.notify(3)

    assert seen == [3]
    assert "test listener failed" in caplog.text


def test_listener_may_unsubscribe_during_notify() -> None:
    listeners: Listeners[int] = Listeners("test")
    seen: list[int] = []
    holder: dict[str, Subscription] = {}

    def _once(value: int) -> None:
        seen.append(value)
        holder["sub"].unsubscribe()

    holder["sub"] = listeners.add(_once)
    listeners.notify(1)
    listeners.notify(2)

    assert seen == [1]


def test_locale_changes_suppresses_adjacent_duplicates() -> None:
    changes = LocaleChanges()
    seen: list[str] = []
    changes.subscribe(seen.append)

    assert changes.publish("en-US") is True
    assert changes.publish("en-US") is False
    assert changes.publish("de-DE") is True
    assert changes.publish("en-US") is True

    assert seen == ["en-US", "de-DE", "en-US"]


def test_initial_value_counts_as_published() -> None:
    changes = LocaleChanges("en-US")
    seen: list[str] = []
    changes.subscribe(seen.append)

    changes.publish("en-US")

    assert seen == []


def test_replay_delivers_current_value() -> None:
    changes = LocaleChanges("en-US")
    seen: list[str] = []

    changes.subscribe(seen.append, replay=True)

    assert seen == ["en-US"]


def test_replay_without_value_delivers_nothing() -> None:
    changes = LocaleChanges()
    seen: list[str] = []

    changes.subscribe(seen.append, replay=True)

    assert seen == []


def test_failing_replay_is_logged_and_subscription_returned(caplog: pytest.LogCaptureFixture) -> None:
    changes = LocaleChanges("en-US")

    def _boom(_: str) -> None:
        raise RuntimeError("boom")

    with caplog.at_level(logging.WARNING, logger="localekit.state.events"):
        subscription = changes.subscribe(_boom, replay=True)

    assert "locale change listener failed" in caplog.text
    assert changes.listener_count == 1
    subscription.unsubscribe()
    assert changes.listener_count == 0


def test_listener_failing_on_replay_still_receives_later_changes() -> None:
    changes = LocaleChanges("en-US")
    seen: list[str] = []

    def _picky(value: str) -> None:
        if value == "en-US":
            raise ValueError(value)
        seen.append(value)

    changes.subscribe(_picky, replay=True)
    changes.publish("de-DE")

    assert seen == ["de-DE"]
