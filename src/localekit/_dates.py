"""Normalization of date inputs to ``datetime``."""

from __future__ import annotations

import math
import re
from datetime import UTC, date, datetime, time
from typing import Any

from localekit.exceptions import InvalidDateError

ValidDate = datetime | date | int | float | str

_DATE_ONLY_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")
_NUMERIC_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def _from_epoch_ms(value: float) -> datetime:
    if not math.isfinite(value):
        raise InvalidDateError(f"Unable to convert {value!r} into a date", value=value)
    try:
        return datetime.fromtimestamp(value / 1000.0, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidDateError(f"Unable to convert {value!r} into a date: {exc}", value=value) from exc


def to_datetime(value: Any) -> datetime:
    """Convert a date expression into a ``datetime``.

    Accepted inputs:
    - ``datetime``: returned unchanged
    - ``date``: midnight of that day, naive
    - ``int`` / ``float``: milliseconds since the UTC epoch
    - ``str``: epoch milliseconds, ``YYYY-MM-DD`` (naive midnight) or any
      ISO-8601 form ``datetime.fromisoformat`` understands

    Raises
    ------
    InvalidDateError
        For unparseable strings and unsupported types.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, bool):
        raise InvalidDateError(f"Unable to convert {value!r} into a date", value=value)
    if isinstance(value, (int, float)):
        return _from_epoch_ms(float(value))
    if isinstance(value, str):
        text = value.strip()
        if _NUMERIC_RE.fullmatch(text):
            return _from_epoch_ms(float(text))
        match = _DATE_ONLY_RE.fullmatch(text)
        if match:
            year, month, day = (int(part) for part in match.groups())
            try:
                return datetime(year, month, day)
            except ValueError as exc:
                raise InvalidDateError(f"Unable to convert {value!r} into a date: {exc}", value=value) from exc
        try:
            return datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidDateError(f"Unable to convert {value!r} into a date", value=value) from exc
    raise InvalidDateError(f"Unable to convert {type(value).__name__} into a date", value=value)
