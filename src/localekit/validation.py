"""Structural locale identifier validation."""

from __future__ import annotations

import re
from typing import Any

# language, then -Script and/or -REGION (ISO 3166 alpha-2 or UN M.49 digits).
# A bare language subtag is a language tag, not a locale.
_LOCALE_RE = re.compile(
    r"""
    [a-z]{2,3}
    (?:
        -[A-Z][a-z]{3}(?:-(?:[A-Z]{2}|[0-9]{3}))?
      | -(?:[A-Z]{2}|[0-9]{3})
    )
    """,
    re.VERBOSE | re.ASCII,
)


def is_valid_locale(candidate: Any) -> bool:
    """Return ``True`` when *candidate* is a syntactically valid locale.

    >>> is_valid_locale("en-US")
    True
    >>> is_valid_locale("zh-Hant-HK")
    True
    >>> is_valid_locale("en")
    False
    """
    if not isinstance(candidate, str):
        return False
    return _LOCALE_RE.fullmatch(candidate) is not None
