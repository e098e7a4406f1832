"""Criteria matching — the in-process twin of the store's query filters.

The store translates each ``(field, value)`` criterion into a PostgREST filter:

- ``keywords``: the ``aesthetic.keywords`` array contains ``str(value)``
- ``type``: exact equality
- anything else: case-insensitive substring (``ilike %value%``)

:func:`matches` applies the same rules to a flat record so that filtering the
sample dataset returns exactly what the store would for the same rows.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

KEYWORDS_FIELD = "keywords"
TYPE_FIELD = "type"


def keyword_term(value: Any) -> str:
    """Coerce a keyword criterion to the string the store compares against."""
    return value if isinstance(value, str) else str(value)


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def field_matches(record: Mapping[str, Any], field: str, value: Any) -> bool:
    """Return True if *record* satisfies a single criterion."""
    if field == KEYWORDS_FIELD:
        aesthetic = record.get("aesthetic") or {}
        keywords = aesthetic.get("keywords") or []
        return keyword_term(value) in keywords

    actual = record.get(field)
    if field == TYPE_FIELD:
        return bool(actual == value)

    # NULL never matches ILIKE
    if actual is None:
        return False
    if actual == value:
        return True
    return str(value).lower() in _stringify(actual).lower()


def matches(record: Mapping[str, Any], criteria: Mapping[str, Any]) -> bool:
    """AND-combine every criterion. Empty criteria match everything."""
    return all(field_matches(record, field, value) for field, value in criteria.items())
