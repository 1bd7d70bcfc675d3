from __future__ import annotations

import json
import random
import string
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from typing import Any, TypeVar

T = TypeVar("T")

Key = str | Callable[[Any], Any]

RANDOM_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def field_getter(key: Key) -> Callable[[Any], Any]:
    """Selector for a field name (dict key or attribute) or a callable."""
    if callable(key):
        return key

    def _get(item):
        if isinstance(item, Mapping):
            return item.get(key)
        return getattr(item, key, None)

    return _get


def group_by(items: Iterable[T], key: Key) -> dict[str, list[T]]:
    get = field_getter(key)
    groups: dict[str, list[T]] = {}
    for item in items:
        groups.setdefault(str(get(item)), []).append(item)
    return groups


def remove_duplicates(items: Iterable[T], key: Key | None = None) -> list[T]:
    """Keep the first occurrence of each value (or of each key value).

    Unhashable values are compared by identity, like objects in a JS Set,
    and booleans never collide with 0 or 1.
    """
    get = field_getter(key) if key is not None else None
    seen: set = set()
    seen_ids: set[int] = set()
    out: list[T] = []
    for item in items:
        marker = get(item) if get else item
        if isinstance(marker, bool):
            # True == 1 in Python; keep booleans apart from numbers
            marker = (bool, marker)
        try:
            if marker in seen:
                continue
            seen.add(marker)
        except TypeError:
            if id(marker) in seen_ids:
                continue
            seen_ids.add(id(marker))
        out.append(item)
    return out


def generate_random_string(length: int = 10) -> str:
    # Not for secrets; use the `secrets` module for tokens.
    if length <= 0:
        return ""
    return "".join(random.choices(RANDOM_ALPHABET, k=length))


def _json_default(obj):
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not plain data")


def deep_clone(value: T) -> T:
    """Structurally independent copy of plain data via a JSON round trip.

    Dates come back as ISO strings, tuples as lists and dict keys as strings.
    Anything else that JSON cannot hold raises TypeError; cycles raise ValueError.
    """
    return json.loads(json.dumps(value, default=_json_default))
