"""
Sequence helpers.

Items passed to the field-based helpers may be mappings (``item[key]``) or
plain objects (``getattr(item, key)``).
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def field_value(item: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an object; missing fields give None."""
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def _strict_equal(x: Any, y: Any) -> bool:
    # bool is an int subclass; True must not equal 1
    if isinstance(x, bool) != isinstance(y, bool):
        return False
    return x == y


def array_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """
    Equal when the JSON serializations match, or same length and strictly
    equal elements in order (a bool never equals a number).
    """
    try:
        same_json = json.dumps(a) == json.dumps(b)
    except (TypeError, ValueError):
        # Not JSON-serializable; the element-wise check decides
        same_json = False
    if same_json:
        return True
    return len(a) == len(b) and all(_strict_equal(x, y) for x, y in zip(a, b, strict=True))


def array_to_object(items: Iterable[T], key: str) -> dict[Any, T]:
    """
    Index items by their ``key`` field; later items win on duplicates.

    Field values are used as keys unchanged, so an unhashable value (a list,
    a dict) raises TypeError.
    """
    return {field_value(item, key): item for item in items}


def count_array_props(items: Iterable[Any], prop: str) -> dict[Hashable, int]:
    """Count items per ``prop`` value. Unhashable values raise TypeError."""
    return dict(Counter(field_value(item, prop) for item in items))


def is_array_empty(value: Any) -> bool:
    """
    True when ``value`` is a list with at least one element.

    Note: despite the name, this returns True for NON-empty lists. Kept for
    compatibility with existing callers; see DESIGN.md.
    """
    return isinstance(value, list) and len(value) > 0


def extract_array_prop(items: Iterable[Any], prop: str) -> list[Any]:
    return [field_value(item, prop) for item in items]


def obj_is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))
