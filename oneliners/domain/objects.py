from __future__ import annotations

import json
from collections.abc import Hashable, Mapping
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def _serialize(value: Any) -> str:
    # Insertion order is significant: {"a": 1, "b": 2} != {"b": 2, "a": 1}
    return json.dumps(value, default=str)


def is_objects_equal(*objects: Any) -> bool:
    """True if every object serializes identically to the first."""
    if not objects:
        return True
    first = _serialize(objects[0])
    return all(_serialize(obj) == first for obj in objects[1:])


def invert_object(obj: Mapping[K, Hashable]) -> dict[Hashable, K]:
    """Swap keys and values. Unhashable values raise TypeError."""
    return {value: key for key, value in obj.items()}


def clear_null(obj: Mapping[K, V | None]) -> dict[K, V]:
    """Copy of ``obj`` without None-valued entries."""
    return {key: value for key, value in obj.items() if value is not None}


def obj_sort(obj: Mapping[K, V]) -> dict[K, V]:
    """Copy of ``obj`` with keys in ascending order."""
    return {key: obj[key] for key in sorted(obj)}  # type: ignore[type-var]
