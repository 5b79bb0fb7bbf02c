from collections.abc import Mapping
from typing import Any


def _member(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def is_node_process(app: Any) -> bool:
    """True if ``app`` looks like a Node.js ``process`` object (``versions.node`` is set)."""
    if app is None:
        return False
    versions = _member(app, "versions")
    return versions is not None and _member(versions, "node") is not None


def is_promise(obj: Any) -> bool:
    """Thenable check: not None and exposes a callable ``then``. Empty containers count."""
    return obj is not None and callable(getattr(obj, "then", None))
