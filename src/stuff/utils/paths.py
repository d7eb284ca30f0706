"""Lookup of nested values by a separator-delimited path."""

import math
from collections.abc import Mapping, Sequence
from typing import Any

DEFAULT_SEPARATOR = "."


def _stops_walk(value: Any) -> bool:
    """Return True for values that end a path walk.

    These are the client-side "falsy" values: ``None``, ``False``, zero, NaN
    and the empty string. Empty containers do not stop the walk.
    """
    if value is None or value == "":
        return True
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    return False


def _step(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        if key.isdecimal() and int(key) < len(obj):
            return obj[int(key)]
        return None
    return getattr(obj, key, None)


def get_by_path(obj: Any, path: str, separator: str = DEFAULT_SEPARATOR) -> Any:
    """Get a nested value by a path like ``"prop1.prop2.prop3"``.

    Mappings are indexed by key, lists and tuples by decimal index and any
    other object by attribute name. The walk stops early, returning the
    current value, as soon as that value is ``None``, ``False``, zero, NaN or
    an empty string. Missing keys yield ``None``; nothing is raised.

    Args:
        obj: The root object.
        path: Keys joined by ``separator``.
        separator: Separator for splitting ``path``. An empty separator falls
            back to ``"."``.

    Returns:
        The value found at ``path``, or the value at which the walk stopped.
    """
    keys = path.split(separator or DEFAULT_SEPARATOR)
    for key in keys:
        if _stops_walk(obj):
            break
        obj = _step(obj, key)
    return obj
