"""Helpers to read and write nested mappings through dotted keys ("a.b.c")."""
from collections.abc import Mapping, MutableMapping
from typing import Any

__all__ = (
    "data_get",
    "data_has",
    "data_set",
    "data_forget",
)

_MISSING = object()


def _segments(key: str) -> list[str]:
    return str(key).split(".")


def data_get(data: Mapping, key: str | None, default: Any = None) -> Any:
    if key is None:
        return data

    if key in data:  # a literal key wins over a nested path
        return data[key]

    current: Any = data
    for segment in _segments(key):
        if not isinstance(current, Mapping) or segment not in current:
            return default
        current = current[segment]
    return current


def data_has(data: Mapping, key: str) -> bool:
    return data_get(data, key, _MISSING) is not _MISSING


def data_set(data: MutableMapping, key: str, value: Any) -> MutableMapping:
    """Sets value at the dotted path, creating (or replacing non-mapping)
    intermediate levels on the way. Returns the mutated mapping."""
    *parents, last = _segments(key)
    current = data
    for segment in parents:
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child
    current[last] = value
    return data


def data_forget(data: MutableMapping, key: str) -> None:
    if key in data:
        del data[key]
        return

    *parents, last = _segments(key)
    current: Any = data
    for segment in parents:
        if not isinstance(current, MutableMapping) or segment not in current:
            return
        current = current[segment]

    if isinstance(current, MutableMapping):
        current.pop(last, None)
