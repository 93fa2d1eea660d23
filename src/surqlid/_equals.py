"""Structural equality for record identifier payloads."""

from collections.abc import Hashable, Mapping, Set
from types import MappingProxyType

__all__ = ["deep_equals", "freeze", "snapshot"]


def deep_equals(a: object, b: object) -> bool:
    """Compare two values recursively.

    Booleans never equal integers. Lists and tuples are interchangeable
    sequences compared element-wise. Mappings are equal when they hold the
    same keys with deep-equal values, regardless of insertion order. All
    other values, including UUIDs, compare with ``==``.

    Args:
        a: The first value.
        b: The second value.

    Returns:
        True if the values are structurally equal.
    """
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, Mapping):
        if not isinstance(b, Mapping) or len(a) != len(b):
            return False
        return all(key in b and deep_equals(value, b[key]) for key, value in a.items())
    if isinstance(a, (list, tuple)):
        if not isinstance(b, (list, tuple)) or len(a) != len(b):
            return False
        return all(deep_equals(x, y) for x, y in zip(a, b))
    if isinstance(b, (Mapping, list, tuple)):
        return False
    return a == b


def freeze(value: object) -> Hashable:
    """Convert a payload into a hashable form consistent with deep_equals."""
    if isinstance(value, Mapping):
        return frozenset((key, freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, Set):
        return frozenset(freeze(item) for item in value)
    return value  # pyright: ignore[reportReturnType]


def snapshot(value: object) -> object:
    """Copy a payload into a read-only form that renders and compares the same.

    Lists become tuples, mappings become read-only mapping proxies over a
    private dict (insertion order kept) and sets become frozensets, all
    recursively. Other values are returned unchanged.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: snapshot(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(snapshot(item) for item in value)
    if isinstance(value, Set):
        return frozenset(snapshot(item) for item in value)
    return value
