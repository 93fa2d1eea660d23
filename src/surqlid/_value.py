"""Capability interface shared by record identifier entities."""

from typing import Protocol, runtime_checkable

__all__ = ["Value"]


@runtime_checkable
class Value(Protocol):
    """A value with a canonical SurrealQL literal form.

    Implementers render themselves with ``str()``, return the same literal
    from ``to_json()`` and compare structurally through ``equals()``.
    """

    def equals(self, other: object) -> bool:
        """Return True if other is the same kind of value and equal."""
        ...

    def to_json(self) -> str:
        """Return the literal used when the value is embedded in JSON."""
        ...
