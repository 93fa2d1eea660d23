"""JSON integration for record identifier entities."""

from uuid import UUID

from ._value import Value

__all__ = ["json_default"]


def json_default(obj: object) -> str:
    """Serialize record ids and UUIDs for ``json.dumps(default=...)``.

    Record ids are embedded as their SurrealQL literal rather than as an
    object with table and id fields.

    Args:
        obj: An object the json module cannot serialize natively.

    Returns:
        The literal text for the object.

    Raises:
        TypeError: If obj is not a record id or UUID.

    Example:
        >>> import json
        >>> from surqlid import RecordId
        >>> json.dumps({"author": RecordId("person", "tobie")}, default=json_default)
        '{"author": "person:tobie"}'
    """
    if isinstance(obj, Value):
        return obj.to_json()
    if isinstance(obj, UUID):
        return str(obj)
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)
