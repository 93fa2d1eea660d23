"""Record identifier entities.

RecordId validates a table name and id value and renders them as a
``table:id`` SurrealQL literal. StringRecordId wraps a literal the caller
has already formatted and passes it through untouched.
"""

import logging
from typing import TYPE_CHECKING, ClassVar, cast

from ._constants import TABLE_SEPARATOR
from ._equals import deep_equals, freeze, snapshot
from ._escape import escape_ident, is_valid_id_part
from ._exceptions import InvalidRecordIdError
from ._surrealql import escape_id_part

if TYPE_CHECKING:
    from ._types import RecordIdSource, RecordIdValue

__all__ = ["RecordId", "StringRecordId"]

log = logging.getLogger(__name__)


class RecordId:
    """The address of a record: a table name and an id value.

    Both parts are validated on construction and are read-only afterwards.
    List, tuple and mapping ids are copied into tuples and read-only
    mappings, so later changes to the caller's objects have no effect.

    Args:
        table: The table name.
        id: The id value: a string, integer, UUID, list, tuple or mapping.

    Raises:
        InvalidRecordIdError: If table is not a string or id is not a
            supported id value.

    Example:
        >>> str(RecordId("person", "tobie"))
        'person:tobie'
        >>> str(RecordId("person", 123))
        'person:123'
        >>> str(RecordId("my table", "123"))
        '⟨my table⟩:⟨123⟩'
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_id", "_table")

    _table: str
    _id: "RecordIdValue"

    def __init__(self, table: str, id: "RecordIdValue") -> None:  # noqa: A002
        if not isinstance(table, str):
            msg = f"table part is not valid: expected str, got {type(table).__name__}"
            log.debug("rejecting record id: %s", msg)
            raise InvalidRecordIdError(msg)
        if not is_valid_id_part(id):
            msg = f"id part is not valid: unsupported type {type(id).__name__}"
            log.debug("rejecting record id for table %r: %s", table, msg)
            raise InvalidRecordIdError(msg)
        self._table = table
        self._id = cast("RecordIdValue", snapshot(id))

    @property
    def table(self) -> str:
        """The table name."""
        return self._table

    @property
    def id(self) -> "RecordIdValue":
        """The id value, as captured at construction."""
        return self._id

    def equals(self, other: object) -> bool:
        """Check structural equality with another record id.

        Args:
            other: The value to compare with.

        Returns:
            True if other is a RecordId with the same table and a deep-equal
            id, False otherwise.
        """
        if not isinstance(other, RecordId):
            return False
        return self._table == other._table and deep_equals(self._id, other._id)

    def to_json(self) -> str:
        """Return the record id literal, identical to ``str(self)``."""
        return str(self)

    def __str__(self) -> str:
        table = escape_ident(self._table)
        id_part = escape_id_part(self._id)
        return f"{table}{TABLE_SEPARATOR}{id_part}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._table!r}, {self._id!r})"

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((RecordId, self._table, freeze(self._id)))

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, name):
            msg = f"{type(self).__name__} is immutable"
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)


class StringRecordId:
    """A record id literal supplied by the caller, used as-is.

    The text is not validated or escaped. Use it when the literal is
    already correctly formatted, for example when it came back from the
    database.

    Args:
        rid: A literal string, or a RecordId or StringRecordId to take the
            literal from.

    Raises:
        InvalidRecordIdError: If rid is none of the accepted types.

    Example:
        >>> str(StringRecordId("person:tobie"))
        'person:tobie'
        >>> str(StringRecordId(RecordId("person", "123")))
        'person:⟨123⟩'
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_rid",)

    _rid: str

    def __init__(self, rid: "RecordIdSource") -> None:
        # The same call site may receive an already-built instance
        if isinstance(rid, StringRecordId):
            self._rid = rid.rid
        elif isinstance(rid, RecordId):
            self._rid = str(rid)
        elif isinstance(rid, str):
            self._rid = rid
        else:
            msg = (
                "string record id must be a string, RecordId or "
                f"StringRecordId, got {type(rid).__name__}"
            )
            log.debug("rejecting string record id: %s", msg)
            raise InvalidRecordIdError(msg)

    @property
    def rid(self) -> str:
        """The literal text."""
        return self._rid

    def equals(self, other: object) -> bool:
        """Return True if other is a StringRecordId with identical text."""
        if not isinstance(other, StringRecordId):
            return False
        return self._rid == other._rid

    def to_json(self) -> str:
        """Return the literal text unchanged."""
        return self._rid

    def __str__(self) -> str:
        return self._rid

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rid!r})"

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((StringRecordId, self._rid))

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, name):
            msg = f"{type(self).__name__} is immutable"
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)
