"""Type aliases for record identifier payloads.

This module contains ONLY TypeAlias definitions. It has no runtime
dependencies on other surqlid modules so that escaping, equality and entity
modules can all import from it without cycles.
"""

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping
    from uuid import UUID

    from ._record_id import RecordId, StringRecordId

RecordIdValue: TypeAlias = (
    "str | int | UUID | list[object] | tuple[object, ...] | Mapping[str, object]"
)
"""The id part of a record identifier.

An id is one of:
- A string, rendered as a bare or escaped identifier
- An integer of any size, escaped above the signed 64-bit range
- A UUID, rendered as a uuid literal
- A list or tuple of arbitrary values, rendered as an array literal
- A mapping of strings to arbitrary values, rendered as an object literal
"""

RecordIdSource: TypeAlias = "str | RecordId | StringRecordId"
"""Anything a StringRecordId can be built from."""
