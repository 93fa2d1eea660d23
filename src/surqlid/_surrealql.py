"""Rendering of Python values as SurrealQL literals."""

import json
import math
from collections.abc import Mapping, Set
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from ._constants import (
    DATETIME_PREFIX,
    DECIMAL_SUFFIX,
    RECORD_PREFIX,
    STRING_PREFIX,
    UUID_PREFIX,
)
from ._escape import escape_ident, escape_number
from ._value import Value

if TYPE_CHECKING:
    from ._types import RecordIdValue

__all__ = ["escape_id_part", "to_surrealql_string"]


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _float_literal(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    return repr(number)


def _decimal_literal(number: Decimal) -> str:
    if number.is_nan():
        return "NaN"
    if number.is_infinite():
        return "Infinity" if number > 0 else "-Infinity"
    digits = format(number, "f")
    return f"{digits}{DECIMAL_SUFFIX}"


def _datetime_literal(moment: date) -> str:
    # Naive datetimes and plain dates are taken to be UTC
    if not isinstance(moment, datetime):
        moment = datetime.combine(moment, time(), tzinfo=timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return f"{DATETIME_PREFIX}{_quote(moment.isoformat())}"


def to_surrealql_string(value: object) -> str:
    """Render a value as a SurrealQL literal.

    Strings, datetimes, UUIDs and record ids are emitted as prefixed quoted
    literals (``s"..."``, ``d"..."``, ``u"..."``, ``r"..."``). Naive
    datetimes and plain dates are rendered as UTC. Sequences and sets become
    array literals and mappings become object literals, with their contents
    rendered recursively and object keys escaped as identifiers. Values with
    no literal syntax fall back to ``str()``.

    Args:
        value: The value to render.

    Returns:
        The SurrealQL literal text.
    """
    if isinstance(value, str):
        return f"{STRING_PREFIX}{_quote(value)}"
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_literal(value)
    if isinstance(value, Decimal):
        return _decimal_literal(value)
    if isinstance(value, (datetime, date)):
        return _datetime_literal(value)
    if isinstance(value, UUID):
        return f"{UUID_PREFIX}{_quote(str(value))}"
    if isinstance(value, Value):
        return f"{RECORD_PREFIX}{_quote(str(value))}"
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        entries = ", ".join(
            f"{escape_ident(str(key))}: {to_surrealql_string(item)}"
            for key, item in value.items()
        )
        return f"{{ {entries} }}"
    if isinstance(value, (list, tuple, Set)):
        if not value:
            return "[]"
        items = ", ".join(to_surrealql_string(item) for item in value)
        return f"[ {items} ]"
    return str(value)


def escape_id_part(id_part: "RecordIdValue") -> str:
    """Render the id part of a record identifier.

    Args:
        id_part: A valid id value (see is_valid_id_part).

    Returns:
        ``u"<uuid>"`` for UUIDs, an escaped identifier for strings, an
        escaped number for integers, and an array or object literal for
        sequences and mappings.
    """
    if isinstance(id_part, UUID):
        return f'{UUID_PREFIX}"{id_part}"'
    if isinstance(id_part, str):
        return escape_ident(id_part)
    if isinstance(id_part, int):
        return escape_number(id_part)
    return to_surrealql_string(id_part)
