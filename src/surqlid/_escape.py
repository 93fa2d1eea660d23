"""Escaping of identifiers and integers into SurrealQL literals.

Bare identifiers may only contain ASCII letters, digits and underscores.
Anything else, and any text the parser could mistake for a number, is
wrapped in ``⟨ ⟩`` with embedded closing brackets backslash-escaped.
Integers above the signed 64-bit range are wrapped the same way so that
they are read as arbitrary-precision values.
"""

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, TypeGuard
from uuid import UUID

from ._constants import (
    ESCAPED_IDENT_CLOSE,
    IDENT_CLOSE,
    IDENT_OPEN,
    MAX_I64,
    NUMBER_SEPARATOR,
)

if TYPE_CHECKING:
    from ._types import RecordIdValue

__all__ = [
    "escape_ident",
    "escape_number",
    "is_only_numbers",
    "is_valid_id_part",
]

# Canonical decimal rendering of an integer: no sign on zero, no leading zeros
_CANONICAL_INTEGER = re.compile(r"0|-?[1-9][0-9]*")


def _is_bare_char(char: str) -> bool:
    return (
        "0" <= char <= "9"
        or "A" <= char <= "Z"
        or "a" <= char <= "z"
        or char == NUMBER_SEPARATOR
    )


def is_only_numbers(text: str) -> bool:
    """Check whether text would be read back as a bare integer.

    Only the first ``_`` separator is removed before parsing, so text with
    several separators may not be recognised.

    Args:
        text: The text to check.

    Returns:
        True if the separator-stripped text is the canonical decimal form
        of an integer.
    """
    stripped = text.replace(NUMBER_SEPARATOR, "", 1)
    return _CANONICAL_INTEGER.fullmatch(stripped) is not None


def escape_ident(text: str) -> str:
    """Escape text for use as a table name or string id.

    Args:
        text: The identifier text.

    Returns:
        The text unchanged if it is a safe bare identifier, otherwise the
        text wrapped in ``⟨ ⟩``.
    """
    # Numeric-looking text is always wrapped so it is not parsed as a number
    if is_only_numbers(text):
        return f"{IDENT_OPEN}{text}{IDENT_CLOSE}"

    for char in text:
        if not _is_bare_char(char):
            escaped = text.replace(IDENT_CLOSE, ESCAPED_IDENT_CLOSE)
            return f"{IDENT_OPEN}{escaped}{IDENT_CLOSE}"

    return text


def escape_number(number: int) -> str:
    """Render an integer id, wrapping values above the signed 64-bit range."""
    if number <= MAX_I64:
        return str(number)
    return f"{IDENT_OPEN}{number}{IDENT_CLOSE}"


def is_valid_id_part(value: object) -> "TypeGuard[RecordIdValue]":
    """Check if a value may be used as the id part of a record identifier.

    Args:
        value: The value to check.

    Returns:
        True for strings, integers, UUIDs, lists, tuples and mappings.
        False for booleans, None, floats and anything else.
    """
    if isinstance(value, UUID):
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, int, list, tuple)):
        return True
    return isinstance(value, Mapping)
