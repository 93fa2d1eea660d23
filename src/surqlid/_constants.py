"""Grammar constants for SurrealQL record identifier literals."""

from typing import Final

MAX_I64: Final[int] = 9223372036854775807
"""Largest signed 64-bit integer; larger ids are rendered as escaped literals."""

IDENT_OPEN: Final[str] = "⟨"
IDENT_CLOSE: Final[str] = "⟩"
ESCAPED_IDENT_CLOSE: Final[str] = "\\⟩"

NUMBER_SEPARATOR: Final[str] = "_"
TABLE_SEPARATOR: Final[str] = ":"

UUID_PREFIX: Final[str] = "u"
RECORD_PREFIX: Final[str] = "r"
STRING_PREFIX: Final[str] = "s"
DATETIME_PREFIX: Final[str] = "d"
DECIMAL_SUFFIX: Final[str] = "dec"
