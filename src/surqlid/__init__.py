"""Record identifier literals for SurrealQL."""

import logging
from importlib.metadata import version

from ._constants import MAX_I64
from ._equals import deep_equals
from ._escape import escape_ident, escape_number, is_only_numbers, is_valid_id_part
from ._exceptions import InvalidRecordIdError, SurqlIdError
from ._json import json_default
from ._record_id import RecordId, StringRecordId
from ._surrealql import escape_id_part, to_surrealql_string
from ._types import RecordIdSource, RecordIdValue
from ._value import Value

__version__ = version("surqlid")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MAX_I64",
    "InvalidRecordIdError",
    "RecordId",
    "RecordIdSource",
    "RecordIdValue",
    "StringRecordId",
    "SurqlIdError",
    "Value",
    "__version__",
    "deep_equals",
    "escape_id_part",
    "escape_ident",
    "escape_number",
    "is_only_numbers",
    "is_valid_id_part",
    "json_default",
    "to_surrealql_string",
]
