"""Exception hierarchy for surqlid."""

__all__ = ["InvalidRecordIdError", "SurqlIdError"]


class SurqlIdError(Exception):
    """Base exception for all surqlid errors."""


class InvalidRecordIdError(SurqlIdError, TypeError):
    """A record identifier could not be built from the given parts.

    Raised when:
    - The table part of a RecordId is not a string
    - The id part of a RecordId is not a supported id value
    - A StringRecordId is built from something other than a string,
      RecordId or StringRecordId
    """
