"""Timestamp parsing — ISO-8601 strings carrying the UTC ``Z`` designator.

Only ``Z`` is accepted as a zone designator. Numeric offsets such as
``+05:30`` are rejected even though ISO-8601 allows them.

Examples:
    >>> parse_timestamp("2025-04-01T15:30:00Z").isoformat()
    '2025-04-01T15:30:00+00:00'
"""

from __future__ import annotations

import re
from datetime import UTC, datetime

from tzc.domain.errors import InvalidTimestampFormatError, NotUTCSuffixError

UTC_DESIGNATOR = "Z"
EXAMPLE_TIMESTAMP = "2025-04-01T15:30:00Z"

# Combined date-time without designator; seconds and fraction optional.
_ISO_DATETIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d{1,6})?)?$",
)


def parse_timestamp(raw: str) -> datetime:
    """Parse *raw* into an aware UTC datetime.

    Raises:
        NotUTCSuffixError: *raw* is empty or does not end with ``Z``.
        InvalidTimestampFormatError: the rest is not a real calendar date-time.
    """
    if not raw or not raw.endswith(UTC_DESIGNATOR):
        msg = (
            "Timestamp must be in ISO 8601 format and end with 'Z' for UTC "
            f"(e.g., {EXAMPLE_TIMESTAMP})"
        )
        raise NotUTCSuffixError(msg)

    body = raw[: -len(UTC_DESIGNATOR)]
    invalid = f'Invalid date format: "{raw}"'
    if not _ISO_DATETIME_RE.match(body):
        raise InvalidTimestampFormatError(invalid)
    try:
        parsed = datetime.fromisoformat(body)
    except ValueError as exc:
        raise InvalidTimestampFormatError(invalid) from exc
    return parsed.replace(tzinfo=UTC)


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(UTC)
