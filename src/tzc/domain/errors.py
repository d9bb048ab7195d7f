"""Domain error kinds.

Each error carries a stable ``code`` that the service layer copies into
:class:`~tzc.services.result.ServiceError`.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for every anticipated conversion failure."""

    code = "CONVERSION_ERROR"


class NotUTCSuffixError(ConversionError):
    """Timestamp is empty or does not end with the ``Z`` designator."""

    code = "NOT_UTC"


class InvalidTimestampFormatError(ConversionError):
    """Timestamp is not a valid ISO-8601 combined date-time."""

    code = "INVALID_TIMESTAMP"


class UnrecognizedZoneError(ConversionError):
    """Zone identifier is unknown to the host zone database."""

    code = "UNRECOGNIZED_ZONE"

    def __init__(self, zone: str) -> None:
        self.zone = zone
        super().__init__(f'"{zone}" is not a recognized IANA time zone name.')


class ZoneCatalogUnavailableError(ConversionError):
    """No zone list could be produced, not even the fallback."""

    code = "ZONE_CATALOG_UNAVAILABLE"


class InteractiveSelectionFailedError(ConversionError):
    """The interactive zone prompt was cancelled or could not run."""

    code = "INTERACTIVE_SELECTION_FAILED"
