"""Display formatting for instants projected into a zone."""

from __future__ import annotations

from datetime import UTC, datetime

from tzc.domain.zones import load_zone

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def format_instant(instant: datetime, zone: str) -> str:
    """Render *instant* as local time in *zone*.

    Examples:
        >>> from datetime import UTC, datetime
        >>> format_instant(datetime(2025, 4, 1, 15, 0, tzinfo=UTC), "America/New_York")
        '2025-04-01 11:00:00 EDT'

    Raises:
        UnrecognizedZoneError: the zone database does not know *zone*.
    """
    return instant.astimezone(load_zone(zone)).strftime(DISPLAY_FORMAT)


def format_utc(instant: datetime) -> str:
    """Render *instant* in UTC without consulting the zone database."""
    return instant.astimezone(UTC).strftime(DISPLAY_FORMAT)
