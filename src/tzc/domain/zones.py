"""Zone catalog — enumeration and validation of zone identifiers.

:class:`SystemZoneCatalog` reads the host zone database through
:mod:`zoneinfo` (the ``tzdata`` package stands in when the host ships no
database). :class:`StaticZoneCatalog` serves a fixed list and is what tests
use in place of the host database.
"""

from __future__ import annotations

import logging
import zoneinfo
from abc import ABC, abstractmethod
from collections.abc import Iterable
from types import MappingProxyType

from tzc.domain.errors import UnrecognizedZoneError

logger = logging.getLogger(__name__)

UTC_ZONE = "UTC"

DEFAULT_ZONES: MappingProxyType[str, str] = MappingProxyType(
    {
        "IST": "Asia/Kolkata",
        "EST": "America/New_York",
        "PST": "America/Los_Angeles",
        "UTC": UTC_ZONE,
        "SGT": "Asia/Singapore",
        "JST": "Asia/Tokyo",
        "CST_US": "America/Chicago",
    }
)

FALLBACK_ZONES: tuple[str, ...] = (
    UTC_ZONE,
    "America/New_York",
    "Europe/London",
    "Asia/Tokyo",
    *DEFAULT_ZONES.values(),
)


def load_zone(name: str) -> zoneinfo.ZoneInfo:
    """Look *name* up in the host zone database.

    Raises:
        UnrecognizedZoneError: *name* is empty, malformed, or unknown.
    """
    if not isinstance(name, str) or not name.strip():
        raise UnrecognizedZoneError(str(name))
    try:
        return zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnrecognizedZoneError(name) from exc


def _sorted_unique(names: Iterable[str]) -> list[str]:
    return sorted({n for n in names if n})


class ZoneCatalog(ABC):
    """Source of valid zone identifiers."""

    used_fallback: bool = False

    @abstractmethod
    def list_all(self) -> list[str]:
        """All known identifiers, sorted and deduplicated."""

    @abstractmethod
    def is_valid(self, candidate: str) -> bool:
        """Whether *candidate* names a known zone. Never raises."""


class SystemZoneCatalog(ZoneCatalog):
    """Catalog backed by the host zone database.

    Args:
        fallback: Names served when the database cannot be enumerated.
    """

    def __init__(self, fallback: Iterable[str] = FALLBACK_ZONES) -> None:
        self._fallback = tuple(fallback)
        self._zones: list[str] | None = None
        self.used_fallback = False

    def list_all(self) -> list[str]:
        if self._zones is None:
            self._zones = self._enumerate()
        return list(self._zones)

    def _enumerate(self) -> list[str]:
        try:
            zones = _sorted_unique(zoneinfo.available_timezones())
        except OSError:
            logger.debug("Zone database enumeration failed", exc_info=True)
            zones = []
        if zones:
            return zones
        logger.debug("Could not retrieve full timezone list; using a basic set")
        self.used_fallback = True
        return _sorted_unique(self._fallback)

    def is_valid(self, candidate: str) -> bool:
        try:
            load_zone(candidate)
        except UnrecognizedZoneError:
            return False
        return True


class StaticZoneCatalog(ZoneCatalog):
    """Catalog serving a fixed list of names.

    ``is_valid`` accepts only names in the list, so an entry the zone
    database does not know can still be listed and selected.
    """

    def __init__(self, zones: Iterable[str], *, used_fallback: bool = False) -> None:
        self._zones = _sorted_unique(zones)
        self.used_fallback = used_fallback

    def list_all(self) -> list[str]:
        return list(self._zones)

    def is_valid(self, candidate: str) -> bool:
        return isinstance(candidate, str) and candidate in self._zones
