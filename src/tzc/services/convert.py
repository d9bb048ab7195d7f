"""ConversionService — answers "what does instant X look like in zone Y?".

Composes timestamp parsing, alias resolution, zone validation and
formatting. Domain errors are caught here and returned as failed
ServiceResults; nothing in this module lets a ConversionError escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from tzc.domain.aliases import resolve_alias
from tzc.domain.errors import (
    ConversionError,
    InteractiveSelectionFailedError,
    UnrecognizedZoneError,
    ZoneCatalogUnavailableError,
)
from tzc.domain.formatting import format_instant, format_utc
from tzc.domain.modes import ConversionMode, select_mode
from tzc.domain.timestamps import parse_timestamp, utc_now
from tzc.domain.zones import DEFAULT_ZONES, SystemZoneCatalog, ZoneCatalog
from tzc.services.result import ServiceResult

logger = logging.getLogger(__name__)

ZONE_TIP = "Use standard names like 'America/New_York', 'Europe/Paris', 'Asia/Kolkata'."

Chooser = Callable[[Sequence[str]], str | None]


class ConversionService:
    """Timestamp conversion across the four request modes.

    Args:
        catalog: Zone source; defaults to the host zone database.
        default_zones: Ordered label -> zone table used by the multi-zone modes.
        clock: Returns the current instant; replaced in tests.
    """

    def __init__(
        self,
        catalog: ZoneCatalog | None = None,
        default_zones: Mapping[str, str] = DEFAULT_ZONES,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._catalog = catalog if catalog is not None else SystemZoneCatalog()
        self._default_zones = dict(default_zones)
        self._clock = clock

    # ── Dispatch ──────────────────────────────────────────────────────

    def run(
        self,
        timestamp: str | None,
        zone: str | None,
        chooser: Chooser | None = None,
    ) -> ServiceResult:
        """Serve one request in the mode implied by the arguments.

        *chooser* is only consulted in interactive mode. It receives the
        catalog listing and returns the chosen zone, or None when the user
        cancelled. Passing no chooser disables prompting.
        """
        mode = select_mode(timestamp, zone)
        logger.debug("Conversion mode: %s", mode)
        if mode is ConversionMode.CURRENT:
            return self.convert_now()
        assert timestamp is not None
        if mode is ConversionMode.DEFAULTS:
            return self.convert_defaults(timestamp)
        if mode is ConversionMode.SINGLE:
            assert zone is not None
            return self.convert(timestamp, zone)
        return self._convert_interactive(timestamp, chooser)

    # ── Operations ────────────────────────────────────────────────────

    def parse(self, raw: str) -> ServiceResult:
        """Validate a timestamp without converting it."""
        try:
            instant = parse_timestamp(raw)
        except ConversionError as exc:
            return ServiceResult.from_error("parse", exc, timestamp=raw)
        return ServiceResult(
            ok=True,
            op="parse",
            data={"timestamp": raw, "iso": instant.isoformat()},
        )

    def list_zones(self) -> ServiceResult:
        """List every zone the catalog knows.

        A catalog that had to fall back to its static list still succeeds,
        with a warning. An empty listing is an error.
        """
        zones = self._catalog.list_all()
        if not zones:
            exc = ZoneCatalogUnavailableError(
                "Could not retrieve timezone list. Cannot proceed interactively."
            )
            return ServiceResult.from_error("list_zones", exc)
        warnings: list[str] = []
        if self._catalog.used_fallback:
            warnings.append("Could not retrieve full timezone list. Using a basic set.")
        return ServiceResult(
            ok=True,
            op="list_zones",
            data={"zones": zones, "count": len(zones), "fallback": self._catalog.used_fallback},
            warnings=warnings,
        )

    def convert_now(self) -> ServiceResult:
        """Format the current instant in every default zone."""
        return self._convert_many(self._clock(), timestamp=None)

    def convert_defaults(self, raw: str) -> ServiceResult:
        """Format a parsed timestamp in every default zone."""
        try:
            instant = parse_timestamp(raw)
        except ConversionError as exc:
            return ServiceResult.from_error("convert_defaults", exc, timestamp=raw)
        return self._convert_many(instant, timestamp=raw)

    def convert(self, raw: str, zone: str, *, resolve_aliases: bool = True) -> ServiceResult:
        """Format a parsed timestamp in a single zone.

        When *zone* is an alias the result carries a ``note`` naming the
        canonical zone that was used.
        """
        try:
            instant = parse_timestamp(raw)
        except ConversionError as exc:
            return ServiceResult.from_error("convert", exc, timestamp=raw)

        resolved = resolve_alias(zone) if resolve_aliases else zone
        if resolved != zone:
            logger.debug("Alias %s resolved to %s", zone, resolved)
        try:
            if not self._catalog.is_valid(resolved):
                raise UnrecognizedZoneError(resolved)
            formatted = format_instant(instant, resolved)
        except UnrecognizedZoneError as exc:
            return ServiceResult.from_error(
                "convert", exc, zone=resolved, requested=zone, tip=ZONE_TIP
            )

        data: dict[str, Any] = {
            "timestamp": raw,
            "requested": zone,
            "zone": resolved,
            "formatted": formatted,
        }
        if resolved != zone:
            data["note"] = f'Used IANA zone "{resolved}" for "{zone}"'
        return ServiceResult(ok=True, op="convert", data=data)

    # ── Internals ─────────────────────────────────────────────────────

    def _convert_many(self, instant: datetime, *, timestamp: str | None) -> ServiceResult:
        items: list[dict[str, str]] = []
        warnings: list[str] = []
        for label, zone in self._default_zones.items():
            try:
                formatted = format_instant(instant, zone)
            except UnrecognizedZoneError as exc:
                logger.debug("Skipping default zone %s: %s", zone, exc)
                items.append({"label": label, "zone": zone, "error": str(exc)})
                warnings.append(f"Error converting to timezone {zone!r}: {exc}")
            else:
                items.append({"label": label, "zone": zone, "formatted": formatted})
        return ServiceResult(
            ok=True,
            op="convert_defaults",
            data={
                "timestamp": timestamp,
                "utc": format_utc(instant),
                "zones": items,
                "count": len(items),
            },
            warnings=warnings,
        )

    def _convert_interactive(self, raw: str, chooser: Chooser | None) -> ServiceResult:
        parsed = self.parse(raw)
        if not parsed.ok:
            return parsed.model_copy(update={"op": "convert"})

        listing = self.list_zones()
        if not listing.ok:
            return listing

        if chooser is None:
            exc = InteractiveSelectionFailedError(
                "No timezone specified and interactive prompts are disabled."
            )
            return ServiceResult.from_error("convert", exc, timestamp=raw)

        selected = chooser(listing.data["zones"])
        if selected is None:
            exc = InteractiveSelectionFailedError("Error during interactive selection.")
            return ServiceResult.from_error("convert", exc, timestamp=raw)

        result = self.convert(raw, selected, resolve_aliases=False)
        if listing.warnings:
            result = result.model_copy(update={"warnings": [*listing.warnings, *result.warnings]})
        return result
