"""Conversion modes, selected by which positional arguments are present."""

from __future__ import annotations

from enum import StrEnum

DEFAULT_KEYWORD = "default"


class ConversionMode(StrEnum):
    """The four mutually exclusive ways a request can be served."""

    CURRENT = "current"
    INTERACTIVE = "interactive"
    DEFAULTS = "defaults"
    SINGLE = "single"


def select_mode(timestamp: str | None, zone: str | None) -> ConversionMode:
    """Pick the mode for a ``(timestamp, zone)`` argument pair.

    Examples:
        >>> select_mode(None, None)
        <ConversionMode.CURRENT: 'current'>
        >>> select_mode("2025-04-01T15:30:00Z", "Default")
        <ConversionMode.DEFAULTS: 'defaults'>
    """
    if not timestamp:
        return ConversionMode.CURRENT
    if not zone:
        return ConversionMode.INTERACTIVE
    if zone.lower() == DEFAULT_KEYWORD:
        return ConversionMode.DEFAULTS
    return ConversionMode.SINGLE
