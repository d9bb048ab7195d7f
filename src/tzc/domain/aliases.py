"""Abbreviation aliases for common zones.

Abbreviations are ambiguous in the real world. Each one here maps to a
single documented zone: CST/CDT collapse onto US Central.
"""

from __future__ import annotations

from types import MappingProxyType

ALIAS_TABLE: MappingProxyType[str, str] = MappingProxyType(
    {
        "IST": "Asia/Kolkata",
        "EST": "America/New_York",
        "EDT": "America/New_York",
        "PST": "America/Los_Angeles",
        "PDT": "America/Los_Angeles",
        "CST": "America/Chicago",
        "CDT": "America/Chicago",
        "SGT": "Asia/Singapore",
        "JST": "Asia/Tokyo",
    }
)


def resolve_alias(value: str) -> str:
    """Return the canonical zone for *value*, or *value* unchanged.

    Examples:
        >>> resolve_alias("ist")
        'Asia/Kolkata'
        >>> resolve_alias("Europe/Paris")
        'Europe/Paris'
    """
    return ALIAS_TABLE.get(value.upper(), value)
