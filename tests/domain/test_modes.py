"""Tests for request mode selection."""

import pytest

from tzc.domain.modes import ConversionMode, select_mode

TS = "2025-04-01T15:30:00Z"


@pytest.mark.parametrize(
    ("timestamp", "zone", "mode"),
    [
        (None, None, ConversionMode.CURRENT),
        ("", None, ConversionMode.CURRENT),
        (TS, None, ConversionMode.INTERACTIVE),
        (TS, "", ConversionMode.INTERACTIVE),
        (TS, "default", ConversionMode.DEFAULTS),
        (TS, "DEFAULT", ConversionMode.DEFAULTS),
        (TS, "Default", ConversionMode.DEFAULTS),
        (TS, "IST", ConversionMode.SINGLE),
        (TS, "Europe/Paris", ConversionMode.SINGLE),
        (TS, "defaults", ConversionMode.SINGLE),
    ],
)
def test_select_mode(timestamp: str | None, zone: str | None, mode: ConversionMode) -> None:
    assert select_mode(timestamp, zone) is mode


def test_invalid_timestamp_still_selects_by_shape() -> None:
    assert select_mode("bogus", "default") is ConversionMode.DEFAULTS
