"""Shared pytest fixtures for tzc tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from tzc.domain.zones import DEFAULT_ZONES, StaticZoneCatalog
from tzc.services.convert import ConversionService

TEST_ZONES = [*DEFAULT_ZONES.values(), "Europe/London", "Europe/Paris"]


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no TZC_* overrides.

    Keeps a developer's own tzc.toml and environment out of the tests.
    """
    monkeypatch.chdir(tmp_path)
    for name in [n for n in os.environ if n.startswith("TZC_")]:
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tzc = logging.getLogger("tzc")
    tzc_level = tzc.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tzc.setLevel(tzc_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> StaticZoneCatalog:
    """Small deterministic zone catalog."""
    return StaticZoneCatalog(TEST_ZONES)


@pytest.fixture
def sample_instant() -> datetime:
    return datetime(2025, 4, 1, 15, 30, tzinfo=UTC)


@pytest.fixture
def fixed_clock(sample_instant: datetime) -> Callable[[], datetime]:
    return lambda: sample_instant


@pytest.fixture
def service(
    catalog: StaticZoneCatalog, fixed_clock: Callable[[], datetime]
) -> ConversionService:
    """ConversionService over the static catalog with a frozen clock."""
    return ConversionService(catalog=catalog, clock=fixed_clock)
