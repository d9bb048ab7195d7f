"""AppContext — per-invocation state shared by the tzc command.

Owns the settings, builds the ConversionService lazily, and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from tzc.output.formatters import OutputSettings, format_result
from tzc.output.renderers import render_lead

if TYPE_CHECKING:
    from tzc.config.settings import TzcSettings
    from tzc.services.convert import ConversionService
    from tzc.services.result import ServiceResult


class AppContext:
    """Shared context stored on ``click.Context.obj``.

    The service (and with it the zone catalog) is created on first use so
    ``--help`` and ``--version`` never touch the zone database.
    """

    def __init__(self, settings: TzcSettings) -> None:
        self.settings = settings
        self._service: ConversionService | None = None

        from tzc.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ConversionService:
        """The conversion service (created lazily on first access)."""
        if self._service is None:
            from tzc.domain.zones import FALLBACK_ZONES, SystemZoneCatalog
            from tzc.services.convert import ConversionService

            catalog = SystemZoneCatalog(
                fallback=(*FALLBACK_ZONES, *self.settings.zones.fallback),
            )
            self._service = ConversionService(
                catalog=catalog,
                default_zones=self.settings.zones.defaults,
            )
        return self._service

    @property
    def interactive(self) -> bool:
        """Whether the zone prompt may run."""
        return not self.settings.no_interact and not self.settings.json_output

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          The lead line and warnings go to stderr so they don't pollute
          piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=(sys.stdout if result.ok else sys.stderr).isatty(),
        )
        output = format_result(result, settings=settings)
        if result.ok:
            human = not settings.json_output and not settings.quiet
            lead = render_lead(result) if human else None
            if lead:
                click.echo(lead, err=True)
            if output:
                click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
