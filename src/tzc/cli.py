"""Root CLI command for tzc."""

from __future__ import annotations

import click

from tzc import __version__
from tzc.commands._base import TzcCommand
from tzc.commands._context import AppContext
from tzc.config.settings import TzcSettings


@click.command(
    cls=TzcCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    examples="""\
  tzc                                   # current time in the default zones
  tzc 2025-04-01T15:30:00Z              # pick a zone interactively
  tzc 2025-04-01T15:30:00Z default      # all default zones
  tzc 2025-04-01T15:30:00Z IST          # alias, resolved to Asia/Kolkata
  tzc 2025-04-01T15:30:00Z Europe/Paris
  tzc --json 2025-04-01T15:30:00Z pst
  tzc --list-zones""",
)
@click.version_option(version=__version__, prog_name="tzc")
@click.argument("timestamp", required=False)
@click.argument("zone", required=False)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print converted times only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("--list-zones", is_flag=True, help="List every known time zone and exit.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    timestamp: str | None,
    zone: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    list_zones: bool,
    config_path: str | None,
) -> None:
    """Convert a UTC TIMESTAMP to time zones.

    TIMESTAMP must be ISO 8601 ending in 'Z' (e.g. 2025-04-01T15:30:00Z);
    other UTC offsets are not accepted. ZONE is an IANA name
    (America/New_York), an abbreviation (IST, EST, PST, CST, SGT, JST), or
    "default" for the default zone set. Without ZONE you are prompted to
    pick one; without TIMESTAMP the current time is shown.
    """
    from tzc.commands.select import make_chooser

    settings = TzcSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    app = AppContext(settings)
    ctx.obj = app

    if list_zones:
        app.emit(app.service.list_zones())
        return
    app.emit(app.service.run(timestamp, zone, chooser=make_chooser(app)))