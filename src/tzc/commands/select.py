"""Interactive zone selection.

The prompt is the only blocking call in tzc. It returns the chosen zone,
or None when the user cancels (Ctrl-C / EOF). The listing and the prompt
are written to stderr; stdout only ever carries the conversion result.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

import click

from tzc.output.renderers import render_zone_listing

if TYPE_CHECKING:
    from tzc.commands._context import AppContext
    from tzc.services.convert import Chooser

logger = logging.getLogger(__name__)


class ZoneSelection(click.ParamType):
    """Accept a listed zone by name (case-insensitive) or by its number."""

    name = "zone"

    def __init__(self, zones: Sequence[str]) -> None:
        self.zones = list(zones)
        self._by_name = {z.lower(): z for z in self.zones}

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> str:
        text = str(value).strip()
        if text.isdigit():
            index = int(text)
            if 1 <= index <= len(self.zones):
                return self.zones[index - 1]
            self.fail(f"{index} is out of range (1-{len(self.zones)}).", param, ctx)
        match = self._by_name.get(text.lower())
        if match is None:
            msg = f"{text!r} is not a listed time zone. Enter a name or its number."
            self.fail(msg, param, ctx)
        return match


def prompt_for_zone(
    zones: Sequence[str],
    *,
    show_list: bool = True,
    columns: int = 3,
) -> str | None:
    """Show *zones* and block until the user picks one."""
    click.echo("No timezone specified. Please select one:", err=True)
    if show_list:
        listing = render_zone_listing(zones, columns=columns, color=sys.stderr.isatty())
        click.echo(listing, err=True)
    try:
        return click.prompt("Select the target timezone", type=ZoneSelection(zones), err=True)
    except click.Abort:
        logger.debug("Zone selection cancelled")
        return None


def make_chooser(app: AppContext) -> Chooser | None:
    """Build the chooser for *app*, or None when prompting is disabled."""
    if not app.interactive:
        return None
    prompt = app.settings.prompt

    def choose(zones: Sequence[str]) -> str | None:
        return prompt_for_zone(zones, show_list=prompt.show_list, columns=prompt.columns)

    return choose
