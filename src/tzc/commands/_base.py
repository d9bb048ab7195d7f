"""The tzc command class.

``--help`` documents the arguments; ``--examples`` prints a few complete
invocations, one per conversion mode, and exits before any argument is
parsed or any config file is read.
"""

from __future__ import annotations

from typing import Any

import click


class TzcCommand(click.Command):
    """Command that owns an ``examples`` block and an eager ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
        ctx.exit(0)
