"""Click building blocks shared by every onionctl command.

``OnionCommand`` / ``OnionGroup`` accept an ``examples`` string that is
printed by an eager ``--examples`` flag, keeping ``--help`` short.
``config_path_argument`` is the PATH argument every file-editing command
takes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

config_path_argument = click.argument(
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
)


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples`` and registers ``--examples`` when it is non-empty."""

    examples: str | None
    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class OnionCommand(_ExamplesMixin, click.Command):
    """Command accepting an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class OnionGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`OnionCommand`."""

    command_class = OnionCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
