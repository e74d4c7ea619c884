"""Subcommand modules for onionctl.

Provides register_commands() which uses deferred imports to keep
``onionctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``node`` group and the standalone commands on the root group."""
    from onionctl.commands.connect import connect, disconnect, targets
    from onionctl.commands.init_cmd import init_cmd
    from onionctl.commands.node import node
    from onionctl.commands.validate import validate

    cli.add_command(node)

    cli.add_command(init_cmd)
    cli.add_command(validate)
    cli.add_command(connect)
    cli.add_command(disconnect)
    cli.add_command(targets)
