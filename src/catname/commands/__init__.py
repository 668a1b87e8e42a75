"""Subcommand modules for catname.

register_commands() uses deferred imports to keep ``catname --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    from catname.commands.add import add
    from catname.commands.cache import cache
    from catname.commands.duplicates import duplicates
    from catname.commands.init_cmd import init_cmd
    from catname.commands.name import name

    cli.add_command(init_cmd)
    cli.add_command(add)
    cli.add_command(name)
    cli.add_command(duplicates)
    cli.add_command(cache)
