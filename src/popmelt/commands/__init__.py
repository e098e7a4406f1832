"""Subcommand modules for popmelt.

``register_commands()`` defers imports so ``popmelt --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the talents group and the standalone commands."""
    from popmelt.commands.css import css
    from popmelt.commands.env import env
    from popmelt.commands.serve import serve
    from popmelt.commands.talents import talents

    cli.add_command(talents)
    cli.add_command(css)
    cli.add_command(serve)
    cli.add_command(env)
