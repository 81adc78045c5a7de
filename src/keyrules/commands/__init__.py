"""Subcommand modules for keyrules.

Provides register_commands() which uses deferred imports to keep
``keyrules --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from keyrules.commands.check import check
    from keyrules.commands.validate import validate

    cli.add_command(check)
    cli.add_command(validate)
