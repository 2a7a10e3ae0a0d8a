"""Subcommand modules for zooctl.

Provides register_commands() which uses deferred imports to keep
``zooctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the entity command groups on the root CLI group."""
    from zooctl.commands.creature import creature
    from zooctl.commands.zone import zone

    cli.add_command(creature)
    cli.add_command(zone)
