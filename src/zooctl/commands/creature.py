"""Command group: create, read, list, update, and delete creatures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from zooctl.commands._base import ZooGroup

if TYPE_CHECKING:
    from zooctl.commands._context import AppContext
    from zooctl.services.creatures import CreatureService


def _service(app: AppContext) -> CreatureService:
    from zooctl.services.creatures import CreatureService

    return CreatureService(app.zoo.creatures, zones=app.zoo.zones)


@click.group(
    cls=ZooGroup,
    examples="""\
  zooctl creature create --name Fenix --species Ave --danger-level 3
  zooctl creature list --zone 2
  zooctl creature update 7 --health-status recovering
  zooctl --json creature get 7""",
)
def creature() -> None:
    """Manage the zoo's creatures."""


@creature.command(
    examples="""\
  zooctl creature create --name Hydra --species Reptil --danger-level 5
  zooctl creature create --name Unicornio --species Mistico --zone 1""",
)
@click.option("--name", required=True, help="Creature name.")
@click.option("--species", required=True, help="Species.")
@click.option("--danger-level", type=int, default=0, show_default=True, help="0 to 10.")
@click.option(
    "--health-status",
    default="stable",
    show_default=True,
    help="Health status (stable, recovering, critical).",
)
@click.option("--zone", "zone_id", type=int, default=None, help="Zone housing the creature.")
@click.pass_obj
def create(
    app: AppContext,
    name: str,
    species: str,
    danger_level: int,
    health_status: str,
    zone_id: int | None,
) -> None:
    """Register a new creature."""
    from zooctl.domain.models import Creature

    new = Creature(
        name=name,
        species=species,
        danger_level=danger_level,
        health_status=health_status,
        zone_id=zone_id,
    )
    app.run("create_creature", lambda: _service(app).create_creature(new).to_dict())


@creature.command()
@click.argument("creature_id", type=int)
@click.pass_obj
def get(app: AppContext, creature_id: int) -> None:
    """Show one creature by ID."""
    app.run("get_creature", lambda: _service(app).get_by_id(creature_id).to_dict())


@creature.command(name="list")
@click.option("--zone", "zone_id", type=int, default=None, help="Only creatures in this zone.")
@click.pass_obj
def list_cmd(app: AppContext, zone_id: int | None) -> None:
    """List creatures ordered by ID."""

    def action() -> dict[str, Any]:
        items = [c.to_dict() for c in _service(app).list_creatures(zone_id=zone_id)]
        return {"count": len(items), "items": items}

    app.run("list_creatures", action)


@creature.command(
    examples="""\
  zooctl creature update 3 --name "Dragon Rojo" --danger-level 4
  zooctl creature update 3 --health-status critical""",
)
@click.argument("creature_id", type=int)
@click.option("--name", default=None, help="New name.")
@click.option("--species", default=None, help="New species.")
@click.option("--danger-level", type=int, default=None, help="New danger level (0 to 10).")
@click.option("--health-status", default=None, help="New health status.")
@click.option("--zone", "zone_id", type=int, default=None, help="Move to this zone.")
@click.pass_obj
def update(
    app: AppContext,
    creature_id: int,
    name: str | None,
    species: str | None,
    danger_level: int | None,
    health_status: str | None,
    zone_id: int | None,
) -> None:
    """Update a creature's fields."""
    from zooctl.domain.commands import CreatureUpdate

    changes = CreatureUpdate(
        name=name,
        species=species,
        danger_level=danger_level,
        health_status=health_status,
        zone_id=zone_id,
    )
    if not changes.changes():
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)

    app.run(
        "update_creature",
        lambda: _service(app).update_creature(creature_id, changes).to_dict(),
    )


@creature.command()
@click.argument("creature_id", type=int)
@click.pass_obj
def delete(app: AppContext, creature_id: int) -> None:
    """Delete a creature (refused while its health is critical)."""

    def action() -> dict[str, Any]:
        _service(app).delete_creature(creature_id)
        return {"id": creature_id}

    app.run("delete_creature", action)
