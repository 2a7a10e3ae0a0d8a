"""Command group: create, read, list, update, and delete zones."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from zooctl.commands._base import ZooGroup

if TYPE_CHECKING:
    from zooctl.commands._context import AppContext
    from zooctl.services.zones import ZoneService


def _service(app: AppContext) -> ZoneService:
    from zooctl.services.zones import ZoneService

    return ZoneService(app.zoo.zones)


@click.group(
    cls=ZooGroup,
    examples="""\
  zooctl zone create --name "Zona de Fuego" --capacity 6
  zooctl zone update 1 --capacity 10
  zooctl zone get 1""",
)
def zone() -> None:
    """Manage the zoo's zones."""


@zone.command()
@click.option("--name", required=True, help="Zone name.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--capacity", type=int, default=0, show_default=True, help="Maximum creatures.")
@click.pass_obj
def create(app: AppContext, name: str, description: str, capacity: int) -> None:
    """Create a new zone."""
    from zooctl.domain.models import Zone

    new = Zone(name=name, description=description, capacity=capacity)
    app.run("create_zone", lambda: _service(app).create_zone(new).to_dict())


@zone.command()
@click.argument("zone_id", type=int)
@click.pass_obj
def get(app: AppContext, zone_id: int) -> None:
    """Show one zone and the creatures it houses."""
    app.run("get_zone", lambda: _service(app).get_by_id(zone_id).to_dict())


@zone.command(name="list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List zones ordered by ID."""

    def action() -> dict[str, Any]:
        items = [z.to_dict() for z in _service(app).list_zones()]
        return {"count": len(items), "items": items}

    app.run("list_zones", action)


@zone.command()
@click.argument("zone_id", type=int)
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--capacity", type=int, default=None, help="New capacity.")
@click.pass_obj
def update(
    app: AppContext,
    zone_id: int,
    name: str | None,
    description: str | None,
    capacity: int | None,
) -> None:
    """Update a zone's fields."""
    from zooctl.domain.commands import ZoneUpdate

    changes = ZoneUpdate(name=name, description=description, capacity=capacity)
    if not changes.changes():
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)

    app.run("update_zone", lambda: _service(app).update_zone(zone_id, changes).to_dict())


@zone.command()
@click.argument("zone_id", type=int)
@click.pass_obj
def delete(app: AppContext, zone_id: int) -> None:
    """Delete a zone. Creatures housed there are left without a zone."""
    warnings: list[str] = []

    def action() -> dict[str, Any]:
        svc = _service(app)
        orphaned = len(svc.get_by_id(zone_id).creatures)
        svc.delete_zone(zone_id)
        if orphaned:
            warnings.append(f"{orphaned} creature(s) no longer have a zone")
        return {"id": zone_id, "orphaned": orphaned}

    app.run("delete_zone", action, warnings=warnings)
