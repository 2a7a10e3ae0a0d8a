"""SQLAlchemy Core table definitions for the zooctl database.

Bounds are enforced twice: by the domain validators before every save,
and by ``CHECK`` constraints here as the last line at the data layer.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

metadata = MetaData()

zones = Table(
    "zones",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("description", Text, nullable=False, default="", server_default=""),
    Column("capacity", Integer, nullable=False, default=0, server_default="0"),
    CheckConstraint("capacity >= 0", name="ck_zones_capacity"),
)

creatures = Table(
    "creatures",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("species", Text, nullable=False),
    Column("danger_level", Integer, nullable=False),
    Column("health_status", Text, nullable=False),
    # Deleting a zone orphans its creatures rather than blocking.
    Column("zone_id", Integer, ForeignKey("zones.id", ondelete="SET NULL")),
    CheckConstraint("danger_level BETWEEN 0 AND 10", name="ck_creatures_danger_level"),
)

Index("ix_creatures_zone_id", creatures.c.zone_id)
