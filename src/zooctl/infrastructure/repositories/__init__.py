"""Repositories — persistence for creatures and zones."""

from zooctl.infrastructure.repositories.base import CreatureRepository, ZoneRepository
from zooctl.infrastructure.repositories.creatures import SqlCreatureRepository
from zooctl.infrastructure.repositories.zones import SqlZoneRepository

__all__ = [
    "CreatureRepository",
    "SqlCreatureRepository",
    "SqlZoneRepository",
    "ZoneRepository",
]
