"""ZoneService — zone lifecycle.

Deletion has no business-rule gate: a zone that still houses creatures
is deleted and its creatures are left without a zone.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from zooctl.domain.errors import ResourceNotFoundError
from zooctl.domain.validation import validate_zone
from zooctl.services.base import BaseService

if TYPE_CHECKING:
    from zooctl.domain.commands import ZoneUpdate
    from zooctl.domain.models import Zone
    from zooctl.infrastructure.repositories.base import ZoneRepository

logger = logging.getLogger(__name__)


class ZoneService(BaseService["ZoneRepository"]):
    """Create, read, update, and delete zones."""

    def create_zone(self, zone: Zone) -> Zone:
        """Validate and persist a new zone under a store-assigned id."""
        self._ensure_valid(validate_zone(zone))
        saved = self._repository.save(replace(zone, id=None))
        logger.info("Created zone %s (%s)", saved.id, saved.name)
        return saved

    def get_by_id(self, zone_id: int) -> Zone:
        zone = self._repository.find_by_id(zone_id)
        if zone is None:
            raise ResourceNotFoundError("Zone", zone_id)
        return zone

    def list_zones(self) -> list[Zone]:
        return self._repository.find_all()

    def update_zone(self, zone_id: int, update: ZoneUpdate) -> Zone:
        """Overwrite name, capacity, and (where supplied) description."""
        existing = self.get_by_id(zone_id)
        merged = update.apply_to(existing)
        self._ensure_valid(validate_zone(merged))
        saved = self._repository.save(merged)
        logger.info("Updated zone %s: %s", zone_id, sorted(update.changes()))
        return saved

    def delete_zone(self, zone_id: int) -> None:
        zone = self.get_by_id(zone_id)
        if zone.creatures:
            logger.info("Deleting zone %s orphans %d creature(s)", zone_id, len(zone.creatures))
        self._repository.delete(zone)
        logger.info("Deleted zone %s", zone_id)
