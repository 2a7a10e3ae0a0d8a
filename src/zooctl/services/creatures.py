"""CreatureService — creature lifecycle and the critical-health delete rule."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from zooctl.domain.errors import IllegalStateError, ResourceNotFoundError
from zooctl.domain.validation import validate_creature
from zooctl.services.base import BaseService

if TYPE_CHECKING:
    from zooctl.domain.commands import CreatureUpdate
    from zooctl.domain.models import Creature
    from zooctl.infrastructure.repositories.base import CreatureRepository, ZoneRepository

logger = logging.getLogger(__name__)


class CreatureService(BaseService["CreatureRepository"]):
    """Create, read, update, and delete creatures.

    When a *zones* repository is supplied, any ``zone_id`` written to a
    creature must name an existing zone.
    """

    def __init__(
        self,
        repository: CreatureRepository,
        zones: ZoneRepository | None = None,
    ) -> None:
        super().__init__(repository)
        self._zones = zones

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create_creature(self, creature: Creature) -> Creature:
        """Validate and persist a new creature.

        The store always assigns the id; any id on *creature* is ignored.
        """
        self._ensure_valid(validate_creature(creature))
        self._check_zone(creature.zone_id)
        saved = self._repository.save(replace(creature, id=None))
        logger.info("Created creature %s (%s)", saved.id, saved.name)
        return saved

    def get_by_id(self, creature_id: int) -> Creature:
        creature = self._repository.find_by_id(creature_id)
        if creature is None:
            raise ResourceNotFoundError("Creature", creature_id)
        return creature

    def list_creatures(self, *, zone_id: int | None = None) -> list[Creature]:
        """All creatures ordered by id, optionally only those housed in *zone_id*."""
        if zone_id is not None:
            return self._repository.find_by_zone(zone_id)
        return self._repository.find_all()

    def update_creature(self, creature_id: int, update: CreatureUpdate) -> Creature:
        """Apply *update* to an existing creature and persist it.

        The id never changes. The merged record is validated before saving.
        """
        existing = self.get_by_id(creature_id)
        merged = update.apply_to(existing)
        self._ensure_valid(validate_creature(merged))
        if update.zone_id is not None:
            self._check_zone(update.zone_id)
        saved = self._repository.save(merged)
        logger.info("Updated creature %s: %s", creature_id, sorted(update.changes()))
        return saved

    def delete_creature(self, creature_id: int) -> None:
        """Delete a creature unless its health is critical."""
        creature = self.get_by_id(creature_id)
        if creature.is_critical:
            msg = f"Cannot delete creature {creature_id}: health status is critical"
            raise IllegalStateError(msg)
        self._repository.delete(creature)
        logger.info("Deleted creature %s", creature_id)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _check_zone(self, zone_id: int | None) -> None:
        if zone_id is None or self._zones is None:
            return
        if self._zones.find_by_id(zone_id) is None:
            raise ResourceNotFoundError("Zone", zone_id)
