"""BaseService — abstract foundation for zooctl services.

Every service receives the repository it orchestrates at construction
time. Repository calls are single-attempt; services never retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from zooctl.domain.errors import ValidationFailedError

if TYPE_CHECKING:
    from zooctl.domain.validation import Violation

logger = logging.getLogger(__name__)

RepoT = TypeVar("RepoT")


class BaseService(Generic[RepoT]):
    """Abstract base for service-layer classes.

    Usage::

        class CreatureService(BaseService[CreatureRepository]):
            def get_by_id(self, creature_id: int) -> Creature:
                creature = self._repository.find_by_id(creature_id)
                ...
    """

    def __init__(self, repository: RepoT) -> None:
        self._repository = repository

    @staticmethod
    def _ensure_valid(violations: list[Violation]) -> None:
        """Raise :class:`ValidationFailedError` if *violations* is non-empty."""
        if violations:
            logger.debug("Validation failed: %s", violations)
            raise ValidationFailedError(violations)
