"""Zoo — owner of the database engine and the entity repositories.

Constructed once at CLI startup from :class:`ZooSettings`. Services
receive the repository they need (``zoo.creatures`` or ``zoo.zones``)
at construction time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from zooctl.infrastructure.database.engine import init_database
from zooctl.infrastructure.repositories.creatures import SqlCreatureRepository
from zooctl.infrastructure.repositories.zones import SqlZoneRepository

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from zooctl.config.settings import ZooSettings

logger = logging.getLogger(__name__)


class Zoo:
    """Database engine plus SQL repositories for one data directory."""

    def __init__(self, settings: ZooSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(
            self.root,
            filename=settings.database.filename,
            echo=settings.database.echo,
        )
        self._creatures = SqlCreatureRepository(self._engine)
        self._zones = SqlZoneRepository(self._engine)
        logger.debug("Opened zoo %r database under %s", settings.zoo.name, self.root)

    @property
    def root(self) -> Path:
        """The data directory holding ``.zooctl/``."""
        return self._settings.data_dir

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def creatures(self) -> SqlCreatureRepository:
        return self._creatures

    @property
    def zones(self) -> SqlZoneRepository:
        return self._zones

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
