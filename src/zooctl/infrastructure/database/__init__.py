"""SQLite database engine and schema via SQLAlchemy Core."""

from zooctl.infrastructure.database.engine import create_db_engine, init_database
from zooctl.infrastructure.database.schema import creatures, metadata, zones

__all__ = [
    "create_db_engine",
    "creatures",
    "init_database",
    "metadata",
    "zones",
]
