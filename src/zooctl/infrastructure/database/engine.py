"""Database engine setup for SQLite with WAL mode.

The DB is stored at {data_dir}/.zooctl/{filename}.

SQLAlchemy Core (not ORM) is used because zooctl is a short-lived
CLI process — no benefit from session management or identity maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from zooctl.infrastructure.database.schema import metadata

DEFAULT_DB_FILENAME = "zooctl.db"


def create_db_engine(db_path: Path, *, echo: bool = False) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=echo)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(
    data_dir: Path,
    *,
    filename: str = DEFAULT_DB_FILENAME,
    echo: bool = False,
) -> Engine:
    """Initialize the database at ``{data_dir}/.zooctl/{filename}``.

    Creates the ``.zooctl/`` directory and all tables from
    :data:`schema.metadata`.

    Idempotent — safe to call on an existing database.

    Returns the engine ready for use.
    """
    zooctl_dir = data_dir / ".zooctl"
    zooctl_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(zooctl_dir / filename, echo=echo)
    metadata.create_all(engine)
    return engine
