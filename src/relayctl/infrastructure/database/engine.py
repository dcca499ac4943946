"""SQLite engine for the user/connection directory.

Each connection runs :data:`SQLITE_PRAGMAS`: WAL so a reader (``authorize``)
never blocks on a writer (``users connect``), and foreign keys so a
connection row cannot point at a missing user.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from relayctl.infrastructure.database.schema import metadata

SQLITE_PRAGMAS = ("journal_mode=WAL", "foreign_keys=ON")


def create_db_engine(db_path: Path) -> Engine:
    engine = create_engine(f"sqlite:///{db_path}")

    @event.listens_for(engine, "connect")
    def _apply_pragmas(dbapi_conn: Any, _record: Any) -> None:
        cursor = dbapi_conn.cursor()
        try:
            for pragma in SQLITE_PRAGMAS:
                cursor.execute(f"PRAGMA {pragma}")
        finally:
            cursor.close()

    return engine


def init_database(db_path: Path) -> Engine:
    """Engine for *db_path* with its directory and tables in place.

    Running it against an existing database changes nothing.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path)
    metadata.create_all(engine)
    return engine
