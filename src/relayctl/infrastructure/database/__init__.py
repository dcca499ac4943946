"""SQLite database engine and schema via SQLAlchemy Core."""

from relayctl.infrastructure.database.engine import create_db_engine, init_database
from relayctl.infrastructure.database.schema import connections, metadata, users

__all__ = [
    "connections",
    "create_db_engine",
    "init_database",
    "metadata",
    "users",
]
