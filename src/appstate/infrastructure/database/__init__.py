"""SQLite database engine and schema via SQLAlchemy Core."""

from appstate.infrastructure.database.engine import create_db_engine, init_database
from appstate.infrastructure.database.schema import metadata, persisted_state

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "persisted_state",
]
