"""Database factory functions."""

import os
from pathlib import Path
from typing import Optional

from faretrack.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV_VAR = "FARETRACK_DB_PATH"
DEFAULT_DB_PATH = Path("~/.faretrack/faretrack.db")


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Resolve where the SQLite file lives.

    An explicit path wins, then the FARETRACK_DB_PATH environment variable,
    then ~/.faretrack/faretrack.db. The parent directory is created if needed.
    """
    path = Path(database_path or os.environ.get(DB_PATH_ENV_VAR) or DEFAULT_DB_PATH).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to the SQLite file (see resolve_database_path)

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
