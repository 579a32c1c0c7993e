"""Database layer for faretrack application."""

from faretrack.database.base import Database
from faretrack.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
