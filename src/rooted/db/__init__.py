"""SQLite persistence."""

from rooted.db.connection import DatabaseConnection, get_db, set_db

__all__ = ["DatabaseConnection", "get_db", "set_db"]
