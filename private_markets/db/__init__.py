"""
Database connection and session management.

Exports:
    - Database: Process-scoped pool + session factory (open/close lifecycle)
    - translate_db_errors: Context manager mapping constraint errors to AppErrors
    - clear_all_tables: Destructive cleanup, gated by ALLOW_DESTRUCTIVE_OPERATIONS
"""

from .engine import Database, normalize_database_url
from .errors import translate_db_error, translate_db_errors
from .maintenance import clear_all_tables, require_destructive

__all__ = [
    "Database",
    "normalize_database_url",
    "translate_db_error",
    "translate_db_errors",
    "clear_all_tables",
    "require_destructive",
]
