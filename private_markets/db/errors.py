"""Translation of datastore errors into the application error taxonomy.

This is the single boundary where raw SQLAlchemy/DBAPI errors are inspected.
Domain operations wrap their writes in `translate_db_errors` so callers only
ever see AppError subclasses for constraint problems.
"""

from contextlib import contextmanager
from typing import Generator, Optional
import logging

from sqlalchemy.exc import DBAPIError
from sqlmodel import Session

from private_markets.core.errors import (
    AppError,
    ConflictError,
    InvalidDataError,
    ReferentialError,
)

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"
INVALID_TEXT_REPRESENTATION = "22P02"

# SQLite reports constraint failures only through the message text
_SQLITE_MESSAGES = {
    "UNIQUE constraint failed": UNIQUE_VIOLATION,
    "FOREIGN KEY constraint failed": FOREIGN_KEY_VIOLATION,
    "CHECK constraint failed": CHECK_VIOLATION,
}


def error_code(exc: DBAPIError) -> Optional[str]:
    """Extract a SQLSTATE-style code from a wrapped DBAPI exception."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code

    message = str(orig)
    for prefix, mapped in _SQLITE_MESSAGES.items():
        if prefix in message:
            return mapped
    return None


def translate_db_error(exc: DBAPIError) -> Optional[AppError]:
    """Map a datastore error to an AppError, or None if it is unexpected."""
    code = error_code(exc)

    if code == UNIQUE_VIOLATION:
        return ConflictError("A record with this value already exists")
    if code == FOREIGN_KEY_VIOLATION:
        return ReferentialError("Referenced record does not exist")
    if code == CHECK_VIOLATION:
        return InvalidDataError("Invalid data provided")
    if code == INVALID_TEXT_REPRESENTATION:
        return InvalidDataError("Invalid data format")
    return None


@contextmanager
def translate_db_errors(session: Session) -> Generator[None, None, None]:
    """Roll back and re-raise datastore constraint errors as AppErrors.

    Usage:
        with translate_db_errors(session):
            session.add(investor)
            session.commit()
    """
    try:
        yield
    except DBAPIError as e:
        session.rollback()
        translated = translate_db_error(e)
        if translated is None:
            raise
        logger.info(f"Datastore rejected write: {type(translated).__name__} ({error_code(e)})")
        raise translated from e
