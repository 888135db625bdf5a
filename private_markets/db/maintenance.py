"""Destructive maintenance operations (test cleanup, local resets).

Every operation here requires the Database to have been constructed with
allow_destructive=True (ALLOW_DESTRUCTIVE_OPERATIONS). The flag is decided once
at startup; nothing here looks at the process environment.
"""

import logging
from typing import List

from sqlalchemy import delete

from private_markets.core.errors import DestructiveOperationError
from private_markets.models import Fund, Investment, Investor
from .engine import Database

logger = logging.getLogger(__name__)

# Children first so foreign keys never block the delete
_TABLES_IN_DELETE_ORDER = (Investment, Investor, Fund)


def require_destructive(database: Database, operation: str) -> None:
    """Raise unless destructive operations were enabled for this database.

    Raises:
        DestructiveOperationError: If the capability flag is off
    """
    if not database.allow_destructive:
        raise DestructiveOperationError(
            f'Operation "{operation}" requires ALLOW_DESTRUCTIVE_OPERATIONS to be enabled'
        )


def clear_all_tables(database: Database) -> List[str]:
    """Delete every row from every application table.

    Returns:
        Names of the cleared tables, in the order they were cleared
    """
    require_destructive(database, "clear all tables")

    cleared = []
    with database.session() as session:
        for model in _TABLES_IN_DELETE_ORDER:
            session.execute(delete(model))
            cleared.append(model.__tablename__)
        session.commit()

    logger.warning(f"Cleared tables: {', '.join(cleared)}")
    return cleared
