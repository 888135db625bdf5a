"""Domain layer - Shared CRUD operations for all models.

This layer provides pure data access functions (no business logic).
Datastore constraint errors are translated to AppErrors before they leave it.

Usage:
    from private_markets.domain import FundOperations

    with database.session() as session:
        fund = FundOperations.get_or_404(session, fund_id)
"""

from .fund_operations import FundOperations
from .investor_operations import InvestorOperations
from .investment_operations import InvestmentOperations

__all__ = [
    "FundOperations",
    "InvestorOperations",
    "InvestmentOperations",
]
