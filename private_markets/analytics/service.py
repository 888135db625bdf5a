"""Loads a fund and its positions, then runs the aggregator."""

import logging
from uuid import UUID

from sqlmodel import Session

from private_markets.domain import FundOperations, InvestmentOperations
from .aggregator import FundAnalytics, compute_fund_analytics

logger = logging.getLogger(__name__)


class FundAnalyticsService:
    """Read-and-compute analytics for a single fund. Nothing is cached."""

    @staticmethod
    def get_fund_analytics(session: Session, fund_id: UUID) -> FundAnalytics:
        """Compute analytics for a fund.

        Raises:
            NotFoundError: If the fund does not exist
        """
        fund = FundOperations.get_or_404(session, fund_id)
        positions = InvestmentOperations.get_positions_for_fund(session, fund_id)

        logger.debug(f"Computing analytics for fund {fund_id} over {len(positions)} investments")
        return compute_fund_analytics(fund.id, fund.target_size_usd, positions)
