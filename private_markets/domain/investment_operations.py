"""Domain operations for Investment model - Shared CRUD operations."""

from typing import List
from uuid import UUID
from sqlmodel import Session, select
from private_markets.db.errors import translate_db_errors
from private_markets.models import Investment, InvestmentCreate, InvestmentPosition, Investor


class InvestmentOperations:
    """Core CRUD operations for Investment model.

    Investments are created once; no update or delete is exposed.
    """

    @staticmethod
    def get_by_fund(session: Session, fund_id: UUID) -> List[Investment]:
        """Get all investments for a fund, most recent investment date first.

        Args:
            session: Database session
            fund_id: Fund UUID

        Returns:
            List of investments (empty for unknown funds or funds without investments)
        """
        stmt = (
            select(Investment)
            .where(Investment.fund_id == fund_id)
            .order_by(Investment.investment_date.desc(), Investment.created_at.desc())
        )
        return list(session.exec(stmt).all())

    @staticmethod
    def get_positions_for_fund(session: Session, fund_id: UUID) -> List[InvestmentPosition]:
        """Get a fund's investments joined with investor name and type.

        Ordered by amount descending, then investment date, then id, so the
        same data always yields the same order.

        Args:
            session: Database session
            fund_id: Fund UUID

        Returns:
            List of InvestmentPosition in gateway order
        """
        stmt = (
            select(Investment, Investor)
            .join(Investor, Investor.id == Investment.investor_id)
            .where(Investment.fund_id == fund_id)
            .order_by(
                Investment.amount_usd.desc(),
                Investment.investment_date.asc(),
                Investment.id.asc(),
            )
        )

        return [
            InvestmentPosition(
                investor_id=investor.id,
                investor_name=investor.name,
                investor_type=investor.investor_type,
                amount=float(investment.amount_usd),
            )
            for investment, investor in session.exec(stmt).all()
        ]

    @staticmethod
    def create(session: Session, fund_id: UUID, investment_in: InvestmentCreate) -> Investment:
        """Create a new investment into a fund.

        Args:
            session: Database session
            fund_id: Fund UUID (from the request path)
            investment_in: Validated input

        Returns:
            Created investment with generated id

        Raises:
            ReferentialError: If the fund or the investor does not exist
        """
        investment = Investment(fund_id=fund_id, **investment_in.model_dump())

        with translate_db_errors(session):
            session.add(investment)
            session.commit()
        session.refresh(investment)

        return investment
