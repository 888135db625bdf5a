"""Domain operations for Investor model - Shared CRUD operations."""

from typing import Optional, List
from sqlmodel import Session, select
from private_markets.db.errors import translate_db_errors
from private_markets.models import Investor, InvestorCreate


class InvestorOperations:
    """Core CRUD operations for Investor model.

    Investors are created once and never modified through the API.
    """

    @staticmethod
    def get_all(session: Session) -> List[Investor]:
        """Get every investor, newest first."""
        stmt = select(Investor).order_by(Investor.created_at.desc())
        return list(session.exec(stmt).all())

    @staticmethod
    def get_by_email(session: Session, email: str) -> Optional[Investor]:
        stmt = select(Investor).where(Investor.email == email)
        return session.exec(stmt).first()

    @staticmethod
    def create(session: Session, investor_in: InvestorCreate) -> Investor:
        """Create a new investor.

        Args:
            session: Database session
            investor_in: Validated input

        Returns:
            Created investor with generated id and created_at

        Raises:
            ConflictError: If the email already belongs to an investor
        """
        investor = Investor.model_validate(investor_in)

        with translate_db_errors(session):
            session.add(investor)
            session.commit()
        session.refresh(investor)

        return investor
