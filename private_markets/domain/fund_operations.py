"""Domain operations for Fund model - Shared CRUD operations."""

from typing import Optional, List
from uuid import UUID
from sqlmodel import Session, select
from private_markets.core.errors import NotFoundError
from private_markets.db.errors import translate_db_errors
from private_markets.models import Fund, FundCreate, FundUpdate


class FundOperations:
    """Core CRUD operations for Fund model.

    Keep this class focused on data access only - no business logic.
    Funds are never deleted through these operations.
    """

    @staticmethod
    def get_all(session: Session) -> List[Fund]:
        """Get every fund, newest first.

        Args:
            session: Database session

        Returns:
            List of funds ordered by created_at descending
        """
        stmt = select(Fund).order_by(Fund.created_at.desc())
        return list(session.exec(stmt).all())

    @staticmethod
    def get_by_id(session: Session, fund_id: UUID) -> Optional[Fund]:
        """Get fund by UUID.

        Args:
            session: Database session
            fund_id: Fund UUID

        Returns:
            Fund if found, None otherwise
        """
        return session.get(Fund, fund_id)

    @staticmethod
    def get_or_404(session: Session, fund_id: UUID) -> Fund:
        """Get fund by UUID or fail.

        Raises:
            NotFoundError: If no fund has this id
        """
        fund = FundOperations.get_by_id(session, fund_id)
        if fund is None:
            raise NotFoundError("Fund not found")
        return fund

    @staticmethod
    def create(session: Session, fund_in: FundCreate) -> Fund:
        """Create a new fund.

        Args:
            session: Database session
            fund_in: Validated input

        Returns:
            Created fund with generated id and created_at

        Raises:
            InvalidDataError: If the datastore rejects a value
        """
        fund = Fund.model_validate(fund_in)

        with translate_db_errors(session):
            session.add(fund)
            session.commit()
        session.refresh(fund)

        return fund

    @staticmethod
    def update(session: Session, fund_in: FundUpdate) -> Fund:
        """Replace every client-editable field of an existing fund.

        Args:
            session: Database session
            fund_in: Full record including the id of the fund to update

        Returns:
            Updated fund

        Raises:
            NotFoundError: If the fund does not exist (nothing is written)
            InvalidDataError: If the datastore rejects a value
        """
        fund = FundOperations.get_or_404(session, fund_in.id)

        fund.sqlmodel_update(fund_in.model_dump(exclude={"id"}))

        with translate_db_errors(session):
            session.add(fund)
            session.commit()
        session.refresh(fund)

        return fund
