"""Domain operations against a real SQLite database, without HTTP."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from private_markets.core.errors import (
    ConflictError,
    DestructiveOperationError,
    InvalidDataError,
    NotFoundError,
    ReferentialError,
)
from private_markets.db import Database, clear_all_tables
from private_markets.domain import FundOperations, InvestmentOperations, InvestorOperations
from private_markets.models import FundCreate, FundUpdate, InvestmentCreate, InvestorCreate


def make_fund(session, **overrides):
    data = {"name": "Growth Fund I", "vintage_year": 2024, "target_size_usd": Decimal("250000000"), "status": "Fundraising"}
    data.update(overrides)
    return FundOperations.create(session, FundCreate(**data))


def make_investor(session, email="investments@gsam.com", investor_type="Institution"):
    return InvestorOperations.create(
        session, InvestorCreate(name="Goldman Sachs Asset Management", investor_type=investor_type, email=email)
    )


def test_fund_create_and_get(session):
    fund = make_fund(session)

    assert fund.id is not None
    assert fund.created_at is not None
    assert FundOperations.get_by_id(session, fund.id) == fund


def test_get_or_404_raises_not_found(session):
    with pytest.raises(NotFoundError, match="Fund not found"):
        FundOperations.get_or_404(session, uuid4())


def test_update_nonexistent_fund_writes_nothing(session):
    fund = make_fund(session)

    with pytest.raises(NotFoundError):
        FundOperations.update(
            session,
            FundUpdate(id=uuid4(), name="Ghost", vintage_year=2020, target_size_usd=Decimal("1"), status="Closed"),
        )

    assert [f.name for f in FundOperations.get_all(session)] == [fund.name]


def test_check_constraint_is_translated(session):
    with pytest.raises(InvalidDataError, match="Invalid data provided"):
        make_fund(session, status="Paused")

    # Session is usable again after the rollback
    assert FundOperations.get_all(session) == []


def test_duplicate_email_is_conflict(session):
    make_investor(session)

    with pytest.raises(ConflictError):
        make_investor(session)

    assert len(InvestorOperations.get_all(session)) == 1


def test_investment_with_missing_investor_is_referential_error(session):
    fund = make_fund(session)

    with pytest.raises(ReferentialError):
        InvestmentOperations.create(
            session,
            fund.id,
            InvestmentCreate(investor_id=uuid4(), amount_usd=Decimal("10"), investment_date=date(2024, 1, 1)),
        )

    assert InvestmentOperations.get_by_fund(session, fund.id) == []


def test_positions_are_in_gateway_order(session):
    fund = make_fund(session)
    small = make_investor(session, email="small@example.com", investor_type="Individual")
    large = make_investor(session, email="large@example.com")

    for investor, amount, day in [(small, "10", 3), (large, "500", 2), (small, "500", 1)]:
        InvestmentOperations.create(
            session,
            fund.id,
            InvestmentCreate(investor_id=investor.id, amount_usd=Decimal(amount), investment_date=date(2024, 1, day)),
        )

    positions = InvestmentOperations.get_positions_for_fund(session, fund.id)

    # Amount descending, then earlier investment date first
    assert [(p.investor_id, p.amount) for p in positions] == [
        (small.id, 500.0),
        (large.id, 500.0),
        (small.id, 10.0),
    ]
    assert positions[0].investor_type == "Individual"


def test_clear_all_tables_requires_capability(settings):
    database = Database(settings.DATABASE_URL, allow_destructive=False)
    try:
        with pytest.raises(DestructiveOperationError):
            clear_all_tables(database)
    finally:
        database.close()


def test_clear_all_tables(database, session):
    fund = make_fund(session)
    investor = make_investor(session)
    InvestmentOperations.create(
        session,
        fund.id,
        InvestmentCreate(investor_id=investor.id, amount_usd=Decimal("1"), investment_date=date(2024, 1, 1)),
    )

    clear_all_tables(database)

    assert FundOperations.get_all(session) == []
    assert InvestorOperations.get_all(session) == []
