"""Investments are nested under /funds/{fund_id}/investments."""

from typing import Any, Dict, List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session

from private_markets.api.deps import get_session, parse_input, validated
from private_markets.domain import InvestmentOperations
from private_markets.models import Investment, InvestmentCreate
from private_markets.validation import rules

router = APIRouter()


@router.get("/{fund_id}/investments", response_model=List[Investment])
def list_fund_investments(
    data: Dict[str, Any] = Depends(validated(rules.FUND_ID_PARAM)),
    session: Session = Depends(get_session),
):
    return InvestmentOperations.get_by_fund(session, UUID(data["fund_id"]))


@router.post("/{fund_id}/investments", response_model=Investment, status_code=201)
def create_investment(
    data: Dict[str, Any] = Depends(validated(rules.CREATE_INVESTMENT)),
    session: Session = Depends(get_session),
):
    investment_in = parse_input(InvestmentCreate, data)
    return InvestmentOperations.create(session, UUID(data["fund_id"]), investment_in)
