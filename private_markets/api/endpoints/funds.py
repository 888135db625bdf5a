from typing import Any, Dict, List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session

from private_markets.api.deps import get_session, parse_input, validated
from private_markets.domain import FundOperations
from private_markets.models import Fund, FundCreate, FundUpdate
from private_markets.validation import rules

router = APIRouter()


@router.get("", response_model=List[Fund])
def list_funds(session: Session = Depends(get_session)):
    return FundOperations.get_all(session)


@router.get("/{id}", response_model=Fund)
def get_fund(
    data: Dict[str, Any] = Depends(validated(rules.FUND_ID_PATH)),
    session: Session = Depends(get_session),
):
    return FundOperations.get_or_404(session, UUID(data["id"]))


@router.post("", response_model=Fund, status_code=201)
def create_fund(
    data: Dict[str, Any] = Depends(validated(rules.CREATE_FUND)),
    session: Session = Depends(get_session),
):
    fund_in = parse_input(FundCreate, data)
    return FundOperations.create(session, fund_in)


@router.put("", response_model=Fund)
def update_fund(
    data: Dict[str, Any] = Depends(validated(rules.UPDATE_FUND)),
    session: Session = Depends(get_session),
):
    fund_in = parse_input(FundUpdate, data)
    return FundOperations.update(session, fund_in)
