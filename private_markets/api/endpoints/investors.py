from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from private_markets.api.deps import get_session, parse_input, validated
from private_markets.domain import InvestorOperations
from private_markets.models import Investor, InvestorCreate
from private_markets.validation import rules

router = APIRouter()


@router.get("", response_model=List[Investor])
def list_investors(session: Session = Depends(get_session)):
    return InvestorOperations.get_all(session)


@router.post("", response_model=Investor, status_code=201)
def create_investor(
    data: Dict[str, Any] = Depends(validated(rules.CREATE_INVESTOR)),
    session: Session = Depends(get_session),
):
    investor_in = parse_input(InvestorCreate, data)
    return InvestorOperations.create(session, investor_in)
