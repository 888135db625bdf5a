from typing import Any, Dict
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlmodel import Session

from private_markets.analytics import FundAnalytics, FundAnalyticsService
from private_markets.api.deps import get_session, validated
from private_markets.validation import rules

router = APIRouter()


@router.get("/{fund_id}/analytics", response_model=FundAnalytics)
def get_fund_analytics(
    data: Dict[str, Any] = Depends(validated(rules.FUND_ID_PARAM)),
    session: Session = Depends(get_session),
):
    return FundAnalyticsService.get_fund_analytics(session, UUID(data["fund_id"]))
