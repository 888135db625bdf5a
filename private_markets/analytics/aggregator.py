"""Fund analytics - Derived statistics over a fund's investments.

Pure computation: takes a fund's target size and its positions (investments
joined with investor name and type, in gateway order) and produces the
analytics record. Loading happens in service.py.

Conventions:
- Sums and ratios use float arithmetic, summed in gateway order.
- Reported percentages and averages are rounded half-up to 2 decimals.
- Any ratio whose denominator is zero is reported as 0.
- Fee allocation uses Decimal so the allocated fees add up to the total
  management fee exactly; the rounding remainder goes to the largest holder.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Sequence, Tuple, Union
from uuid import UUID

from pydantic import BaseModel

from private_markets.models import InvestmentPosition

MANAGEMENT_FEE_RATE = Decimal("0.02")
TOP_INVESTOR_LIMIT = 5

CENT = Decimal("0.01")


# =============================================================================
# Response Models
# =============================================================================


class TopInvestor(BaseModel):
    investor_id: UUID
    investor_name: str
    total_invested: float
    percentage: float
    rank: int


class InvestorTypeBreakdown(BaseModel):
    count: int
    total: float
    percentage: float


class FeeAllocation(BaseModel):
    investor_id: UUID
    investor_name: str
    fee: float
    percentage: float


class FeeDistribution(BaseModel):
    total_management_fee: float
    by_investor: List[FeeAllocation]


class FundAnalytics(BaseModel):
    """Analytics record returned by GET /funds/{fund_id}/analytics."""

    fund_id: UUID
    total_raised: float
    target_size: float
    utilization_pct: float
    investor_count: int
    average_investment: float
    top_investors: List[TopInvestor]
    by_investor_type: Dict[str, InvestorTypeBreakdown]
    fee_distribution: FeeDistribution


# =============================================================================
# Arithmetic Helpers
# =============================================================================


def to_decimal(value: Union[float, int, Decimal]) -> Decimal:
    """Exact decimal for the shortest repr of a float (0.1 -> Decimal('0.1'))."""
    if isinstance(value, Decimal):
        return value
    return Decimal(repr(value))


def round_half_up(value: Union[float, Decimal], places: int = 2) -> float:
    """Round half away from zero at the given decimal place."""
    quantum = Decimal(1).scaleb(-places)
    return float(to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def percentage_of(part: float, whole: float) -> float:
    """part / whole * 100 rounded to 2 decimals; 0 when whole is 0."""
    if not whole:
        return 0.0
    return round_half_up(part / whole * 100)


# =============================================================================
# Aggregation Steps
# =============================================================================


def aggregate_by_investor(
    positions: Sequence[InvestmentPosition],
) -> List[Tuple[InvestmentPosition, float]]:
    """Sum amounts per investor, ranked by amount descending.

    Investors keep their first-seen gateway order before ranking, and the sort
    is stable, so ties keep that order.

    Returns:
        List of (first position seen for the investor, total amount)
    """
    totals: Dict[UUID, list] = {}
    for position in positions:
        entry = totals.get(position.investor_id)
        if entry is None:
            totals[position.investor_id] = [position, position.amount]
        else:
            entry[1] += position.amount

    ranked = [(position, total) for position, total in totals.values()]
    ranked.sort(key=lambda item: item[1], reverse=True)
    return ranked


def breakdown_by_investor_type(
    positions: Sequence[InvestmentPosition], total_raised: float
) -> Dict[str, InvestorTypeBreakdown]:
    """Count and total investments per investor type."""
    grouped: Dict[str, list] = {}
    for position in positions:
        entry = grouped.setdefault(position.investor_type, [0, 0.0])
        entry[0] += 1
        entry[1] += position.amount

    return {
        investor_type: InvestorTypeBreakdown(
            count=count,
            total=total,
            percentage=percentage_of(total, total_raised),
        )
        for investor_type, (count, total) in grouped.items()
    }


def rank_top_investors(
    ranked: Sequence[Tuple[InvestmentPosition, float]],
    total_raised: float,
    limit: int = TOP_INVESTOR_LIMIT,
) -> List[TopInvestor]:
    return [
        TopInvestor(
            investor_id=position.investor_id,
            investor_name=position.investor_name,
            total_invested=amount,
            percentage=percentage_of(amount, total_raised),
            rank=index + 1,
        )
        for index, (position, amount) in enumerate(ranked[:limit])
    ]


def management_fee(total_raised: float) -> Decimal:
    """Total management fee at the fixed rate, rounded to cents."""
    return (to_decimal(total_raised) * MANAGEMENT_FEE_RATE).quantize(CENT, rounding=ROUND_HALF_UP)


def allocate_management_fees(
    total_fee: Decimal,
    ranked: Sequence[Tuple[InvestmentPosition, float]],
) -> List[FeeAllocation]:
    """Split the management fee across investors in proportion to their amounts.

    Each share is rounded half-up to cents. Whatever the rounding leaves over
    (positive or negative) is added to the first, i.e. largest, holder, so the
    allocated fees always sum to total_fee.

    Args:
        total_fee: Total fee, already rounded to cents
        ranked: (position, amount) per investor, largest first

    Returns:
        One FeeAllocation per investor, in the order given
    """
    if not ranked:
        return []

    amounts = [to_decimal(amount) for _, amount in ranked]
    total = sum(amounts, Decimal(0))

    if total == 0:
        fees = [Decimal(0) for _ in amounts]
    else:
        fees = [(total_fee * amount / total).quantize(CENT, rounding=ROUND_HALF_UP) for amount in amounts]
        fees[0] += total_fee - sum(fees, Decimal(0))

    return [
        FeeAllocation(
            investor_id=position.investor_id,
            investor_name=position.investor_name,
            fee=float(fee),
            percentage=percentage_of(float(amount), float(total)),
        )
        for (position, _), amount, fee in zip(ranked, amounts, fees)
    ]


# =============================================================================
# Entry Point
# =============================================================================


def compute_fund_analytics(
    fund_id: UUID,
    target_size: Union[float, Decimal],
    positions: Sequence[InvestmentPosition],
) -> FundAnalytics:
    """Compute the analytics record for one fund.

    Args:
        fund_id: Fund UUID (echoed in the result)
        target_size: Fund target size in USD
        positions: Fund investments with investor details, in gateway order

    Returns:
        FundAnalytics
    """
    target = float(target_size)
    investment_count = len(positions)

    total_raised = 0.0
    for position in positions:
        total_raised += position.amount

    average = total_raised / investment_count if investment_count else 0.0

    ranked = aggregate_by_investor(positions)
    total_fee = management_fee(total_raised)

    return FundAnalytics(
        fund_id=fund_id,
        total_raised=total_raised,
        target_size=target,
        utilization_pct=percentage_of(total_raised, target),
        investor_count=investment_count,
        average_investment=round_half_up(average),
        top_investors=rank_top_investors(ranked, total_raised),
        by_investor_type=breakdown_by_investor_type(positions, total_raised),
        fee_distribution=FeeDistribution(
            total_management_fee=float(total_fee),
            by_investor=allocate_management_fees(total_fee, ranked),
        ),
    )
