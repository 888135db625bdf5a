"""Unit tests for the fund analytics aggregator (no database)."""

from decimal import Decimal
from uuid import uuid4

import pytest

from private_markets.analytics import allocate_management_fees, compute_fund_analytics
from private_markets.analytics.aggregator import (
    aggregate_by_investor,
    management_fee,
    round_half_up,
)
from private_markets.models import InvestmentPosition


def position(name, amount, investor_type="Institution", investor_id=None):
    return InvestmentPosition(
        investor_id=investor_id or uuid4(),
        investor_name=name,
        investor_type=investor_type,
        amount=float(amount),
    )


class TestRounding:
    @pytest.mark.parametrize(
        "value, expected",
        [(1.005, 1.01), (2.675, 2.68), (0.125, 0.13), (33.333333, 33.33), (30.0, 30.0)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


def test_utilization_for_75m_of_250m_is_30():
    result = compute_fund_analytics(uuid4(), Decimal("250000000.00"), [position("CalPERS", 75_000_000)])
    assert result.total_raised == 75_000_000
    assert result.utilization_pct == 30.00


def test_zero_investments_are_defined_not_nan():
    fund_id = uuid4()
    result = compute_fund_analytics(fund_id, 100_000_000, [])

    assert result.fund_id == fund_id
    assert result.total_raised == 0
    assert result.utilization_pct == 0
    assert result.investor_count == 0
    assert result.average_investment == 0
    assert result.by_investor_type == {}
    assert result.top_investors == []
    assert result.fee_distribution.total_management_fee == 0
    assert result.fee_distribution.by_investor == []


def test_zero_target_size_reports_zero_utilization():
    result = compute_fund_analytics(uuid4(), 0, [position("A", 10)])
    assert result.utilization_pct == 0


def test_zero_amount_investments_give_zero_percentages():
    result = compute_fund_analytics(uuid4(), 100, [position("A", 0), position("B", 0, "Individual")])

    assert result.investor_count == 2
    assert result.average_investment == 0
    assert result.by_investor_type["Institution"].percentage == 0
    assert [entry.percentage for entry in result.top_investors] == [0, 0]
    assert [entry.fee for entry in result.fee_distribution.by_investor] == [0, 0]


def test_metrics_for_seeded_growth_fund():
    gsam = position("Goldman Sachs Asset Management", 50_000_000)
    calpers = position("CalPERS", 75_000_000)
    result = compute_fund_analytics(uuid4(), 250_000_000, [calpers, gsam])

    assert result.total_raised == 125_000_000
    assert result.target_size == 250_000_000
    assert result.utilization_pct == 50.0
    assert result.investor_count == 2
    assert result.average_investment == 62_500_000
    assert result.by_investor_type["Institution"].model_dump() == {
        "count": 2,
        "total": 125_000_000,
        "percentage": 100.0,
    }
    assert [t.investor_name for t in result.top_investors] == ["CalPERS", "Goldman Sachs Asset Management"]
    assert [t.percentage for t in result.top_investors] == [60.0, 40.0]
    assert result.fee_distribution.total_management_fee == 2_500_000
    assert [f.fee for f in result.fee_distribution.by_investor] == [1_500_000, 1_000_000]


def test_by_investor_type_counts_investments_per_type():
    positions = [
        position("Inst", 600, "Institution"),
        position("Family", 300, "Family Office"),
        position("Person", 100, "Individual"),
        position("Person 2", 100, "Individual"),
    ]
    breakdown = compute_fund_analytics(uuid4(), 10_000, positions).by_investor_type

    assert set(breakdown) == {"Institution", "Family Office", "Individual"}
    assert breakdown["Individual"].count == 2
    assert breakdown["Individual"].total == 200
    assert breakdown["Individual"].percentage == round_half_up(200 / 1100 * 100)
    assert breakdown["Family Office"].percentage == 27.27


def test_top_investors_sorted_limited_and_ranked():
    positions = [position(f"Investor {i}", amount) for i, amount in enumerate([10, 70, 30, 50, 20, 60, 40])]
    top = compute_fund_analytics(uuid4(), 1_000, positions).top_investors

    assert len(top) == 5
    assert [entry.total_invested for entry in top] == [70, 60, 50, 40, 30]
    assert [entry.rank for entry in top] == [1, 2, 3, 4, 5]


def test_top_investor_ties_keep_gateway_order():
    positions = [position("First", 100), position("Second", 100), position("Third", 100)]
    top = compute_fund_analytics(uuid4(), 1_000, positions).top_investors
    assert [entry.investor_name for entry in top] == ["First", "Second", "Third"]


def test_amounts_are_aggregated_per_investor():
    investor_id = uuid4()
    positions = [
        position("Big Single", 80),
        position("Repeat", 50, investor_id=investor_id),
        position("Repeat", 40, investor_id=investor_id),
    ]
    ranked = aggregate_by_investor(positions)

    assert [(p.investor_name, amount) for p, amount in ranked] == [("Repeat", 90), ("Big Single", 80)]

    result = compute_fund_analytics(uuid4(), 1_000, positions)
    # investor_count is the number of investments, not distinct investors
    assert result.investor_count == 3
    assert len(result.top_investors) == 2
    assert result.top_investors[0].investor_id == investor_id


class TestFeeAllocation:
    def test_management_fee_is_two_percent(self):
        assert management_fee(75_000_000) == Decimal("1500000.00")
        assert management_fee(1234.56) == Decimal("24.69")

    def test_fees_sum_to_total_with_remainder_on_largest_holder(self):
        positions = [position("A", 100), position("B", 100), position("C", 100)]
        ranked = aggregate_by_investor(positions)
        allocations = allocate_management_fees(Decimal("1.00"), ranked)

        # 1.00 / 3 = 0.33 each, leaving 0.01 for the first (largest) holder
        assert [a.fee for a in allocations] == [0.34, 0.33, 0.33]
        assert [a.percentage for a in allocations] == [33.33, 33.33, 33.33]

    @pytest.mark.parametrize(
        "amounts",
        [
            [1_000_000.01, 2_333_333.33, 17.17, 999.99],
            [33_333_333.33, 33_333_333.33, 33_333_333.34],
            [0.01, 0.01, 0.01, 0.01, 0.01, 0.01, 0.01],
            [123_456_789.12],
        ],
    )
    def test_sum_matches_total_management_fee(self, amounts):
        positions = [position(f"Investor {i}", amount) for i, amount in enumerate(amounts)]
        result = compute_fund_analytics(uuid4(), 500_000_000, positions)
        distribution = result.fee_distribution

        total = sum(Decimal(repr(entry.fee)) for entry in distribution.by_investor)
        assert abs(float(total) - distribution.total_management_fee) < 0.01
        assert abs(distribution.total_management_fee - result.total_raised * 0.02) < 0.01

    def test_every_investor_gets_an_allocation(self):
        positions = [position(f"Investor {i}", 10 + i) for i in range(8)]
        result = compute_fund_analytics(uuid4(), 1_000, positions)

        assert len(result.top_investors) == 5
        assert len(result.fee_distribution.by_investor) == 8
        assert result.fee_distribution.by_investor[0].investor_name == "Investor 7"

    def test_no_investors_no_allocations(self):
        assert allocate_management_fees(Decimal("0.00"), []) == []
