"""Fund analytics: utilization, investor concentration and fee allocation."""

from .aggregator import (
    MANAGEMENT_FEE_RATE,
    FeeAllocation,
    FeeDistribution,
    FundAnalytics,
    InvestorTypeBreakdown,
    TopInvestor,
    allocate_management_fees,
    compute_fund_analytics,
)
from .service import FundAnalyticsService

__all__ = [
    "MANAGEMENT_FEE_RATE",
    "FeeAllocation",
    "FeeDistribution",
    "FundAnalytics",
    "InvestorTypeBreakdown",
    "TopInvestor",
    "allocate_management_fees",
    "compute_fund_analytics",
    "FundAnalyticsService",
]
