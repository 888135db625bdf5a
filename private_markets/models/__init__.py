"""SQLModel exports for all database tables and input schemas."""

from .enums import FundStatus, InvestorType
from .fund import Fund, FundCreate, FundUpdate
from .investor import Investor, InvestorCreate
from .investment import Investment, InvestmentCreate, InvestmentPosition

__all__ = [
    # Enumerations
    "FundStatus",
    "InvestorType",
    # Tables
    "Fund",
    "Investor",
    "Investment",
    # Input schemas
    "FundCreate",
    "FundUpdate",
    "InvestorCreate",
    "InvestmentCreate",
    # Read models
    "InvestmentPosition",
]
