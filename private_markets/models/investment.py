"""Investment model - Capital commitments linking an investor to a fund."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID
from sqlmodel import SQLModel, Field
from sqlalchemy import CheckConstraint, Index
from .mixins import UUIDMixin, CreatedAtMixin


class InvestmentCreate(SQLModel):
    """Input schema for POST /funds/{fund_id}/investments (fund comes from the path)."""

    investor_id: UUID
    amount_usd: Decimal = Field(max_digits=15, decimal_places=2)
    investment_date: date


class Investment(SQLModel, UUIDMixin, CreatedAtMixin, table=True):
    """Join record between Fund and Investor carrying amount and date."""

    __tablename__ = "investment"

    investor_id: UUID = Field(foreign_key="investor.id", nullable=False, index=True)
    fund_id: UUID = Field(foreign_key="fund.id", nullable=False, index=True)
    amount_usd: Decimal = Field(max_digits=15, decimal_places=2, nullable=False)
    investment_date: date = Field(nullable=False)

    __table_args__ = (
        CheckConstraint("amount_usd >= 0", name="check_investment_amount_positive"),
        # Analytics reads a fund's investments largest first
        Index("ix_investment_fund_amount", "fund_id", "amount_usd"),
    )

    class Config:
        json_schema_extra = {
            "example": {
                "investor_id": "0b9a3c52-77a6-4a8e-9a55-4c3f0c3e8e21",
                "amount_usd": "75000000.00",
                "investment_date": "2024-06-15",
            }
        }


@dataclass
class InvestmentPosition:
    """One investment joined with its investor's name and type."""

    investor_id: UUID
    investor_name: str
    investor_type: str
    amount: float
