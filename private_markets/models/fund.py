"""Fund model - Pooled investment vehicles with a fundraising target."""

from decimal import Decimal
from uuid import UUID
from sqlmodel import SQLModel, Field
from sqlalchemy import CheckConstraint
from .enums import FundStatus, check_in
from .mixins import UUIDMixin, CreatedAtMixin


class FundBase(SQLModel):
    """Fields supplied by clients on create and update."""

    name: str = Field(nullable=False)
    vintage_year: int = Field(nullable=False)
    target_size_usd: Decimal = Field(max_digits=15, decimal_places=2, nullable=False)
    status: str = Field(nullable=False)  # Fundraising, Investing, Closed


class Fund(FundBase, UUIDMixin, CreatedAtMixin, table=True):
    """Pooled investment vehicle with a fundraising target and status."""

    __tablename__ = "fund"

    __table_args__ = (
        CheckConstraint("vintage_year >= 1900 AND vintage_year <= 2100", name="check_fund_vintage_year"),
        CheckConstraint("target_size_usd >= 0", name="check_fund_target_size_positive"),
        CheckConstraint(check_in("status", FundStatus), name="check_fund_status"),
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "5b0d4b8e-3f4e-4c55-9d1f-0e0d7f1c2a11",
                "name": "Growth Fund I",
                "vintage_year": 2024,
                "target_size_usd": "250000000.00",
                "status": "Fundraising",
                "created_at": "2024-01-15T10:30:00Z",
            }
        }


class FundCreate(FundBase):
    """Input schema for POST /funds."""

    pass


class FundUpdate(FundBase):
    """Input schema for PUT /funds (full record, id in body)."""

    id: UUID
