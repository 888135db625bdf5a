"""Investor model - Individuals, institutions and family offices committing capital."""

from sqlmodel import SQLModel, Field
from sqlalchemy import CheckConstraint
from .enums import InvestorType, check_in
from .mixins import UUIDMixin, CreatedAtMixin


class InvestorBase(SQLModel):
    name: str = Field(nullable=False)
    investor_type: str = Field(nullable=False)  # Individual, Institution, Family Office
    email: str = Field(unique=True, nullable=False, index=True)


class Investor(InvestorBase, UUIDMixin, CreatedAtMixin, table=True):
    """Entity that commits capital to funds. Immutable once created."""

    __tablename__ = "investor"

    __table_args__ = (
        CheckConstraint(check_in("investor_type", InvestorType), name="check_investor_type"),
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "CalPERS",
                "investor_type": "Institution",
                "email": "privateequity@calpers.ca.gov",
            }
        }


class InvestorCreate(InvestorBase):
    """Input schema for POST /investors."""

    pass
