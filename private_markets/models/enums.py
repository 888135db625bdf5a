"""Enumerations shared by models, validation rules and analytics."""

from enum import Enum


class FundStatus(str, Enum):
    FUNDRAISING = "Fundraising"
    INVESTING = "Investing"
    CLOSED = "Closed"


class InvestorType(str, Enum):
    INDIVIDUAL = "Individual"
    INSTITUTION = "Institution"
    FAMILY_OFFICE = "Family Office"


def enum_values(enum_cls) -> list:
    """Plain string values of an enum, in declaration order."""
    return [member.value for member in enum_cls]


def check_in(column: str, enum_cls) -> str:
    """SQL CHECK expression restricting a column to the enum's values."""
    quoted = ", ".join("'" + value + "'" for value in enum_values(enum_cls))
    return f"{column} IN ({quoted})"
