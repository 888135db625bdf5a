"""Rule sets for each endpoint that accepts input."""

from private_markets.models.enums import FundStatus, InvestorType, enum_values
from .engine import FieldRule

FUND_STATUSES = enum_values(FundStatus)
INVESTOR_TYPES = enum_values(InvestorType)

FUND_ID_PATH = [FieldRule("id", required=True, type="uuid")]

FUND_ID_PARAM = [FieldRule("fund_id", required=True, type="uuid")]

_FUND_FIELDS = [
    FieldRule("name", required=True, type="string"),
    FieldRule("vintage_year", required=True, type="number", min=1900, max=2100),
    FieldRule("target_size_usd", required=True, type="number", min=0),
    FieldRule("status", required=True, type="string", enum=FUND_STATUSES),
]

CREATE_FUND = list(_FUND_FIELDS)

UPDATE_FUND = [FieldRule("id", required=True, type="uuid")] + _FUND_FIELDS

CREATE_INVESTMENT = [
    FieldRule("fund_id", required=True, type="uuid"),
    FieldRule("investor_id", required=True, type="uuid"),
    FieldRule("amount_usd", required=True, type="number", min=0),
    FieldRule("investment_date", required=True, type="date"),
]

CREATE_INVESTOR = [
    FieldRule("name", required=True, type="string"),
    FieldRule("investor_type", required=True, type="string", enum=INVESTOR_TYPES),
    FieldRule("email", required=True, type="email"),
]
