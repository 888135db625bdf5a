"""Declarative field-rule validation.

A rule set is an ordered list of FieldRule. Validating a record checks every
rule and collects every message, so clients see all problems at once. The
engine is a pure function of (rules, record); it never touches the datastore.
"""

import math
import re
from dataclasses import dataclass, field as dataclass_field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, List, Literal, Mapping, Optional, Sequence, Union

from private_markets.core.errors import ValidationError

FieldType = Literal["string", "number", "email", "date", "uuid"]

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

Number = Union[int, float]


@dataclass(frozen=True)
class FieldRule:
    """Constraints for one input field."""

    field: str
    required: bool = False
    type: Optional[FieldType] = None
    min: Optional[Number] = None
    max: Optional[Number] = None
    enum: Optional[Sequence[Any]] = None


@dataclass
class ValidationResult:
    errors: List[str] = dataclass_field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def is_missing(value: Any) -> bool:
    return value is None or value == ""


def _format_bound(bound: Number) -> str:
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


def to_number(value: Any) -> Optional[float]:
    """Coerce a value to a finite float, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, Decimal, str)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        # OverflowError: ints beyond float range
        return None
    return number if math.isfinite(number) else None


def is_valid_date(value: Any) -> bool:
    """True for ISO calendar dates ('2024-06-15') and ISO datetimes."""
    if isinstance(value, (date, datetime)):
        return True
    if not isinstance(value, str):
        return False
    try:
        date.fromisoformat(value)
        return True
    except ValueError:
        pass
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


def _check_type(rule: FieldRule, value: Any) -> List[str]:
    name = rule.field

    if rule.type == "string":
        if not isinstance(value, str):
            return [f"{name} must be a string"]

    elif rule.type == "number":
        number = to_number(value)
        if number is None:
            return [f"{name} must be a number"]
        if rule.min is not None and number < rule.min:
            return [f"{name} must be at least {_format_bound(rule.min)}"]
        if rule.max is not None and number > rule.max:
            return [f"{name} must be at most {_format_bound(rule.max)}"]

    elif rule.type == "email":
        if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
            return [f"{name} must be a valid email address"]

    elif rule.type == "date":
        if not is_valid_date(value):
            return [f"{name} must be a valid date (YYYY-MM-DD)"]

    elif rule.type == "uuid":
        if not isinstance(value, str) or not UUID_PATTERN.fullmatch(value):
            return [f"{name} must be a valid UUID"]

    return []


def validate(rules: Iterable[FieldRule], data: Mapping[str, Any]) -> ValidationResult:
    """Check a record against rules, collecting every violation in rule order.

    Args:
        rules: Ordered field rules
        data: Merged input record (body fields overlaid by path parameters)

    Returns:
        ValidationResult whose errors list is empty when the record is valid
    """
    errors: List[str] = []

    for rule in rules:
        value = data.get(rule.field)

        if is_missing(value):
            if rule.required:
                errors.append(f"{rule.field} is required")
            continue

        errors.extend(_check_type(rule, value))

        # Enum membership is checked independently of the type check
        if rule.enum is not None and value not in rule.enum:
            allowed = ", ".join(str(option) for option in rule.enum)
            errors.append(f"{rule.field} must be one of: {allowed}")

    return ValidationResult(errors)


def check(rules: Iterable[FieldRule], data: Mapping[str, Any]) -> None:
    """Validate and raise if anything failed.

    Raises:
        ValidationError: Carrying every message, in field-declaration order
    """
    result = validate(rules, data)
    if not result.ok:
        raise ValidationError("Validation failed", result.errors)
