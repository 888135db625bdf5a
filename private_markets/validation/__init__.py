"""Declarative input validation used by every write endpoint."""

from .engine import FieldRule, ValidationResult, check, validate

__all__ = [
    "FieldRule",
    "ValidationResult",
    "check",
    "validate",
]
