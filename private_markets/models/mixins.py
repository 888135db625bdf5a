"""Reusable model mixins for database tables."""

from datetime import datetime, timezone
from uuid import UUID, uuid4
from sqlalchemy import DateTime
from sqlmodel import Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UUIDMixin:
    """Mixin for UUID primary key."""

    id: UUID = Field(default_factory=uuid4, primary_key=True)


class CreatedAtMixin:
    """Mixin for the creation timestamp used to order listings."""

    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        index=True,
        sa_type=DateTime(timezone=True),
    )
