"""
Shared SQLAlchemy base and helpers.
"""
from datetime import datetime, UTC

from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base

from legalcase.db.types import UTCDateTime


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


Base = declarative_base()


class TimestampMixin:
    """Integer identity plus audit timestamps shared by every table."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(UTCDateTime(), nullable=False, default=now_utc)
    updated_at = Column(UTCDateTime(), nullable=False, default=now_utc, onupdate=now_utc)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"
