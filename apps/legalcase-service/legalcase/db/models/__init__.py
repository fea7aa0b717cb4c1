"""
Domain-split SQLAlchemy models with a single import surface.

Exposes `Base`, `now_utc`, the enumerations, and all ORM classes.
"""

from .base import Base, TimestampMixin, now_utc  # re-export
from .enums import CaseStatus, CaseType, DocumentType, HearingStatus, UserRole

# Domain models
from .users import User
from .clients import Client
from .cases import Case, CaseClient
from .hearings import Hearing
from .documents import Document

__all__ = [
    # base
    "Base",
    "TimestampMixin",
    "now_utc",
    # enums
    "CaseStatus",
    "CaseType",
    "DocumentType",
    "HearingStatus",
    "UserRole",
    # entities
    "User",
    "Client",
    "Case",
    "CaseClient",
    "Hearing",
    "Document",
]
