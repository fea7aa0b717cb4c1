from enum import Enum

from sqlalchemy import Enum as SAEnum


class CaseType(str, Enum):
    CIVIL = "CIVIL"
    CRIMINAL = "CRIMINAL"
    FAMILY = "FAMILY"
    CORPORATE = "CORPORATE"
    OTHER = "OTHER"


class CaseStatus(str, Enum):
    NEW = "NEW"
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    CLOSED = "CLOSED"
    ARCHIVED = "ARCHIVED"


class HearingStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    POSTPONED = "POSTPONED"
    CANCELLED = "CANCELLED"


class DocumentType(str, Enum):
    CONTRACT = "CONTRACT"
    EVIDENCE = "EVIDENCE"
    PETITION = "PETITION"
    COURT_ORDER = "COURT_ORDER"
    OTHER = "OTHER"


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    LAWYER = "LAWYER"
    ASSISTANT = "ASSISTANT"
    VIEWER = "VIEWER"


def enum_column_type(enum_cls: type[Enum], name: str) -> SAEnum:
    """VARCHAR column with a named CHECK constraint instead of a native enum type."""
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=20,
        validate_strings=True,
    )
