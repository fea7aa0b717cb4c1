"""
Domain-split Pydantic schemas with a single import surface.
"""

from .clients import ClientBase, ClientCreate, ClientUpdate, Client
from .cases import CaseBase, CaseCreate, CaseUpdate, Case, CaseClientLink
from .hearings import HearingBase, HearingCreate, HearingUpdate, Hearing, normalize_hearing_date, to_wall_clock
from .documents import DocumentBase, DocumentCreate, DocumentUpdate, Document
from .users import UserBase, UserCreate, UserUpdate, User

__all__ = [
    "ClientBase",
    "ClientCreate",
    "ClientUpdate",
    "Client",
    "CaseBase",
    "CaseCreate",
    "CaseUpdate",
    "Case",
    "CaseClientLink",
    "HearingBase",
    "HearingCreate",
    "HearingUpdate",
    "Hearing",
    "normalize_hearing_date",
    "to_wall_clock",
    "DocumentBase",
    "DocumentCreate",
    "DocumentUpdate",
    "Document",
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "User",
]
