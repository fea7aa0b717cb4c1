from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator, ValidationInfo

from legalcase.db.models.enums import CaseStatus, CaseType
from .common import blank_to_none, reject_null


class CaseBase(BaseModel):
    case_number: Optional[str] = None
    title: str
    case_type: CaseType
    description: Optional[str] = None

    @field_validator("case_number")
    @classmethod
    def _normalize_case_number(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)


class CaseCreate(CaseBase):
    pass


class CaseUpdate(BaseModel):
    case_number: Optional[str] = None
    title: Optional[str] = None
    case_type: Optional[CaseType] = None
    description: Optional[str] = None
    status: Optional[CaseStatus] = None

    @field_validator("title", "case_type", "status")
    @classmethod
    def _required(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)

    @field_validator("case_number")
    @classmethod
    def _normalize_case_number(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)


class Case(CaseBase):
    id: int
    status: CaseStatus
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CaseClientLink(BaseModel):
    id: int
    case_id: int
    client_id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
