from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator, ValidationInfo

from .common import blank_to_none, reject_null


class ClientBase(BaseModel):
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)


class ClientCreate(ClientBase):
    pass


class ClientUpdate(BaseModel):
    """Fields left unset are unchanged; fields set are overwritten."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def _required(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: Optional[str]) -> Optional[str]:
        return blank_to_none(value)


class Client(ClientBase):
    id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
