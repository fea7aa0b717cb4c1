from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator, ValidationInfo

from legalcase.db.models.enums import UserRole
from .common import reject_null


class UserBase(BaseModel):
    username: str
    email: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.VIEWER


class UserCreate(UserBase):
    enabled: bool = True


class UserUpdate(BaseModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[UserRole] = None
    enabled: Optional[bool] = None

    @field_validator("email", "first_name", "last_name", "role", "enabled")
    @classmethod
    def _required(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class User(UserBase):
    """Read model; never carries the password hash."""
    id: int
    enabled: bool
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
