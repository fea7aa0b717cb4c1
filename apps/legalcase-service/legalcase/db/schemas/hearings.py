from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator, ValidationInfo

from legalcase.db.models.enums import HearingStatus
from .common import reject_null


def to_wall_clock(value: datetime) -> datetime:
    """Convert an aware value to naive local time; naive values pass through."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def normalize_hearing_date(value: Optional[datetime]) -> Optional[datetime]:
    """Return local wall-clock time truncated to whole seconds."""
    if value is None:
        return None
    return to_wall_clock(value).replace(microsecond=0)


class HearingBase(BaseModel):
    hearing_date: datetime
    judge: str
    location: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("hearing_date")
    @classmethod
    def _normalize_date(cls, value: datetime) -> datetime:
        return normalize_hearing_date(value)


class HearingCreate(HearingBase):
    case_id: int


class HearingUpdate(BaseModel):
    hearing_date: Optional[datetime] = None
    judge: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[HearingStatus] = None

    @field_validator("hearing_date", "judge", "status")
    @classmethod
    def _required(cls, value, info: ValidationInfo):
        value = reject_null(value, info.field_name)
        if info.field_name == "hearing_date":
            return normalize_hearing_date(value)
        return value


class Hearing(HearingBase):
    id: int
    case_id: int
    status: HearingStatus
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
