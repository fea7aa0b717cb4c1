from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator, ValidationInfo

from legalcase.db.models.enums import DocumentType
from .common import reject_null


class DocumentBase(BaseModel):
    title: str
    document_type: DocumentType
    content: Optional[str] = None


class DocumentCreate(DocumentBase):
    case_id: int


class DocumentUpdate(BaseModel):
    title: Optional[str] = None
    document_type: Optional[DocumentType] = None
    content: Optional[str] = None

    @field_validator("title", "document_type")
    @classmethod
    def _required(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class Document(DocumentBase):
    id: int
    case_id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
