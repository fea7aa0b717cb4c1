from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin
from .enums import DocumentType, enum_column_type


class Document(TimestampMixin, Base):
    __tablename__ = 'documents'
    case_id = Column(Integer, ForeignKey('cases.id', ondelete='CASCADE'), nullable=False)
    title = Column(String(255), nullable=False)
    document_type = Column('type', enum_column_type(DocumentType, 'ck_documents_type'), nullable=False)
    content = Column(Text, nullable=True)

    case = relationship("Case", back_populates="documents")

    __table_args__ = (
        Index('idx_documents_case_id', 'case_id'),
    )
