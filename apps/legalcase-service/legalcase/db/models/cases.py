from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin
from .enums import CaseStatus, CaseType, enum_column_type


class Case(TimestampMixin, Base):
    __tablename__ = 'cases'
    case_number = Column(String(50), nullable=True, unique=True)
    title = Column(String(255), nullable=False)
    case_type = Column('type', enum_column_type(CaseType, 'ck_cases_type'), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(enum_column_type(CaseStatus, 'ck_cases_status'), nullable=False, default=CaseStatus.NEW)

    hearings = relationship("Hearing", back_populates="case", cascade="all, delete-orphan", order_by="Hearing.hearing_date")
    documents = relationship("Document", back_populates="case", cascade="all, delete-orphan")
    case_client_links = relationship("CaseClient", back_populates="case", cascade="all, delete-orphan")

    @property
    def clients(self):
        # Computed from the junction rows; there is no stored copy to drift.
        return [link.client for link in self.case_client_links]

    __table_args__ = (
        Index('idx_cases_status', 'status'),
        Index('idx_cases_title', 'title'),
    )


class CaseClient(TimestampMixin, Base):
    __tablename__ = 'case_clients'
    case_id = Column(Integer, ForeignKey('cases.id', ondelete='CASCADE'), nullable=False)
    client_id = Column(Integer, ForeignKey('clients.id', ondelete='CASCADE'), nullable=False)

    case = relationship("Case", back_populates="case_client_links")
    client = relationship("Client", back_populates="case_client_links")

    __table_args__ = (
        UniqueConstraint('case_id', 'client_id', name='uq_case_clients_case_client'),
        Index('idx_case_clients_client_id', 'client_id'),
    )
