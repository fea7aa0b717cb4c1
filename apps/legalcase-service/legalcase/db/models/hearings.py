from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin
from .enums import HearingStatus, enum_column_type


class Hearing(TimestampMixin, Base):
    __tablename__ = 'hearings'
    case_id = Column(Integer, ForeignKey('cases.id', ondelete='CASCADE'), nullable=False)
    # Wall-clock time of the hearing, whole seconds, no tzinfo
    hearing_date = Column(DateTime(timezone=False), nullable=False)
    judge = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(enum_column_type(HearingStatus, 'ck_hearings_status'), nullable=False, default=HearingStatus.SCHEDULED)

    case = relationship("Case", back_populates="hearings")

    __table_args__ = (
        Index('idx_hearings_case_id', 'case_id'),
        Index('idx_hearings_hearing_date', 'hearing_date'),
    )
