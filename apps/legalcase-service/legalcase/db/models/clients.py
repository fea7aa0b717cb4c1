from sqlalchemy import Column, String, Text, Index
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Client(TimestampMixin, Base):
    __tablename__ = 'clients'
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    # NULL when the client has no email; non-empty values are unique
    email = Column(String(255), nullable=True, unique=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)

    case_client_links = relationship("CaseClient", back_populates="client", cascade="all, delete-orphan")

    @property
    def cases(self):
        return [link.case for link in self.case_client_links]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    __table_args__ = (
        Index('idx_clients_last_name', 'last_name'),
    )
