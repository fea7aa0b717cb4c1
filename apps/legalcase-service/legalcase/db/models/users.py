from sqlalchemy import Column, String, Boolean
from .base import Base, TimestampMixin
from .enums import UserRole, enum_column_type


class User(TimestampMixin, Base):
    __tablename__ = 'users'
    username = Column(String(100), nullable=False, unique=True)
    # Encoded one-way hash; the plaintext is never stored
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    role = Column(enum_column_type(UserRole, 'ck_users_role'), nullable=False, default=UserRole.VIEWER)
    enabled = Column(Boolean, nullable=False, default=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
