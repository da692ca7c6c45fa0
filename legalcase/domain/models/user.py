"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, Boolean, Enum

from legalcase.domain.models.base import TimestampMixin
from legalcase.domain.models.enums import UserRole
from legalcase.infrastructure.database import Base


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    surname = Column(String(200), nullable=False)
    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.LAWYER)
    enabled = Column(Boolean, nullable=False, default=True)

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    def has_role(self, role: UserRole) -> bool:
        return self.role == role

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
