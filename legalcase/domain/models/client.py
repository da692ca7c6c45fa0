"""Client domain model — maps to the 'clients' table."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.orm import relationship

from legalcase.domain.models import case_client  # noqa: F401
from legalcase.domain.models.base import TimestampMixin
from legalcase.infrastructure.database import Base


class Client(TimestampMixin, Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    surname = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=True, index=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)

    # Removing a client drops its case links, never the cases
    case_links = relationship(
        "CaseClient", back_populates="client", cascade="all, delete-orphan"
    )
    cases = association_proxy("case_links", "case")

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    def __repr__(self):
        return f"<Client {self.id} - {self.full_name}>"
