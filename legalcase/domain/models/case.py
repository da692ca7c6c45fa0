"""Case domain model — maps to the 'cases' table."""

from sqlalchemy import Column, Integer, String, Text, Enum
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.orm import relationship

from legalcase.domain.models.base import TimestampMixin
from legalcase.domain.models.case_client import CaseClient
from legalcase.domain.models.enums import CaseStatus, CaseType
from legalcase.infrastructure.database import Base


class Case(TimestampMixin, Base):
    __tablename__ = "cases"

    id = Column(Integer, primary_key=True, autoincrement=True)
    case_number = Column(String(100), unique=True, nullable=True, index=True)
    title = Column(String(500), nullable=False)
    type = Column(Enum(CaseType, name="case_type"), nullable=False)
    status = Column(Enum(CaseStatus, name="case_status"), nullable=False, default=CaseStatus.NEW, index=True)
    description = Column(Text, nullable=True)

    # Deleting a case removes its hearings, documents and client links
    hearings = relationship(
        "Hearing",
        back_populates="case",
        cascade="all, delete-orphan",
        order_by="Hearing.hearing_timestamp",
    )
    documents = relationship(
        "Document", back_populates="case", cascade="all, delete-orphan"
    )
    client_links = relationship(
        "CaseClient", back_populates="case", cascade="all, delete-orphan"
    )
    clients = association_proxy(
        "client_links", "client", creator=lambda client: CaseClient(client=client)
    )

    def __repr__(self):
        return f"<Case {self.case_number} - {self.title}>"


# Related mappers referenced by name above
from legalcase.domain.models import document, hearing  # noqa: E402,F401
