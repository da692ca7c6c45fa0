"""Case ↔ Client join rows — maps to the 'case_client' table."""

from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from legalcase.infrastructure.database import Base


class CaseClient(Base):
    __tablename__ = "case_client"
    __table_args__ = (
        UniqueConstraint("case_id", "client_id", name="uq_case_client"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    case_id = Column(Integer, ForeignKey("cases.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)

    case = relationship("Case", back_populates="client_links")
    client = relationship("Client", back_populates="case_links")

    def __repr__(self):
        return f"<CaseClient case={self.case_id} client={self.client_id}>"


# Related mappers referenced by name above
from legalcase.domain.models import case, client  # noqa: E402,F401
