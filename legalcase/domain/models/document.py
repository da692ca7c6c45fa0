"""Document domain model — maps to the 'documents' table."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from legalcase.domain.models.base import TimestampMixin
from legalcase.domain.models.enums import DocumentType
from legalcase.infrastructure.database import Base

DEFAULT_CONTENT_TYPE = "text/plain"


class Document(TimestampMixin, Base):
    __tablename__ = "documents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    case_id = Column(Integer, ForeignKey("cases.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    type = Column(Enum(DocumentType, name="document_type"), nullable=False, index=True)
    content_type = Column(String(100), nullable=True, default=DEFAULT_CONTENT_TYPE)
    content = Column(Text, nullable=True)

    case = relationship("Case", back_populates="documents")

    def __repr__(self):
        return f"<Document {self.id} - {self.title}>"


# Related mappers referenced by name above
from legalcase.domain.models import case  # noqa: E402,F401
