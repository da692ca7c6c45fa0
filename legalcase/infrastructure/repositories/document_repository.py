"""
SQLAlchemy Implementation of Document Repository.
"""

from typing import List

from legalcase.domain.models.document import Document
from legalcase.domain.models.enums import DocumentType
from legalcase.domain.repositories.document_repository import DocumentRepository
from legalcase.infrastructure.repositories.base_repository import SQLAlchemyRepository, contains_ignoring_case


class SQLAlchemyDocumentRepository(SQLAlchemyRepository[Document], DocumentRepository):
    """Document repository implementation using SQLAlchemy."""

    def get_by_case_id(self, case_id: int) -> List[Document]:
        return (
            self.db.query(Document)
            .filter(Document.case_id == case_id)
            .order_by(Document.id)
            .all()
        )

    def get_by_type(self, document_type: DocumentType) -> List[Document]:
        return (
            self.db.query(Document)
            .filter(Document.type == document_type)
            .order_by(Document.id)
            .all()
        )

    def search_by_title(self, title: str) -> List[Document]:
        return (
            self.db.query(Document)
            .filter(contains_ignoring_case(Document.title, title))
            .order_by(Document.id)
            .all()
        )
