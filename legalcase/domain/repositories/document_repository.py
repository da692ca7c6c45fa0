"""
Document Repository Interface.
Defines specific data access operations for Documents.
"""

from typing import List

from legalcase.domain.repositories.base import BaseRepository
from legalcase.domain.models.document import Document
from legalcase.domain.models.enums import DocumentType


class DocumentRepository(BaseRepository[Document]):
    """Interface for Document-specific operations."""

    def get_by_case_id(self, case_id: int) -> List[Document]:
        ...

    def get_by_type(self, document_type: DocumentType) -> List[Document]:
        ...

    def search_by_title(self, title: str) -> List[Document]:
        """Documents whose title contains ``title``, ignoring case."""
        ...
