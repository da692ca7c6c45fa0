"""Document service — documents filed against a case."""

from typing import Any, Dict, List, Optional

import structlog

from legalcase.application.services.base import build_payload, storage_errors
from legalcase.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from legalcase.domain.models.document import DEFAULT_CONTENT_TYPE, Document
from legalcase.domain.models.enums import DocumentType
from legalcase.domain.repositories.case_repository import CaseRepository
from legalcase.domain.repositories.document_repository import DocumentRepository
from legalcase.domain.schemas.document import DocumentCreate, DocumentUpdate

logger = structlog.get_logger(__name__)


class DocumentService:
    def __init__(self, document_repo: DocumentRepository, case_repo: CaseRepository):
        self.document_repo = document_repo
        self.case_repo = case_repo

    def _require_document(self, document_id: int) -> Document:
        document = self.document_repo.get_by_id(document_id)
        if document is None:
            raise EntityNotFoundException("Document not found", details={"document_id": document_id})
        return document

    def create_document(
        self,
        case_id: int,
        title: str,
        type: DocumentType,
        content: Optional[str] = None,
    ) -> Document:
        with storage_errors("Could not create document", case_id=case_id):
            if self.case_repo.get_by_id(case_id) is None:
                raise EntityNotFoundException("Case not found", details={"case_id": case_id})

            payload = build_payload(
                DocumentCreate,
                case_id=case_id,
                title=title,
                type=type,
                content=content,
                content_type=DEFAULT_CONTENT_TYPE,
            )
            document = self.document_repo.create(payload)
            logger.info("Document created", document_id=document.id, case_id=case_id)
            return document

    def get_document_by_id(self, document_id: int) -> Optional[Document]:
        with storage_errors("Could not retrieve document", document_id=document_id):
            return self.document_repo.get_by_id(document_id)

    def get_document_content(self, document_id: int) -> Optional[str]:
        with storage_errors("Could not retrieve document content", document_id=document_id):
            return self._require_document(document_id).content

    def get_all_documents(self) -> List[Document]:
        with storage_errors("Could not retrieve documents"):
            return self.document_repo.list()

    def get_documents_by_case_id(self, case_id: int) -> List[Document]:
        with storage_errors("Could not retrieve documents", case_id=case_id):
            if self.case_repo.get_by_id(case_id) is None:
                raise EntityNotFoundException("Case not found", details={"case_id": case_id})
            return self.document_repo.get_by_case_id(case_id)

    def get_documents_by_type(self, document_type: DocumentType) -> List[Document]:
        with storage_errors("Could not retrieve documents", type=document_type):
            return self.document_repo.get_by_type(document_type)

    def search_documents_by_title(self, title: str) -> List[Document]:
        with storage_errors("Could not search documents", title=title):
            return self.document_repo.search_by_title(title or "")

    def update_document(
        self,
        document_id: int,
        title: Optional[str] = None,
        type: Optional[DocumentType] = None,
        content: Optional[str] = None,
    ) -> Document:
        """Replace title, type and content; missing values keep the current ones."""
        with storage_errors("Could not update document", document_id=document_id):
            document = self._require_document(document_id)

            changes: Dict[str, Any] = {}
            if title:
                changes["title"] = title
            if type is not None:
                changes["type"] = type
            if content is not None:
                changes["content"] = content

            document = self.document_repo.update(document, build_payload(DocumentUpdate, **changes))
            logger.info("Document updated", document_id=document_id, fields=sorted(changes))
            return document

    def set_document_content_type(self, document_id: int, content_type: str) -> Document:
        with storage_errors("Could not update document", document_id=document_id):
            document = self._require_document(document_id)
            if not content_type:
                raise BusinessRuleViolationException("Content type is required")

            return self.document_repo.update(
                document, build_payload(DocumentUpdate, content_type=content_type)
            )

    def delete_document(self, document_id: int) -> None:
        with storage_errors("Could not delete document", document_id=document_id):
            self._require_document(document_id)
            self.document_repo.delete(document_id)
            logger.info("Document deleted", document_id=document_id)
