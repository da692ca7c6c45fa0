"""Tests for DocumentService."""
import pytest

from legalcase.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from legalcase.domain.models.document import DEFAULT_CONTENT_TYPE
from legalcase.domain.models.enums import DocumentType


class TestDocumentService:
    def test_create_document(self, document_service, sample_case):
        document = document_service.create_document(sample_case.id, "Lease", DocumentType.CONTRACT, "Terms...")
        assert document.case_id == sample_case.id
        assert document.content_type == DEFAULT_CONTENT_TYPE
        assert document_service.get_document_content(document.id) == "Terms..."

    def test_create_for_unknown_case(self, document_service):
        with pytest.raises(EntityNotFoundException, match="Case not found"):
            document_service.create_document(31337, "Lease", DocumentType.CONTRACT)

    def test_content_of_unknown_document(self, document_service):
        with pytest.raises(EntityNotFoundException, match="Document not found"):
            document_service.get_document_content(8)

    def test_listings(self, document_service, case_service, sample_case):
        from legalcase.domain.models.enums import CaseType

        other_case = case_service.create_case("C-300", "Other", CaseType.CORPORATE)
        lease = document_service.create_document(sample_case.id, "Lease agreement", DocumentType.CONTRACT)
        photo = document_service.create_document(sample_case.id, "Photo of damage", DocumentType.EVIDENCE)
        order = document_service.create_document(other_case.id, "Court order 12", DocumentType.COURT_ORDER)

        assert [d.id for d in document_service.get_all_documents()] == [lease.id, photo.id, order.id]
        assert [d.id for d in document_service.get_documents_by_case_id(sample_case.id)] == [lease.id, photo.id]
        assert [d.id for d in document_service.get_documents_by_type(DocumentType.EVIDENCE)] == [photo.id]
        assert [d.id for d in document_service.search_documents_by_title("ORDER")] == [order.id]

    def test_by_case_for_unknown_case(self, document_service):
        with pytest.raises(EntityNotFoundException):
            document_service.get_documents_by_case_id(55)

    def test_partial_update(self, document_service, sample_case):
        document = document_service.create_document(sample_case.id, "Draft", DocumentType.OTHER, "v1")
        updated = document_service.update_document(document.id, type=DocumentType.PETITION)

        assert updated.title == "Draft"
        assert updated.type == DocumentType.PETITION
        assert updated.content == "v1"

        updated = document_service.update_document(document.id, title="Final", content="v2")
        assert updated.title == "Final"
        assert updated.content == "v2"

    def test_content_type(self, document_service, sample_case):
        document = document_service.create_document(sample_case.id, "Scan", DocumentType.EVIDENCE)
        updated = document_service.set_document_content_type(document.id, "application/pdf")
        assert updated.content_type == "application/pdf"
        with pytest.raises(BusinessRuleViolationException):
            document_service.set_document_content_type(document.id, "")

    def test_delete(self, document_service, sample_case):
        document = document_service.create_document(sample_case.id, "Temp", DocumentType.OTHER)
        document_service.delete_document(document.id)
        assert document_service.get_document_by_id(document.id) is None
        with pytest.raises(EntityNotFoundException):
            document_service.delete_document(document.id)
