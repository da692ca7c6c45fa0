"""
Tests for CaseService: creation, uniqueness of case numbers, updates,
cascading deletion and the case/client links.
"""
from datetime import datetime

import pytest

from legalcase.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    InvalidArgumentError,
)
from legalcase.domain.models.enums import CaseStatus, CaseType, DocumentType


class TestCreateCase:
    def test_new_case_starts_with_status_new(self, case_service):
        """A created case gets an id and status NEW."""
        case = case_service.create_case("C-1", "Estate of Doe", CaseType.FAMILY)
        assert case.id is not None
        assert case.status == CaseStatus.NEW
        assert case.type == CaseType.FAMILY

    def test_duplicate_case_number_is_rejected(self, case_service, sample_case):
        with pytest.raises(BusinessRuleViolationException, match="already in use"):
            case_service.create_case(sample_case.case_number, "Another", CaseType.CIVIL)

    def test_duplicate_is_a_validation_failure(self, case_service, sample_case):
        """Business rule violations are InvalidArgumentError and ValueError."""
        with pytest.raises(ValueError):
            case_service.create_case(sample_case.case_number, "Another", CaseType.CIVIL)

    def test_cases_without_number_may_coexist(self, case_service):
        first = case_service.create_case(None, "First", CaseType.OTHER)
        second = case_service.create_case("", "Second", CaseType.OTHER)
        assert first.case_number is None
        assert second.case_number is None

    def test_missing_title_is_rejected(self, case_service):
        with pytest.raises(InvalidArgumentError):
            case_service.create_case("C-2", None, CaseType.CIVIL)


class TestQueries:
    def test_get_by_id_and_number(self, case_service, sample_case):
        assert case_service.get_case_by_id(sample_case.id).title == "Smith v. Jones"
        assert case_service.get_case_by_case_number("C-100").id == sample_case.id
        assert case_service.get_case_by_id(9999) is None
        assert case_service.get_case_by_case_number("missing") is None

    def test_filters(self, case_service, sample_case):
        other = case_service.create_case("C-200", "State v. Roe", CaseType.CRIMINAL)
        case_service.update_case(other.id, "C-200", "State v. Roe", CaseType.CRIMINAL, None, CaseStatus.ACTIVE)

        assert [c.id for c in case_service.get_all_cases()] == [sample_case.id, other.id]
        assert [c.id for c in case_service.get_cases_by_status(CaseStatus.NEW)] == [sample_case.id]
        assert [c.id for c in case_service.get_cases_by_status(CaseStatus.ACTIVE)] == [other.id]
        assert [c.id for c in case_service.get_cases_by_type(CaseType.CRIMINAL)] == [other.id]

    def test_title_search_is_case_insensitive(self, case_service, sample_case):
        assert [c.id for c in case_service.search_cases_by_title("smith")] == [sample_case.id]
        assert case_service.search_cases_by_title("nothing like this") == []


class TestUpdateCase:
    def test_keeping_own_number_succeeds(self, case_service, sample_case):
        updated = case_service.update_case(
            sample_case.id, "C-100", "Smith v. Jones (appeal)", CaseType.CIVIL, "Appeal", CaseStatus.ACTIVE
        )
        assert updated.title == "Smith v. Jones (appeal)"
        assert updated.status == CaseStatus.ACTIVE
        assert updated.description == "Appeal"

    def test_taking_another_cases_number_is_rejected(self, case_service, sample_case):
        other = case_service.create_case("C-200", "Other", CaseType.CORPORATE)
        with pytest.raises(BusinessRuleViolationException, match="another case"):
            case_service.update_case(other.id, "C-100", "Other", CaseType.CORPORATE, None, CaseStatus.NEW)

    def test_unknown_case_is_rejected(self, case_service):
        with pytest.raises(EntityNotFoundException, match="Case not found"):
            case_service.update_case(42, "C-42", "Nope", CaseType.OTHER, None, CaseStatus.NEW)


class TestDeleteCase:
    def test_delete_unknown_case_is_rejected(self, case_service):
        with pytest.raises(EntityNotFoundException):
            case_service.delete_case(12345)

    def test_delete_removes_hearings_documents_and_links(
        self, case_service, hearing_service, document_service, sample_case, sample_client
    ):
        """Deleting a case cascades to its hearings, documents and client links."""
        hearing = hearing_service.create_hearing(sample_case.id, datetime(2099, 1, 1, 10, 0), "Judge Dredd")
        document = document_service.create_document(sample_case.id, "Complaint", DocumentType.PETITION, "text")
        case_service.add_client_to_case(sample_case.id, sample_client.id)

        case_service.delete_case(sample_case.id)

        assert case_service.get_case_by_id(sample_case.id) is None
        assert hearing_service.get_hearing_by_id(hearing.id) is None
        assert document_service.get_document_by_id(document.id) is None
        assert case_service.get_cases_for_client(sample_client.id) == []


class TestCaseClients:
    def test_add_and_list_clients(self, case_service, client_service, sample_case, sample_client):
        second = client_service.create_client("Bruno", "Costa")
        case_service.add_client_to_case(sample_case.id, sample_client.id)
        case_service.add_client_to_case(sample_case.id, second.id)

        clients = case_service.get_clients_for_case(sample_case.id)
        assert [c.id for c in clients] == [sample_client.id, second.id]
        assert [c.id for c in case_service.get_cases_for_client(second.id)] == [sample_case.id]

    def test_adding_twice_keeps_one_link(self, case_service, sample_case, sample_client):
        case_service.add_client_to_case(sample_case.id, sample_client.id)
        case_service.add_client_to_case(sample_case.id, sample_client.id)
        assert len(case_service.get_clients_for_case(sample_case.id)) == 1

    def test_remove_client(self, case_service, sample_case, sample_client):
        case_service.add_client_to_case(sample_case.id, sample_client.id)
        case_service.remove_client_from_case(sample_case.id, sample_client.id)
        assert case_service.get_clients_for_case(sample_case.id) == []

    def test_removing_unlinked_client_is_a_no_op(self, case_service, sample_case, sample_client):
        case_service.remove_client_from_case(sample_case.id, sample_client.id)
        assert case_service.get_clients_for_case(sample_case.id) == []

    def test_unknown_ids_are_rejected(self, case_service, sample_case, sample_client):
        with pytest.raises(EntityNotFoundException, match="Case not found"):
            case_service.add_client_to_case(999, sample_client.id)
        with pytest.raises(EntityNotFoundException, match="Client not found"):
            case_service.add_client_to_case(sample_case.id, 999)
        with pytest.raises(EntityNotFoundException):
            case_service.get_clients_for_case(999)
        with pytest.raises(EntityNotFoundException):
            case_service.get_cases_for_client(999)

    def test_deleting_client_drops_link_but_keeps_case(
        self, case_service, client_service, sample_case, sample_client
    ):
        case_service.add_client_to_case(sample_case.id, sample_client.id)
        client_service.delete_client(sample_client.id)

        assert case_service.get_case_by_id(sample_case.id) is not None
        assert case_service.get_clients_for_case(sample_case.id) == []


class TestDeletesAfterLinkChanges:
    """Deletes must not trip over join rows removed earlier in the same session."""

    def test_delete_case_after_linked_client_was_deleted(self, case_service, client_service, sample_case):
        first = client_service.create_client("Ana", "Silva")
        case_service.add_client_to_case(sample_case.id, first.id)
        client_service.delete_client(first.id)

        second = client_service.create_client("Bruno", "Costa")
        case_service.add_client_to_case(sample_case.id, second.id)
        case_service.delete_case(sample_case.id)

        assert case_service.get_case_by_id(sample_case.id) is None
        assert case_service.get_cases_for_client(second.id) == []

    def test_delete_client_after_linked_case_was_deleted(self, case_service, client_service, sample_client):
        first = case_service.create_case("C-1", "First", CaseType.CIVIL)
        case_service.add_client_to_case(first.id, sample_client.id)
        assert [c.id for c in sample_client.cases] == [first.id]
        case_service.delete_case(first.id)

        second = case_service.create_case("C-2", "Second", CaseType.CIVIL)
        case_service.add_client_to_case(second.id, sample_client.id)
        client_service.delete_client(sample_client.id)

        assert client_service.get_client_by_id(sample_client.id) is None
        assert case_service.get_clients_for_case(second.id) == []

    def test_loaded_collections_reflect_deletes(self, case_service, client_service, sample_case, sample_client):
        case_service.add_client_to_case(sample_case.id, sample_client.id)
        assert [c.id for c in sample_case.clients] == [sample_client.id]

        client_service.delete_client(sample_client.id)

        assert list(sample_case.clients) == []
