"""Case service — case lifecycle and case/client associations."""

from typing import List, Optional

import structlog

from legalcase.application.services.base import build_payload, storage_errors
from legalcase.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from legalcase.domain.models.case import Case
from legalcase.domain.models.client import Client
from legalcase.domain.models.enums import CaseStatus, CaseType
from legalcase.domain.repositories.case_repository import CaseRepository
from legalcase.domain.repositories.client_repository import ClientRepository
from legalcase.domain.schemas.case import CaseCreate, CaseUpdate

logger = structlog.get_logger(__name__)


class CaseService:
    def __init__(self, case_repo: CaseRepository, client_repo: ClientRepository):
        self.case_repo = case_repo
        self.client_repo = client_repo

    def _require_case(self, case_id: int) -> Case:
        case = self.case_repo.get_by_id(case_id)
        if case is None:
            raise EntityNotFoundException("Case not found", details={"case_id": case_id})
        return case

    def _require_client(self, client_id: int) -> Client:
        client = self.client_repo.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundException("Client not found", details={"client_id": client_id})
        return client

    def create_case(
        self,
        case_number: Optional[str],
        title: str,
        type: CaseType,
        description: Optional[str] = None,
    ) -> Case:
        """Create a case with status NEW. Case numbers must be unique."""
        with storage_errors("Could not create case", case_number=case_number):
            if case_number and self.case_repo.get_by_case_number(case_number) is not None:
                raise BusinessRuleViolationException(
                    "This case number is already in use",
                    details={"case_number": case_number},
                )

            payload = build_payload(
                CaseCreate,
                case_number=case_number,
                title=title,
                type=type,
                description=description,
                status=CaseStatus.NEW,
            )
            case = self.case_repo.create(payload)
            logger.info("Case created", case_id=case.id, case_number=case.case_number)
            return case

    def get_case_by_id(self, case_id: int) -> Optional[Case]:
        with storage_errors("Could not retrieve case", case_id=case_id):
            return self.case_repo.get_by_id(case_id)

    def get_case_by_case_number(self, case_number: str) -> Optional[Case]:
        with storage_errors("Could not retrieve case", case_number=case_number):
            return self.case_repo.get_by_case_number(case_number)

    def get_all_cases(self) -> List[Case]:
        with storage_errors("Could not retrieve cases"):
            return self.case_repo.list()

    def get_cases_by_status(self, status: CaseStatus) -> List[Case]:
        with storage_errors("Could not retrieve cases", status=status):
            return self.case_repo.get_by_status(status)

    def get_cases_by_type(self, case_type: CaseType) -> List[Case]:
        with storage_errors("Could not retrieve cases", type=case_type):
            return self.case_repo.get_by_type(case_type)

    def search_cases_by_title(self, title: str) -> List[Case]:
        with storage_errors("Could not search cases", title=title):
            return self.case_repo.search_by_title(title or "")

    def update_case(
        self,
        case_id: int,
        case_number: Optional[str],
        title: str,
        type: CaseType,
        description: Optional[str],
        status: CaseStatus,
    ) -> Case:
        """Overwrite every field of a case.

        A case may keep its own number; taking another case's number is
        rejected.
        """
        with storage_errors("Could not update case", case_id=case_id):
            case = self._require_case(case_id)

            if case_number and case_number != case.case_number:
                existing = self.case_repo.get_by_case_number(case_number)
                if existing is not None and existing.id != case.id:
                    raise BusinessRuleViolationException(
                        "This case number is already used by another case",
                        details={"case_number": case_number},
                    )

            payload = build_payload(
                CaseUpdate,
                case_number=case_number,
                title=title,
                type=type,
                description=description,
                status=status,
            )
            case = self.case_repo.update(case, payload)
            logger.info("Case updated", case_id=case.id, status=case.status)
            return case

    def delete_case(self, case_id: int) -> None:
        """Delete a case together with its hearings, documents and client links."""
        with storage_errors("Could not delete case", case_id=case_id):
            self._require_case(case_id)
            self.case_repo.delete(case_id)
            logger.info("Case deleted", case_id=case_id)

    def add_client_to_case(self, case_id: int, client_id: int) -> None:
        with storage_errors("Could not add client to case", case_id=case_id, client_id=client_id):
            case = self._require_case(case_id)
            client = self._require_client(client_id)
            if self.case_repo.add_client(case, client):
                logger.info("Client linked to case", case_id=case_id, client_id=client_id)

    def remove_client_from_case(self, case_id: int, client_id: int) -> None:
        with storage_errors("Could not remove client from case", case_id=case_id, client_id=client_id):
            case = self._require_case(case_id)
            client = self._require_client(client_id)
            if self.case_repo.remove_client(case, client):
                logger.info("Client unlinked from case", case_id=case_id, client_id=client_id)

    def get_clients_for_case(self, case_id: int) -> List[Client]:
        with storage_errors("Could not retrieve clients for case", case_id=case_id):
            self._require_case(case_id)
            return self.case_repo.get_clients_for_case(case_id)

    def get_cases_for_client(self, client_id: int) -> List[Case]:
        with storage_errors("Could not retrieve cases for client", client_id=client_id):
            self._require_client(client_id)
            return self.case_repo.get_cases_for_client(client_id)
