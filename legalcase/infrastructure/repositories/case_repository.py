"""
SQLAlchemy Implementation of Case Repository.
"""

from typing import List, Optional

from legalcase.domain.models.case import Case
from legalcase.domain.models.case_client import CaseClient
from legalcase.domain.models.client import Client
from legalcase.domain.models.enums import CaseStatus, CaseType
from legalcase.domain.repositories.case_repository import CaseRepository
from legalcase.infrastructure.repositories.base_repository import SQLAlchemyRepository, contains_ignoring_case


class SQLAlchemyCaseRepository(SQLAlchemyRepository[Case], CaseRepository):
    """Case repository implementation using SQLAlchemy."""

    def get_by_case_number(self, case_number: str) -> Optional[Case]:
        return self.db.query(Case).filter(Case.case_number == case_number).first()

    def get_by_status(self, status: CaseStatus) -> List[Case]:
        return self.db.query(Case).filter(Case.status == status).order_by(Case.id).all()

    def get_by_type(self, case_type: CaseType) -> List[Case]:
        return self.db.query(Case).filter(Case.type == case_type).order_by(Case.id).all()

    def search_by_title(self, title: str) -> List[Case]:
        return (
            self.db.query(Case)
            .filter(contains_ignoring_case(Case.title, title))
            .order_by(Case.id)
            .all()
        )

    def _find_link(self, case_id: int, client_id: int) -> Optional[CaseClient]:
        return (
            self.db.query(CaseClient)
            .filter(CaseClient.case_id == case_id, CaseClient.client_id == client_id)
            .first()
        )

    def add_client(self, case: Case, client: Client) -> bool:
        if self._find_link(case.id, client.id) is not None:
            return False
        # back_populates keeps client.case_links in step
        case.client_links.append(CaseClient(client=client))
        self._commit()
        return True

    def remove_client(self, case: Case, client: Client) -> bool:
        link = self._find_link(case.id, client.id)
        if link is None:
            return False
        self.db.delete(link)
        self._commit()
        self.db.expire(case, ["client_links"])
        self.db.expire(client, ["case_links"])
        return True

    def get_clients_for_case(self, case_id: int) -> List[Client]:
        return (
            self.db.query(Client)
            .join(CaseClient, CaseClient.client_id == Client.id)
            .filter(CaseClient.case_id == case_id)
            .order_by(CaseClient.id)
            .all()
        )

    def get_cases_for_client(self, client_id: int) -> List[Case]:
        return (
            self.db.query(Case)
            .join(CaseClient, CaseClient.case_id == Case.id)
            .filter(CaseClient.client_id == client_id)
            .order_by(CaseClient.id)
            .all()
        )
