"""
Case Repository Interface.
Defines specific data access operations for Cases and their client links.
"""

from typing import List, Optional

from legalcase.domain.repositories.base import BaseRepository
from legalcase.domain.models.case import Case
from legalcase.domain.models.client import Client
from legalcase.domain.models.enums import CaseStatus, CaseType


class CaseRepository(BaseRepository[Case]):
    """Interface for Case-specific operations."""

    def get_by_case_number(self, case_number: str) -> Optional[Case]:
        ...

    def get_by_status(self, status: CaseStatus) -> List[Case]:
        ...

    def get_by_type(self, case_type: CaseType) -> List[Case]:
        ...

    def search_by_title(self, title: str) -> List[Case]:
        """Cases whose title contains ``title``, ignoring case."""
        ...

    def add_client(self, case: Case, client: Client) -> bool:
        """Link a client to a case. Returns False if they were already linked."""
        ...

    def remove_client(self, case: Case, client: Client) -> bool:
        """Unlink a client from a case. Returns False if they were not linked."""
        ...

    def get_clients_for_case(self, case_id: int) -> List[Client]:
        ...

    def get_cases_for_client(self, client_id: int) -> List[Case]:
        ...
