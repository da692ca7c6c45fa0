"""
Client Repository Interface.
Defines specific data access operations for Clients.
"""

from typing import List, Optional

from legalcase.domain.repositories.base import BaseRepository
from legalcase.domain.models.client import Client


class ClientRepository(BaseRepository[Client]):
    """Interface for Client-specific operations."""

    def get_by_email(self, email: str) -> Optional[Client]:
        ...

    def search_by_name(self, term: str) -> List[Client]:
        """Clients whose name or surname contains ``term``."""
        ...
