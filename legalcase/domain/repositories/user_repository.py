"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import List, Optional

from legalcase.domain.repositories.base import BaseRepository
from legalcase.domain.models.enums import UserRole
from legalcase.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_username(self, username: str) -> Optional[User]:
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def get_by_role(self, role: UserRole) -> List[User]:
        ...

    def search_by_name(self, term: str) -> List[User]:
        """Users whose name or surname contains ``term``."""
        ...
