"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List, Optional

from sqlalchemy import or_

from legalcase.domain.models.enums import UserRole
from legalcase.domain.models.user import User
from legalcase.domain.repositories.user_repository import UserRepository
from legalcase.infrastructure.repositories.base_repository import SQLAlchemyRepository, contains_ignoring_case


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_role(self, role: UserRole) -> List[User]:
        return self.db.query(User).filter(User.role == role).order_by(User.id).all()

    def search_by_name(self, term: str) -> List[User]:
        return (
            self.db.query(User)
            .filter(or_(contains_ignoring_case(User.name, term), contains_ignoring_case(User.surname, term)))
            .order_by(User.id)
            .all()
        )
