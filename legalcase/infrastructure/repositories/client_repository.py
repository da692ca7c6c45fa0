"""
SQLAlchemy Implementation of Client Repository.
"""

from typing import List, Optional

from sqlalchemy import or_

from legalcase.domain.models.client import Client
from legalcase.domain.repositories.client_repository import ClientRepository
from legalcase.infrastructure.repositories.base_repository import SQLAlchemyRepository, contains_ignoring_case


class SQLAlchemyClientRepository(SQLAlchemyRepository[Client], ClientRepository):
    """Client repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[Client]:
        if email is None:
            return None
        return self.db.query(Client).filter(Client.email == email).first()

    def search_by_name(self, term: str) -> List[Client]:
        return (
            self.db.query(Client)
            .filter(
                or_(
                    contains_ignoring_case(Client.name, term),
                    contains_ignoring_case(Client.surname, term),
                )
            )
            .order_by(Client.surname, Client.name)
            .all()
        )
