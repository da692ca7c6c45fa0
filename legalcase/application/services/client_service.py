"""Client service — client records and email uniqueness."""

from typing import List, Optional

import structlog

from legalcase.application.services.base import build_payload, storage_errors
from legalcase.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from legalcase.domain.models.client import Client
from legalcase.domain.repositories.client_repository import ClientRepository
from legalcase.domain.schemas.client import ClientCreate, ClientUpdate

logger = structlog.get_logger(__name__)


class ClientService:
    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    def _require_client(self, client_id: int) -> Client:
        client = self.client_repo.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundException("Client not found", details={"client_id": client_id})
        return client

    def create_client(
        self,
        name: str,
        surname: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Client:
        with storage_errors("Could not create client"):
            if email and self.client_repo.get_by_email(email) is not None:
                raise BusinessRuleViolationException(
                    "Email address is already in use", details={"email": email}
                )

            payload = build_payload(
                ClientCreate, name=name, surname=surname, email=email, phone=phone, address=address
            )
            client = self.client_repo.create(payload)
            logger.info("Client created", client_id=client.id)
            return client

    def get_client_by_id(self, client_id: int) -> Optional[Client]:
        with storage_errors("Could not retrieve client", client_id=client_id):
            return self.client_repo.get_by_id(client_id)

    def get_client_by_email(self, email: str) -> Optional[Client]:
        with storage_errors("Could not retrieve client"):
            return self.client_repo.get_by_email(email)

    def get_all_clients(self) -> List[Client]:
        with storage_errors("Could not retrieve clients"):
            return self.client_repo.list()

    def search_clients(self, term: str) -> List[Client]:
        with storage_errors("Could not search clients", term=term):
            return self.client_repo.search_by_name(term or "")

    def update_client(
        self,
        client_id: int,
        name: str,
        surname: str,
        email: Optional[str],
        phone: Optional[str],
        address: Optional[str],
    ) -> Client:
        """Overwrite every field of a client.

        Keeping the client's own email is always allowed; taking another
        client's email is rejected.
        """
        with storage_errors("Could not update client", client_id=client_id):
            client = self._require_client(client_id)

            if email and email != client.email:
                existing = self.client_repo.get_by_email(email)
                if existing is not None and existing.id != client.id:
                    raise BusinessRuleViolationException(
                        "Email address is already used by another client",
                        details={"email": email},
                    )

            payload = build_payload(
                ClientUpdate, name=name, surname=surname, email=email, phone=phone, address=address
            )
            client = self.client_repo.update(client, payload)
            logger.info("Client updated", client_id=client.id)
            return client

    def delete_client(self, client_id: int) -> None:
        with storage_errors("Could not delete client", client_id=client_id):
            self._require_client(client_id)
            self.client_repo.delete(client_id)
            logger.info("Client deleted", client_id=client_id)
