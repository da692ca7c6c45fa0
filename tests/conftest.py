"""
Shared fixtures: a fresh in-memory SQLite database per test, with the
repositories and services wired on top of it.
"""
import os

# Settings are read once; these must be in place before legalcase is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("ENVIRONMENT", "test")

from io import StringIO  # noqa: E402

import pytest  # noqa: E402
from rich.console import Console  # noqa: E402

from legalcase.application.services.auth_service import AuthService, UserSession  # noqa: E402
from legalcase.application.services.case_service import CaseService  # noqa: E402
from legalcase.application.services.client_service import ClientService  # noqa: E402
from legalcase.application.services.document_service import DocumentService  # noqa: E402
from legalcase.application.services.hearing_service import HearingService  # noqa: E402
from legalcase.domain.models.case import Case  # noqa: E402
from legalcase.domain.models.client import Client  # noqa: E402
from legalcase.domain.models.document import Document  # noqa: E402
from legalcase.domain.models.enums import CaseType  # noqa: E402
from legalcase.domain.models.hearing import Hearing  # noqa: E402
from legalcase.domain.models.user import User  # noqa: E402
from legalcase.infrastructure.database import (  # noqa: E402
    build_engine,
    create_session_factory,
    create_tables,
)
from legalcase.infrastructure.repositories.case_repository import SQLAlchemyCaseRepository  # noqa: E402
from legalcase.infrastructure.repositories.client_repository import SQLAlchemyClientRepository  # noqa: E402
from legalcase.infrastructure.repositories.document_repository import SQLAlchemyDocumentRepository  # noqa: E402
from legalcase.infrastructure.repositories.hearing_repository import SQLAlchemyHearingRepository  # noqa: E402
from legalcase.infrastructure.repositories.user_repository import SQLAlchemyUserRepository  # noqa: E402
from legalcase.interfaces.console.helper import ConsoleIO  # noqa: E402


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", echo=False)
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def user_repo(db):
    return SQLAlchemyUserRepository(db, User)


@pytest.fixture
def client_repo(db):
    return SQLAlchemyClientRepository(db, Client)


@pytest.fixture
def case_repo(db):
    return SQLAlchemyCaseRepository(db, Case)


@pytest.fixture
def hearing_repo(db):
    return SQLAlchemyHearingRepository(db, Hearing)


@pytest.fixture
def document_repo(db):
    return SQLAlchemyDocumentRepository(db, Document)


@pytest.fixture
def auth_service(user_repo):
    return AuthService(user_repo, UserSession())


@pytest.fixture
def client_service(client_repo):
    return ClientService(client_repo)


@pytest.fixture
def case_service(case_repo, client_repo):
    return CaseService(case_repo, client_repo)


@pytest.fixture
def hearing_service(hearing_repo, case_repo):
    return HearingService(hearing_repo, case_repo)


@pytest.fixture
def document_service(document_repo, case_repo):
    return DocumentService(document_repo, case_repo)


@pytest.fixture
def sample_case(case_service):
    return case_service.create_case("C-100", "Smith v. Jones", CaseType.CIVIL, "Contract dispute")


@pytest.fixture
def sample_client(client_service):
    return client_service.create_client("Ana", "Silva", "ana@example.com", "555-0100", "1 Main St")


def _scripted_io(*lines: str):
    output = StringIO()
    console = Console(file=output, width=120, color_system=None, force_terminal=False)
    stream = StringIO("".join(f"{line}\n" for line in lines))
    return ConsoleIO(console=console, stream=stream), output


@pytest.fixture
def scripted_io():
    """Factory: console fed one canned answer per line; returns (io, output buffer)."""
    return _scripted_io
