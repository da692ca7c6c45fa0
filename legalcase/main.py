"""Legal Case Tracker — console entry point."""

import argparse
import sys
from typing import List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from legalcase.application.services.auth_service import AuthService
from legalcase.application.services.case_service import CaseService
from legalcase.application.services.client_service import ClientService
from legalcase.application.services.document_service import DocumentService
from legalcase.application.services.hearing_service import HearingService
from legalcase.config import get_settings
from legalcase.core.exceptions import AppError
from legalcase.core.logging import configure_logging
from legalcase.domain.models.case import Case
from legalcase.domain.models.client import Client
from legalcase.domain.models.document import Document
from legalcase.domain.models.hearing import Hearing
from legalcase.domain.models.user import User
from legalcase.infrastructure.database import (
    build_engine,
    create_session_factory,
    create_tables,
    session_scope,
)
from legalcase.infrastructure.repositories.case_repository import SQLAlchemyCaseRepository
from legalcase.infrastructure.repositories.client_repository import SQLAlchemyClientRepository
from legalcase.infrastructure.repositories.document_repository import SQLAlchemyDocumentRepository
from legalcase.infrastructure.repositories.hearing_repository import SQLAlchemyHearingRepository
from legalcase.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from legalcase.interfaces.console.helper import ConsoleIO
from legalcase.interfaces.console.menu_manager import MenuManager

logger = structlog.get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legalcase",
        description="Legal Case Tracker - manage cases, clients, hearings and documents",
    )
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="SQLAlchemy database URL (default: DATABASE_URL setting)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: LOG_LEVEL setting)",
    )
    return parser


def build_menu_manager(db: Session, io: ConsoleIO) -> MenuManager:
    """Wire repositories and services on one session into the console."""
    case_repo = SQLAlchemyCaseRepository(db, Case)
    client_repo = SQLAlchemyClientRepository(db, Client)

    return MenuManager(
        io,
        auth_service=AuthService(SQLAlchemyUserRepository(db, User)),
        case_service=CaseService(case_repo, client_repo),
        client_service=ClientService(client_repo),
        hearing_service=HearingService(SQLAlchemyHearingRepository(db, Hearing), case_repo),
        document_service=DocumentService(SQLAlchemyDocumentRepository(db, Document), case_repo),
    )


def main(argv: Optional[List[str]] = None, io: Optional[ConsoleIO] = None) -> int:
    args = create_parser().parse_args(argv)
    settings = get_settings()

    configure_logging(level=args.log_level)
    logger.info("Starting Legal Case Tracker...", env=settings.ENVIRONMENT)

    try:
        engine = build_engine(args.database_url)
        create_tables(engine)
    except SQLAlchemyError:
        logger.exception("Database initialization failed")
        print("Could not initialize the database. See the log for details.", file=sys.stderr)
        return 1

    io = io or ConsoleIO()
    try:
        with session_scope(create_session_factory(engine)) as db:
            manager = build_menu_manager(db, io)
            if settings.DEFAULT_ADMIN_PASSWORD:
                manager.auth_service.ensure_default_admin(
                    settings.DEFAULT_ADMIN_USERNAME,
                    settings.DEFAULT_ADMIN_PASSWORD,
                    settings.DEFAULT_ADMIN_EMAIL,
                )
            manager.start()
    except AppError as exc:
        logger.exception("Startup failed", error=exc.message)
        print(f"Startup failed: {exc.message}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()

    logger.info("Legal Case Tracker stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
