"""Wires the console menus to the services and drives the top-level loop."""

import structlog

from legalcase.application.services.auth_service import AuthService
from legalcase.application.services.case_service import CaseService
from legalcase.application.services.client_service import ClientService
from legalcase.application.services.document_service import DocumentService
from legalcase.application.services.hearing_service import HearingService
from legalcase.interfaces.console.auth_menu import AuthMenu
from legalcase.interfaces.console.case_menu import CaseMenu
from legalcase.interfaces.console.client_menu import ClientMenu
from legalcase.interfaces.console.document_menu import DocumentMenu
from legalcase.interfaces.console.helper import ConsoleIO
from legalcase.interfaces.console.hearing_menu import HearingMenu
from legalcase.interfaces.console.main_menu import MainMenu

logger = structlog.get_logger(__name__)


class MenuManager:
    def __init__(
        self,
        io: ConsoleIO,
        auth_service: AuthService,
        case_service: CaseService,
        client_service: ClientService,
        hearing_service: HearingService,
        document_service: DocumentService,
    ):
        self.io = io
        self.auth_service = auth_service
        self.auth_menu = AuthMenu(io, auth_service)
        self.main_menu = MainMenu(
            io,
            auth_service,
            case_menu=CaseMenu(io, case_service, client_service, hearing_service, document_service),
            client_menu=ClientMenu(io, client_service, case_service),
            hearing_menu=HearingMenu(io, hearing_service),
            document_menu=DocumentMenu(io, document_service),
        )

    def start(self) -> None:
        """Loop over the login and main menus until the user exits."""
        logger.info("Console session started")
        running = True
        try:
            while running:
                if self.auth_service.is_logged_in():
                    running = self.main_menu.run()
                else:
                    running = self.auth_menu.run()
        except (EOFError, KeyboardInterrupt):
            self.io.message("")
        finally:
            self.auth_service.logout()
            logger.info("Console session ended")
        self.io.message("Thank you for using Legal Case Tracker. Goodbye!")
