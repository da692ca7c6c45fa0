from legalcase.application.services.auth_service import AuthService
from legalcase.interfaces.console.base_menu import Menu
from legalcase.interfaces.console.helper import ConsoleIO
from legalcase.interfaces.console.labels import USER_ROLE_LABELS, label


class MainMenu(Menu):
    title = "Legal Case Tracker - Main Menu"
    back_label = "Exit"

    def __init__(
        self,
        io: ConsoleIO,
        auth_service: AuthService,
        case_menu: Menu,
        client_menu: Menu,
        hearing_menu: Menu,
        document_menu: Menu,
    ):
        super().__init__(io)
        self.auth_service = auth_service
        self.case_menu = case_menu
        self.client_menu = client_menu
        self.hearing_menu = hearing_menu
        self.document_menu = document_menu

    def options(self):
        return [
            ("Case Management", self.case_menu.run),
            ("Client Tracking", self.client_menu.run),
            ("Hearing Calendar", self.hearing_menu.run),
            ("Document Archive", self.document_menu.run),
            ("Logout", self.logout),
        ]

    def prompt(self):
        user = self.auth_service.get_current_user()
        self.io.info(f"Logged in as {user.full_name} ({label(USER_ROLE_LABELS, user.role)})")
        return super().prompt()

    def run(self) -> bool:
        """Show the menu once. Returns False when the user chose to exit."""
        action = self.prompt()
        if action is None:
            return False
        self.perform(action)
        return True

    def logout(self):
        self.auth_service.logout()
        self.io.success("Logged out successfully")
