from legalcase.application.services.auth_service import AuthService
from legalcase.interfaces.console.base_menu import Menu
from legalcase.interfaces.console.helper import ConsoleIO
from legalcase.interfaces.console.labels import USER_ROLE_LABELS


class AuthMenu(Menu):
    title = "Legal Case Tracker - Login"
    back_label = "Exit"

    def __init__(self, io: ConsoleIO, auth_service: AuthService):
        super().__init__(io)
        self.auth_service = auth_service

    def options(self):
        return [
            ("Login", self.login),
            ("Register", self.register),
        ]

    def run(self) -> bool:
        """Show the menu once. Returns False when the user chose to exit."""
        action = self.prompt()
        if action is None:
            return False
        self.perform(action)
        if not self.auth_service.is_logged_in():
            self.io.pause()
        return True

    def login(self):
        username = self.io.read_required("Username")
        password = self.io.read_required("Password", password=True)
        if self.auth_service.login(username, password):
            user = self.auth_service.get_current_user()
            self.io.success(f"Welcome, {user.full_name}!")
        else:
            self.io.error("Invalid username or password")

    def register(self):
        self.io.header("Register New User")
        username = self.io.read_required("Username")
        password = self.io.read_required("Password", password=True)
        email = self.io.read_required("Email")
        name = self.io.read_required("Name")
        surname = self.io.read_required("Surname")
        role = self.io.choose("Select role:", USER_ROLE_LABELS)

        user = self.auth_service.register(username, password, email, name, surname, role)
        self.io.success(f"User {user.username} registered successfully. You can now log in")
