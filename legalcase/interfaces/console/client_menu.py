from legalcase.application.services.case_service import CaseService
from legalcase.application.services.client_service import ClientService
from legalcase.interfaces.console.base_menu import Menu
from legalcase.interfaces.console.helper import ConsoleIO
from legalcase.interfaces.console.labels import CASE_STATUS_LABELS, label

CLIENT_COLUMNS = ("ID", "Name", "Surname", "Email", "Phone")


def client_row(client):
    return (client.id, client.name, client.surname, client.email, client.phone)


class ClientMenu(Menu):
    title = "Client Tracking"

    def __init__(self, io: ConsoleIO, client_service: ClientService, case_service: CaseService):
        super().__init__(io)
        self.client_service = client_service
        self.case_service = case_service

    def options(self):
        return [
            ("Add New Client", self.add_client),
            ("View Client Details", self.view_client),
            ("Update Client", self.update_client),
            ("Delete Client", self.delete_client),
            ("List All Clients", self.list_clients),
            ("Search Clients", self.search_clients),
        ]

    def add_client(self):
        self.io.header("Add New Client")
        client = self.client_service.create_client(
            name=self.io.read_required("Name"),
            surname=self.io.read_required("Surname"),
            email=self.io.read_optional("Email (optional)"),
            phone=self.io.read_optional("Phone (optional)"),
            address=self.io.read_optional("Address (optional)"),
        )
        self.io.success(f"Client added successfully with ID: {client.id}")

    def view_client(self):
        client_id = self.read_id("client")
        client = self.client_service.get_client_by_id(client_id)
        if client is None:
            self.io.error(f"Client not found with ID: {client_id}")
            return

        self.io.header("Client Details")
        self.io.details(
            [
                ("ID", client.id),
                ("Name", client.name),
                ("Surname", client.surname),
                ("Email", client.email),
                ("Phone", client.phone),
                ("Address", client.address),
            ]
        )
        cases = self.case_service.get_cases_for_client(client_id)
        if not cases:
            self.io.info("This client has no cases")
            return
        self.io.table(
            ("ID", "Case Number", "Title", "Status"),
            [(c.id, c.case_number, c.title, label(CASE_STATUS_LABELS, c.status)) for c in cases],
            title="Cases",
        )

    def update_client(self):
        client_id = self.read_id("client")
        client = self.client_service.get_client_by_id(client_id)
        if client is None:
            self.io.error(f"Client not found with ID: {client_id}")
            return

        self.io.info("Leave a field blank to keep the current value")
        name = self.io.read_string(f"Name [{client.name}]") or client.name
        surname = self.io.read_string(f"Surname [{client.surname}]") or client.surname
        email = self.io.read_string(f"Email [{client.email or ''}]") or client.email
        phone = self.io.read_string(f"Phone [{client.phone or ''}]") or client.phone
        address = self.io.read_string(f"Address [{client.address or ''}]") or client.address

        self.client_service.update_client(client_id, name, surname, email, phone, address)
        self.io.success("Client updated successfully")

    def delete_client(self):
        client_id = self.read_id("client")
        client = self.client_service.get_client_by_id(client_id)
        if client is None:
            self.io.error(f"Client not found with ID: {client_id}")
            return
        if not self.io.confirm(f"Are you sure you want to delete client {client.full_name}?"):
            self.io.info("Deletion cancelled")
            return
        self.client_service.delete_client(client_id)
        self.io.success("Client deleted successfully")

    def list_clients(self):
        clients = self.client_service.get_all_clients()
        if not clients:
            self.io.info("No clients found")
            return
        self.io.table(CLIENT_COLUMNS, [client_row(c) for c in clients], title="All Clients")

    def search_clients(self):
        term = self.io.read_required("Enter search term")
        clients = self.client_service.search_clients(term)
        if not clients:
            self.io.info(f"No clients match '{term}'")
            return
        self.io.table(CLIENT_COLUMNS, [client_row(c) for c in clients], title="Search Results")
