from legalcase.application.services.case_service import CaseService
from legalcase.application.services.client_service import ClientService
from legalcase.application.services.document_service import DocumentService
from legalcase.application.services.hearing_service import HearingService
from legalcase.interfaces.console.base_menu import Menu
from legalcase.interfaces.console.client_menu import CLIENT_COLUMNS, client_row
from legalcase.interfaces.console.helper import ConsoleIO, format_datetime
from legalcase.interfaces.console.labels import (
    CASE_STATUS_LABELS,
    CASE_TYPE_LABELS,
    DOCUMENT_TYPE_LABELS,
    HEARING_STATUS_LABELS,
    label,
)

CASE_COLUMNS = ("ID", "Case Number", "Title", "Type", "Status")


def case_row(case):
    return (
        case.id,
        case.case_number,
        case.title,
        label(CASE_TYPE_LABELS, case.type),
        label(CASE_STATUS_LABELS, case.status),
    )


class CaseMenu(Menu):
    title = "Case Management"

    def __init__(
        self,
        io: ConsoleIO,
        case_service: CaseService,
        client_service: ClientService,
        hearing_service: HearingService,
        document_service: DocumentService,
    ):
        super().__init__(io)
        self.case_service = case_service
        self.client_service = client_service
        self.hearing_service = hearing_service
        self.document_service = document_service

    def options(self):
        return [
            ("Add New Case", self.add_case),
            ("View Case Details", self.view_case),
            ("Update Case", self.update_case),
            ("Delete Case", self.delete_case),
            ("List All Cases", self.list_cases),
            ("List Cases by Status", self.list_cases_by_status),
            ("Search Cases by Title", self.search_cases),
            ("Add Client to Case", self.add_client_to_case),
            ("Remove Client from Case", self.remove_client_from_case),
        ]

    def add_case(self):
        self.io.header("Add New Case")
        case_number = self.io.read_optional("Case number (optional)")
        title = self.io.read_required("Title")
        case_type = self.io.choose("Select case type:", CASE_TYPE_LABELS)
        description = self.io.read_optional("Description (optional)")

        case = self.case_service.create_case(case_number, title, case_type, description)
        self.io.success(f"Case added successfully with ID: {case.id}")

    def view_case(self):
        case_id = self.read_id("case")
        case = self.case_service.get_case_by_id(case_id)
        if case is None:
            self.io.error(f"Case not found with ID: {case_id}")
            return

        self.io.header("Case Details")
        self.io.details(
            [
                ("ID", case.id),
                ("Case Number", case.case_number),
                ("Title", case.title),
                ("Type", label(CASE_TYPE_LABELS, case.type)),
                ("Status", label(CASE_STATUS_LABELS, case.status)),
                ("Description", case.description),
            ]
        )

        clients = self.case_service.get_clients_for_case(case_id)
        if clients:
            self.io.table(CLIENT_COLUMNS, [client_row(c) for c in clients], title="Clients")
        else:
            self.io.info("No clients linked to this case")

        hearings = self.hearing_service.get_hearings_by_case_id(case_id)
        if hearings:
            self.io.table(
                ("ID", "Date", "Judge", "Location", "Status"),
                [
                    (h.id, format_datetime(h.hearing_date), h.judge, h.location, label(HEARING_STATUS_LABELS, h.status))
                    for h in hearings
                ],
                title="Hearings",
            )
        else:
            self.io.info("No hearings scheduled for this case")

        documents = self.document_service.get_documents_by_case_id(case_id)
        if documents:
            self.io.table(
                ("ID", "Title", "Type"),
                [(d.id, d.title, label(DOCUMENT_TYPE_LABELS, d.type)) for d in documents],
                title="Documents",
            )
        else:
            self.io.info("No documents filed for this case")

    def update_case(self):
        case_id = self.read_id("case")
        case = self.case_service.get_case_by_id(case_id)
        if case is None:
            self.io.error(f"Case not found with ID: {case_id}")
            return

        self.io.info("Leave a field blank to keep the current value")
        case_number = self.io.read_string(f"Case number [{case.case_number or ''}]") or case.case_number
        title = self.io.read_string(f"Title [{case.title}]") or case.title
        description = self.io.read_string(f"Description [{case.description or ''}]") or case.description

        case_type = case.type
        if self.io.confirm(f"Change type (current: {label(CASE_TYPE_LABELS, case.type)})?"):
            case_type = self.io.choose("Select case type:", CASE_TYPE_LABELS)
        status = case.status
        if self.io.confirm(f"Change status (current: {label(CASE_STATUS_LABELS, case.status)})?"):
            status = self.io.choose("Select case status:", CASE_STATUS_LABELS)

        self.case_service.update_case(case_id, case_number, title, case_type, description, status)
        self.io.success("Case updated successfully")

    def delete_case(self):
        case_id = self.read_id("case")
        case = self.case_service.get_case_by_id(case_id)
        if case is None:
            self.io.error(f"Case not found with ID: {case_id}")
            return
        self.io.warning("Hearings and documents of this case will be deleted as well")
        if not self.io.confirm(f"Are you sure you want to delete case '{case.title}'?"):
            self.io.info("Deletion cancelled")
            return
        self.case_service.delete_case(case_id)
        self.io.success("Case deleted successfully")

    def list_cases(self):
        cases = self.case_service.get_all_cases()
        if not cases:
            self.io.info("No cases found")
            return
        self.io.table(CASE_COLUMNS, [case_row(c) for c in cases], title="All Cases")

    def list_cases_by_status(self):
        status = self.io.choose("Select case status:", CASE_STATUS_LABELS)
        cases = self.case_service.get_cases_by_status(status)
        if not cases:
            self.io.info(f"No cases with status {label(CASE_STATUS_LABELS, status)}")
            return
        self.io.table(CASE_COLUMNS, [case_row(c) for c in cases], title=f"{label(CASE_STATUS_LABELS, status)} Cases")

    def search_cases(self):
        title = self.io.read_required("Enter title to search")
        cases = self.case_service.search_cases_by_title(title)
        if not cases:
            self.io.info(f"No cases match '{title}'")
            return
        self.io.table(CASE_COLUMNS, [case_row(c) for c in cases], title="Search Results")

    def add_client_to_case(self):
        case_id = self.read_id("case")
        client_id = self.read_id("client")
        self.case_service.add_client_to_case(case_id, client_id)
        self.io.success("Client added to case successfully")

    def remove_client_from_case(self):
        case_id = self.read_id("case")
        client_id = self.read_id("client")
        self.case_service.remove_client_from_case(case_id, client_id)
        self.io.success("Client removed from case successfully")
