from legalcase.application.services.document_service import DocumentService
from legalcase.interfaces.console.base_menu import Menu
from legalcase.interfaces.console.helper import ConsoleIO
from legalcase.interfaces.console.labels import DOCUMENT_TYPE_LABELS, label

DOCUMENT_COLUMNS = ("ID", "Case ID", "Title", "Type")


def document_row(document):
    return (document.id, document.case_id, document.title, label(DOCUMENT_TYPE_LABELS, document.type))


class DocumentMenu(Menu):
    title = "Document Archive"

    def __init__(self, io: ConsoleIO, document_service: DocumentService):
        super().__init__(io)
        self.document_service = document_service

    def options(self):
        return [
            ("Add New Document", self.add_document),
            ("View Document", self.view_document),
            ("Update Document", self.update_document),
            ("Delete Document", self.delete_document),
            ("List All Documents", self.list_documents),
            ("List Documents by Case", self.list_by_case),
            ("List Documents by Type", self.list_by_type),
            ("Search Documents by Title", self.search_documents),
        ]

    def _show(self, documents, title, empty):
        if not documents:
            self.io.info(empty)
            return
        self.io.table(DOCUMENT_COLUMNS, [document_row(d) for d in documents], title=title)

    def add_document(self):
        self.io.header("Add New Document")
        case_id = self.read_id("case")
        title = self.io.read_required("Title")
        document_type = self.io.choose("Select document type:", DOCUMENT_TYPE_LABELS)
        content = self.io.read_optional("Content (optional)")

        document = self.document_service.create_document(case_id, title, document_type, content)
        self.io.success(f"Document added successfully with ID: {document.id}")

    def view_document(self):
        document_id = self.read_id("document")
        document = self.document_service.get_document_by_id(document_id)
        if document is None:
            self.io.error(f"Document not found with ID: {document_id}")
            return

        self.io.header("Document Details")
        self.io.details(
            [
                ("ID", document.id),
                ("Case ID", document.case_id),
                ("Title", document.title),
                ("Type", label(DOCUMENT_TYPE_LABELS, document.type)),
                ("Content type", document.content_type),
            ]
        )
        self.io.message("Content:")
        self.io.message(self.document_service.get_document_content(document_id) or "(empty)")

    def update_document(self):
        document_id = self.read_id("document")
        document = self.document_service.get_document_by_id(document_id)
        if document is None:
            self.io.error(f"Document not found with ID: {document_id}")
            return

        self.io.info("Leave a field blank to keep the current value")
        title = self.io.read_optional(f"Title [{document.title}]")
        document_type = None
        if self.io.confirm(f"Change type (current: {label(DOCUMENT_TYPE_LABELS, document.type)})?"):
            document_type = self.io.choose("Select document type:", DOCUMENT_TYPE_LABELS)
        content = self.io.read_optional("New content")

        self.document_service.update_document(document_id, title=title, type=document_type, content=content)
        self.io.success("Document updated successfully")

    def delete_document(self):
        document_id = self.read_id("document")
        if not self.io.confirm("Are you sure you want to delete this document?"):
            self.io.info("Deletion cancelled")
            return
        self.document_service.delete_document(document_id)
        self.io.success("Document deleted successfully")

    def list_documents(self):
        self._show(self.document_service.get_all_documents(), "All Documents", "No documents found")

    def list_by_case(self):
        case_id = self.read_id("case")
        self._show(
            self.document_service.get_documents_by_case_id(case_id),
            f"Documents for Case {case_id}",
            "No documents found for this case",
        )

    def list_by_type(self):
        document_type = self.io.choose("Select document type:", DOCUMENT_TYPE_LABELS)
        self._show(
            self.document_service.get_documents_by_type(document_type),
            f"{label(DOCUMENT_TYPE_LABELS, document_type)} Documents",
            "No documents of this type",
        )

    def search_documents(self):
        title = self.io.read_required("Enter title to search")
        self._show(
            self.document_service.search_documents_by_title(title),
            "Search Results",
            f"No documents match '{title}'",
        )
