from legalcase.application.services.hearing_service import HearingService
from legalcase.interfaces.console.base_menu import Menu
from legalcase.interfaces.console.helper import ConsoleIO, format_datetime
from legalcase.interfaces.console.labels import HEARING_STATUS_LABELS, label

HEARING_COLUMNS = ("ID", "Case ID", "Date", "Judge", "Location", "Status")


def hearing_row(hearing):
    return (
        hearing.id,
        hearing.case_id,
        format_datetime(hearing.hearing_date),
        hearing.judge,
        hearing.location,
        label(HEARING_STATUS_LABELS, hearing.status),
    )


class HearingMenu(Menu):
    title = "Hearing Calendar"

    def __init__(self, io: ConsoleIO, hearing_service: HearingService):
        super().__init__(io)
        self.hearing_service = hearing_service

    def options(self):
        return [
            ("Add New Hearing", self.add_hearing),
            ("View Hearing Details", self.view_hearing),
            ("Update Hearing", self.update_hearing),
            ("Reschedule Hearing", self.reschedule_hearing),
            ("Change Hearing Status", self.change_status),
            ("Delete Hearing", self.delete_hearing),
            ("List Upcoming Hearings", self.list_upcoming),
            ("List Hearings by Case", self.list_by_case),
            ("List Hearings by Date Range", self.list_by_date_range),
        ]

    def _show(self, hearings, title, empty):
        if not hearings:
            self.io.info(empty)
            return
        self.io.table(HEARING_COLUMNS, [hearing_row(h) for h in hearings], title=title)

    def add_hearing(self):
        self.io.header("Add New Hearing")
        case_id = self.read_id("case")
        hearing_date = self.io.read_datetime("Hearing date and time")
        judge = self.io.read_required("Judge")
        location = self.io.read_optional("Location (optional)")
        notes = self.io.read_optional("Notes (optional)")

        hearing = self.hearing_service.create_hearing(case_id, hearing_date, judge, location, notes)
        self.io.success(f"Hearing added successfully with ID: {hearing.id}")

    def view_hearing(self):
        hearing_id = self.read_id("hearing")
        hearing = self.hearing_service.get_hearing_by_id(hearing_id)
        if hearing is None:
            self.io.error(f"Hearing not found with ID: {hearing_id}")
            return

        self.io.header("Hearing Details")
        self.io.details(
            [
                ("ID", hearing.id),
                ("Case ID", hearing.case_id),
                ("Date", format_datetime(hearing.hearing_date)),
                ("Judge", hearing.judge),
                ("Location", hearing.location),
                ("Status", label(HEARING_STATUS_LABELS, hearing.status)),
                ("Notes", hearing.notes),
            ]
        )

    def update_hearing(self):
        hearing_id = self.read_id("hearing")
        hearing = self.hearing_service.get_hearing_by_id(hearing_id)
        if hearing is None:
            self.io.error(f"Hearing not found with ID: {hearing_id}")
            return

        self.io.info("Leave a field blank to keep the current value")
        hearing_date = None
        if self.io.confirm(f"Change date (current: {format_datetime(hearing.hearing_date)})?"):
            hearing_date = self.io.read_datetime("New hearing date and time")
        judge = self.io.read_optional(f"Judge [{hearing.judge}]")
        location = self.io.read_optional(f"Location [{hearing.location or ''}]")
        notes = self.io.read_optional(f"Notes [{hearing.notes or ''}]")

        self.hearing_service.update_hearing(
            hearing_id, hearing_date=hearing_date, judge=judge, location=location, notes=notes
        )
        self.io.success("Hearing updated successfully")

    def reschedule_hearing(self):
        hearing_id = self.read_id("hearing")
        new_date = self.io.read_datetime("New hearing date and time")
        self.hearing_service.reschedule_hearing(hearing_id, new_date)
        self.io.success("Hearing rescheduled successfully")

    def change_status(self):
        hearing_id = self.read_id("hearing")
        status = self.io.choose("Select hearing status:", HEARING_STATUS_LABELS)
        self.hearing_service.update_hearing_status(hearing_id, status)
        self.io.success(f"Hearing status changed to {label(HEARING_STATUS_LABELS, status)}")

    def delete_hearing(self):
        hearing_id = self.read_id("hearing")
        if not self.io.confirm("Are you sure you want to delete this hearing?"):
            self.io.info("Deletion cancelled")
            return
        self.hearing_service.delete_hearing(hearing_id)
        self.io.success("Hearing deleted successfully")

    def list_upcoming(self):
        self._show(self.hearing_service.get_upcoming_hearings(), "Upcoming Hearings", "No upcoming hearings")

    def list_by_case(self):
        case_id = self.read_id("case")
        self._show(
            self.hearing_service.get_hearings_by_case_id(case_id),
            f"Hearings for Case {case_id}",
            "No hearings found for this case",
        )

    def list_by_date_range(self):
        start = self.io.read_datetime("Start of range")
        end = self.io.read_datetime("End of range")
        self._show(
            self.hearing_service.get_hearings_by_date_range(start, end),
            "Hearings in Range",
            "No hearings found in this date range",
        )
