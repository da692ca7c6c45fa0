"""Hearing service — scheduling, rescheduling and status tracking of hearings."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import structlog

from legalcase.application.services.base import build_payload, storage_errors
from legalcase.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from legalcase.domain.models.enums import HearingStatus
from legalcase.domain.models.hearing import Hearing
from legalcase.domain.repositories.case_repository import CaseRepository
from legalcase.domain.repositories.hearing_repository import HearingRepository
from legalcase.domain.schemas.hearing import HearingCreate, HearingUpdate

logger = structlog.get_logger(__name__)


def reschedule_note(old: Optional[datetime], new: datetime) -> str:
    return f"Hearing rescheduled from: {_format(old)} to: {_format(new)}"


def _format(value: Optional[datetime]) -> str:
    return value.isoformat(sep=" ", timespec="seconds") if value else "unscheduled"


class HearingService:
    def __init__(self, hearing_repo: HearingRepository, case_repo: CaseRepository):
        self.hearing_repo = hearing_repo
        self.case_repo = case_repo

    def _require_case(self, case_id: int) -> None:
        if self.case_repo.get_by_id(case_id) is None:
            raise EntityNotFoundException("Case not found", details={"case_id": case_id})

    def _require_hearing(self, hearing_id: int) -> Hearing:
        hearing = self.hearing_repo.get_by_id(hearing_id)
        if hearing is None:
            raise EntityNotFoundException("Hearing not found", details={"hearing_id": hearing_id})
        return hearing

    def create_hearing(
        self,
        case_id: int,
        hearing_date: datetime,
        judge: str,
        location: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Hearing:
        with storage_errors("Could not create hearing", case_id=case_id):
            self._require_case(case_id)
            if hearing_date is None:
                raise BusinessRuleViolationException("Hearing date is required")

            payload = build_payload(
                HearingCreate,
                case_id=case_id,
                hearing_date=hearing_date,
                judge=judge,
                location=location,
                notes=notes,
                status=HearingStatus.SCHEDULED,
            )
            hearing = self.hearing_repo.create(payload)
            logger.info("Hearing scheduled", hearing_id=hearing.id, case_id=case_id, date=str(hearing.hearing_date))
            return hearing

    def get_hearing_by_id(self, hearing_id: int) -> Optional[Hearing]:
        with storage_errors("Could not retrieve hearing", hearing_id=hearing_id):
            return self.hearing_repo.get_by_id(hearing_id)

    def get_all_hearings(self) -> List[Hearing]:
        with storage_errors("Could not retrieve hearings"):
            return self.hearing_repo.list()

    def get_hearings_by_case_id(self, case_id: int) -> List[Hearing]:
        with storage_errors("Could not retrieve hearings", case_id=case_id):
            self._require_case(case_id)
            return self.hearing_repo.get_by_case_id(case_id)

    def get_hearings_by_status(self, status: HearingStatus) -> List[Hearing]:
        with storage_errors("Could not retrieve hearings", status=status):
            return self.hearing_repo.get_by_status(status)

    def get_hearings_by_date_range(self, start: datetime, end: datetime) -> List[Hearing]:
        if start is None or end is None:
            raise BusinessRuleViolationException("Start and end dates are required")
        if start > end:
            raise BusinessRuleViolationException("Start date must be before end date")

        with storage_errors("Could not retrieve hearings", start=str(start), end=str(end)):
            return self.hearing_repo.get_by_date_range(start, end)

    def get_upcoming_hearings(self) -> List[Hearing]:
        with storage_errors("Could not retrieve hearings"):
            return self.hearing_repo.get_upcoming()

    def update_hearing(
        self,
        hearing_id: int,
        hearing_date: Optional[datetime] = None,
        judge: Optional[str] = None,
        location: Optional[str] = None,
        notes: Optional[str] = None,
        status: Optional[HearingStatus] = None,
    ) -> Hearing:
        """Partial update: ``None`` (or an empty judge) keeps the current value."""
        with storage_errors("Could not update hearing", hearing_id=hearing_id):
            hearing = self._require_hearing(hearing_id)

            changes: Dict[str, Any] = {}
            if hearing_date is not None:
                changes["hearing_date"] = hearing_date
            if judge:
                changes["judge"] = judge
            if location is not None:
                changes["location"] = location
            if notes is not None:
                changes["notes"] = notes
            if status is not None:
                changes["status"] = status

            hearing = self.hearing_repo.update(hearing, build_payload(HearingUpdate, **changes))
            logger.info("Hearing updated", hearing_id=hearing_id, fields=sorted(changes))
            return hearing

    def update_hearing_status(self, hearing_id: int, status: HearingStatus) -> Hearing:
        with storage_errors("Could not update hearing status", hearing_id=hearing_id):
            hearing = self._require_hearing(hearing_id)
            if status is None:
                raise BusinessRuleViolationException("Hearing status is required")

            hearing = self.hearing_repo.update(hearing, build_payload(HearingUpdate, status=status))
            logger.info("Hearing status changed", hearing_id=hearing_id, status=status)
            return hearing

    def reschedule_hearing(self, hearing_id: int, new_date: datetime) -> Hearing:
        """Move a hearing to ``new_date`` and mark it SCHEDULED again.

        A line recording the old and new date is appended to the notes; any
        earlier note text is kept.
        """
        if new_date is None:
            raise BusinessRuleViolationException("New hearing date is required")

        with storage_errors("Could not reschedule hearing", hearing_id=hearing_id):
            hearing = self._require_hearing(hearing_id)

            old_date = hearing.hearing_date
            new_date = new_date.replace(microsecond=0)
            note = reschedule_note(old_date, new_date)
            notes = f"{hearing.notes}\n{note}" if hearing.notes else note

            payload = build_payload(
                HearingUpdate,
                hearing_date=new_date,
                status=HearingStatus.SCHEDULED,
                notes=notes,
            )
            hearing = self.hearing_repo.update(hearing, payload)
            logger.info("Hearing rescheduled", hearing_id=hearing_id, old=str(old_date), new=str(new_date))
            return hearing

    def delete_hearing(self, hearing_id: int) -> None:
        with storage_errors("Could not delete hearing", hearing_id=hearing_id):
            self._require_hearing(hearing_id)
            self.hearing_repo.delete(hearing_id)
            logger.info("Hearing deleted", hearing_id=hearing_id)
