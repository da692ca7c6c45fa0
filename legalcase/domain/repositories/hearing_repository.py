"""
Hearing Repository Interface.
Defines specific data access operations for Hearings.
"""

from datetime import datetime
from typing import List, Optional

from legalcase.domain.repositories.base import BaseRepository
from legalcase.domain.models.enums import HearingStatus
from legalcase.domain.models.hearing import Hearing


class HearingRepository(BaseRepository[Hearing]):
    """Interface for Hearing-specific operations."""

    def get_by_case_id(self, case_id: int) -> List[Hearing]:
        ...

    def get_by_status(self, status: HearingStatus) -> List[Hearing]:
        ...

    def get_by_date_range(self, start: datetime, end: datetime) -> List[Hearing]:
        """Hearings between ``start`` and ``end``, both inclusive."""
        ...

    def get_upcoming(self, now: Optional[datetime] = None) -> List[Hearing]:
        """Hearings after ``now`` that are not cancelled, soonest first."""
        ...
