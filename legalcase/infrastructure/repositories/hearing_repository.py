"""
SQLAlchemy Implementation of Hearing Repository.
"""

from datetime import datetime
from typing import List, Optional

import pytz

from legalcase.config import get_settings
from legalcase.domain.models.enums import HearingStatus
from legalcase.domain.models.hearing import Hearing, to_epoch_seconds
from legalcase.domain.repositories.hearing_repository import HearingRepository
from legalcase.infrastructure.repositories.base_repository import SQLAlchemyRepository

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)


class SQLAlchemyHearingRepository(SQLAlchemyRepository[Hearing], HearingRepository):
    """Hearing repository implementation using SQLAlchemy."""

    def get_current_datetime(self) -> datetime:
        """Current wall-clock time in the configured timezone, as a naive value."""
        return datetime.now(tz).replace(tzinfo=None)

    def get_by_case_id(self, case_id: int) -> List[Hearing]:
        return (
            self.db.query(Hearing)
            .filter(Hearing.case_id == case_id)
            .order_by(Hearing.hearing_timestamp)
            .all()
        )

    def get_by_status(self, status: HearingStatus) -> List[Hearing]:
        return (
            self.db.query(Hearing)
            .filter(Hearing.status == status)
            .order_by(Hearing.hearing_timestamp)
            .all()
        )

    def get_by_date_range(self, start: datetime, end: datetime) -> List[Hearing]:
        return (
            self.db.query(Hearing)
            .filter(
                Hearing.hearing_timestamp >= to_epoch_seconds(start),
                Hearing.hearing_timestamp <= to_epoch_seconds(end),
            )
            .order_by(Hearing.hearing_timestamp)
            .all()
        )

    def get_upcoming(self, now: Optional[datetime] = None) -> List[Hearing]:
        now = now or self.get_current_datetime()
        return (
            self.db.query(Hearing)
            .filter(
                Hearing.hearing_timestamp > to_epoch_seconds(now),
                Hearing.status != HearingStatus.CANCELLED,
            )
            .order_by(Hearing.hearing_timestamp.asc())
            .all()
        )
