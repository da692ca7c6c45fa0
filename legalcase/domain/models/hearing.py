"""Hearing domain model — maps to the 'hearings' table.

The hearing date is stored as epoch seconds in the ``hearing_date`` column.
The naive ``datetime`` handed to the model is read as UTC wall-clock time,
so writing and reading back yields the same value with the sub-second part
discarded.
"""

import calendar
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import BigInteger, Column, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from legalcase.domain.models.base import TimestampMixin
from legalcase.domain.models.enums import HearingStatus
from legalcase.infrastructure.database import Base

_EPOCH = datetime(1970, 1, 1)


def to_epoch_seconds(value: datetime) -> int:
    """Whole seconds since the epoch; aware values are converted to UTC first."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return calendar.timegm(value.timetuple())


def from_epoch_seconds(seconds: int) -> datetime:
    return _EPOCH + timedelta(seconds=seconds)


class Hearing(TimestampMixin, Base):
    __tablename__ = "hearings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    case_id = Column(Integer, ForeignKey("cases.id", ondelete="CASCADE"), nullable=False, index=True)
    hearing_timestamp = Column("hearing_date", BigInteger, nullable=False, index=True)
    judge = Column(String(200), nullable=False)
    location = Column(String(300), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(
        Enum(HearingStatus, name="hearing_status"),
        nullable=False,
        default=HearingStatus.SCHEDULED,
        index=True,
    )

    case = relationship("Case", back_populates="hearings")

    @property
    def hearing_date(self) -> Optional[datetime]:
        if self.hearing_timestamp is None:
            return None
        return from_epoch_seconds(self.hearing_timestamp)

    @hearing_date.setter
    def hearing_date(self, value: Optional[datetime]) -> None:
        self.hearing_timestamp = None if value is None else to_epoch_seconds(value)

    def __repr__(self):
        return f"<Hearing {self.id} - {self.hearing_date} ({self.status})>"


# Related mappers referenced by name above
from legalcase.domain.models import case  # noqa: E402,F401
