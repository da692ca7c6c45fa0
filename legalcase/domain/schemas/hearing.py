"""Pydantic schemas for Hearing domain."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from legalcase.domain.models.enums import HearingStatus


class HearingCreate(BaseModel):
    case_id: int
    hearing_date: datetime
    judge: str
    location: Optional[str] = None
    notes: Optional[str] = None
    status: HearingStatus = HearingStatus.SCHEDULED


class HearingUpdate(BaseModel):
    """Partial update; only fields that were set are applied."""
    hearing_date: Optional[datetime] = None
    judge: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[HearingStatus] = None
