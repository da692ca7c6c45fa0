"""Pydantic schemas for Case domain."""

from typing import Optional

from pydantic import BaseModel, field_validator

from legalcase.domain.models.enums import CaseStatus, CaseType


class CaseBase(BaseModel):
    case_number: Optional[str] = None
    title: str
    type: CaseType
    description: Optional[str] = None

    @field_validator("case_number")
    @classmethod
    def blank_case_number_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class CaseCreate(CaseBase):
    status: CaseStatus = CaseStatus.NEW


class CaseUpdate(CaseBase):
    status: CaseStatus
