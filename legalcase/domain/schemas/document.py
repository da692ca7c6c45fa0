"""Pydantic schemas for Document domain."""

from typing import Optional

from pydantic import BaseModel

from legalcase.domain.models.document import DEFAULT_CONTENT_TYPE
from legalcase.domain.models.enums import DocumentType


class DocumentCreate(BaseModel):
    case_id: int
    title: str
    type: DocumentType
    content: Optional[str] = None
    content_type: str = DEFAULT_CONTENT_TYPE


class DocumentUpdate(BaseModel):
    """Partial update; only fields that were set are applied."""
    title: Optional[str] = None
    type: Optional[DocumentType] = None
    content: Optional[str] = None
    content_type: Optional[str] = None
