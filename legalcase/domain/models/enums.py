"""Enumerations shared by the domain models."""

import enum


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    LAWYER = "LAWYER"
    ASSISTANT = "ASSISTANT"
    JUDGE = "JUDGE"
    CLIENT = "CLIENT"


class CaseType(str, enum.Enum):
    CIVIL = "CIVIL"
    CRIMINAL = "CRIMINAL"
    FAMILY = "FAMILY"
    CORPORATE = "CORPORATE"
    OTHER = "OTHER"


class CaseStatus(str, enum.Enum):
    NEW = "NEW"
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    CLOSED = "CLOSED"
    ARCHIVED = "ARCHIVED"


class HearingStatus(str, enum.Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    POSTPONED = "POSTPONED"
    CANCELLED = "CANCELLED"


class DocumentType(str, enum.Enum):
    CONTRACT = "CONTRACT"
    EVIDENCE = "EVIDENCE"
    PETITION = "PETITION"
    COURT_ORDER = "COURT_ORDER"
    OTHER = "OTHER"
