"""Display labels for every enumerated choice offered in the console."""

from legalcase.domain.models.enums import (
    CaseStatus,
    CaseType,
    DocumentType,
    HearingStatus,
    UserRole,
)

USER_ROLE_LABELS = {
    UserRole.ADMIN: "Administrator",
    UserRole.LAWYER: "Lawyer",
    UserRole.ASSISTANT: "Assistant",
    UserRole.JUDGE: "Judge",
    UserRole.CLIENT: "Client",
}

CASE_TYPE_LABELS = {
    CaseType.CIVIL: "Civil",
    CaseType.CRIMINAL: "Criminal",
    CaseType.FAMILY: "Family",
    CaseType.CORPORATE: "Corporate",
    CaseType.OTHER: "Other",
}

CASE_STATUS_LABELS = {
    CaseStatus.NEW: "New",
    CaseStatus.ACTIVE: "Active",
    CaseStatus.PENDING: "Pending",
    CaseStatus.CLOSED: "Closed",
    CaseStatus.ARCHIVED: "Archived",
}

HEARING_STATUS_LABELS = {
    HearingStatus.SCHEDULED: "Scheduled",
    HearingStatus.COMPLETED: "Completed",
    HearingStatus.POSTPONED: "Postponed",
    HearingStatus.CANCELLED: "Cancelled",
}

DOCUMENT_TYPE_LABELS = {
    DocumentType.CONTRACT: "Contract",
    DocumentType.EVIDENCE: "Evidence",
    DocumentType.PETITION: "Petition",
    DocumentType.COURT_ORDER: "Court order",
    DocumentType.OTHER: "Other",
}


def label(mapping, value) -> str:
    """Label for ``value``, or an empty string when it is unset."""
    if value is None:
        return ""
    return mapping.get(value, str(value))
