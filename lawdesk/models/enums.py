from __future__ import annotations

import enum


class RequestKind(enum.StrEnum):
    """Category of a workflow request; decides which submission rules apply."""

    LEAVE = "LEAVE"
    EXPENSE = "EXPENSE"
    DOCUMENT = "DOCUMENT"
    CASE = "CASE"
    OTHER = "OTHER"


class RequestStatus(enum.StrEnum):
    """State machine for workflow requests."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Priority(enum.StrEnum):
    """How urgently a request needs a decision."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ReferenceType(enum.StrEnum):
    """Kind of back-office record a request may point at."""

    LEAVE_REQUEST = "LEAVE_REQUEST"
    TASK = "TASK"
    CASE = "CASE"
    INVOICE = "INVOICE"
    OTHER = "OTHER"


class Role(enum.StrEnum):
    """Team member roles, compared by exact value."""

    SENIOR_ASSOCIATE = "Senior Associate"
    LEGAL_COUNSEL = "Legal Counsel"
    JUNIOR_ASSOCIATE = "Junior Associate"
    INTERN = "Intern"
    PUPIL = "Pupil"
    OFFICE_ASSISTANT = "Office Assistant"


class AuditAction(enum.StrEnum):
    """Action recorded in the audit log."""

    SUBMIT = "SUBMIT"
    APPROVE = "APPROVE"
    REJECT = "REJECT"
