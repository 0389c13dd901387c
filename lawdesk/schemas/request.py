# ruff: noqa: TC001, TC003
from __future__ import annotations

import enum
import re
import uuid
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field, field_validator

from lawdesk.models.enums import AuditAction, Priority, ReferenceType, RequestKind, RequestStatus

_SEPARATORS = re.compile(r"[\s_-]+")


def _squash(value: str) -> str:
    return _SEPARATORS.sub("", value).upper()


def _lenient(enum_cls: type[enum.StrEnum]) -> BeforeValidator:
    """Match enum values ignoring case and separators.

    "approved", "Approved" and "APPROVED" are the same status; "LeaveRequest",
    "leave_request" and "LEAVE_REQUEST" are the same reference type.
    """
    lookup = {_squash(member.value): member.value for member in enum_cls}

    def parse(value: Any) -> Any:
        if isinstance(value, str):
            return lookup.get(_squash(value), value.strip())
        return value

    return BeforeValidator(parse)


KindField = Annotated[RequestKind, _lenient(RequestKind)]
StatusField = Annotated[RequestStatus, _lenient(RequestStatus)]
PriorityField = Annotated[Priority, _lenient(Priority)]
ReferenceTypeField = Annotated[ReferenceType, _lenient(ReferenceType)]

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class LeavePayload(BaseModel):
    """Request body for submitting a leave request.

    Range and length rules are checked by the store so that the same rules
    apply however a leave request is created.
    """

    start_date: date
    end_date: date
    reason: str = Field(max_length=2000)
    comments: str | None = Field(default=None, max_length=1000)


class ApprovalPayload(BaseModel):
    """Request body for submitting a generic approval request."""

    kind: KindField = Field(validation_alias=AliasChoices("kind", "type"))
    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    priority: PriorityField = Priority.MEDIUM
    reference_id: uuid.UUID | None = None
    reference_type: ReferenceTypeField | None = None
    comments: str | None = Field(default=None, max_length=1000)

    # Required when kind is LEAVE.
    start_date: date | None = None
    end_date: date | None = None
    reason: str | None = Field(default=None, max_length=2000)


class AdjudicationPayload(BaseModel):
    """Request body for PATCH .../{id}/status."""

    status: StatusField
    comments: str | None = Field(default=None, max_length=1000)

    @field_validator("status")
    @classmethod
    def _validate_terminal(cls, value: RequestStatus) -> RequestStatus:
        if value == RequestStatus.PENDING:
            msg = "status must be APPROVED or REJECTED"
            raise ValueError(msg)
        return value


class RequestFilter(BaseModel):
    """Conjunction of optional list filters."""

    status: StatusField | None = None
    kind: KindField | None = None
    requester_id: uuid.UUID | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class UserSummary(BaseModel):
    """Display fields joined from the user directory."""

    id: uuid.UUID
    name: str | None = None
    email: str | None = None


class RequestResponse(BaseModel):
    """Response schema for a single workflow request."""

    id: uuid.UUID
    kind: RequestKind
    status: RequestStatus
    title: str
    description: str | None
    priority: Priority
    reference_id: uuid.UUID | None
    reference_type: ReferenceType | None
    start_date: date | None
    end_date: date | None
    reason: str | None
    comments: str | None
    requester_id: uuid.UUID
    approver_id: uuid.UUID | None
    requester: UserSummary | None = None
    approver: UserSummary | None = None
    submitted_at: datetime
    adjudicated_at: datetime | None
    updated_at: datetime


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class RequestListResponse(BaseModel):
    """Paginated list of workflow requests."""

    items: list[RequestResponse]
    pagination: Pagination


class AuditEntryResponse(BaseModel):
    """One entry of a request's history."""

    id: uuid.UUID
    request_id: uuid.UUID
    actor_id: uuid.UUID
    action: AuditAction
    comment: str | None
    created_at: datetime
