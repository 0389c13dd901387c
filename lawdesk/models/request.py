# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

import sqlalchemy as sa
from sqlmodel import Field

from lawdesk.models.base import TimestampMixin, UUIDBase, now_utc
from lawdesk.models.enums import Priority, RequestStatus


class WorkflowRequest(UUIDBase, TimestampMixin, table=True):
    """A leave or approval request moving through the adjudication workflow."""

    __tablename__ = "workflow_request"
    __table_args__ = (
        sa.Index("ix_request_requester_status", "requester_id", "status"),
        sa.Index("ix_request_approver_status", "approver_id", "status"),
        sa.Index("ix_request_status_submitted", "status", "submitted_at"),
    )

    kind: str = Field(max_length=20, index=True)
    requester_id: uuid.UUID = Field(index=True)
    approver_id: uuid.UUID | None = None
    status: str = Field(
        default=RequestStatus.PENDING, max_length=20, sa_column_kwargs={"server_default": "PENDING"}
    )
    title: str = Field(max_length=200)
    description: str | None = None
    priority: str = Field(default=Priority.MEDIUM, max_length=20, sa_column_kwargs={"server_default": "MEDIUM"})
    reference_id: uuid.UUID | None = None
    reference_type: str | None = Field(default=None, max_length=50)

    # Leave payload, only populated for LEAVE requests.
    start_date: date | None = None
    end_date: date | None = None
    reason: str | None = None

    comments: str | None = None
    submitted_at: datetime = Field(
        default_factory=now_utc,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    adjudicated_at: datetime | None = Field(default=None, sa_type=sa.DateTime(timezone=True))  # ty: ignore[invalid-argument-type]
