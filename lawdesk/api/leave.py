# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from lawdesk.api.deps import AdjudicatorDep, AuthDep, DirectoryDep, FilterDep
from lawdesk.db import SessionDep
from lawdesk.models.enums import RequestKind
from lawdesk.schemas.request import (
    AdjudicationPayload,
    ApprovalPayload,
    AuditEntryResponse,
    LeavePayload,
    RequestListResponse,
    RequestResponse,
)
from lawdesk.services import query, workflow

leave_router = APIRouter(prefix="/leave", tags=["leave"])


@leave_router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
async def submit_leave_request(
    payload: LeavePayload,
    session: SessionDep,
    auth: AuthDep,
    directory: DirectoryDep,
) -> RequestResponse:
    """Submit a leave request for the authenticated team member."""
    submission = ApprovalPayload(
        kind=RequestKind.LEAVE,
        start_date=payload.start_date,
        end_date=payload.end_date,
        reason=payload.reason,
        comments=payload.comments,
    )
    request = await workflow.submit(session, auth, submission)
    return (await query.enrich([request], directory))[0]


@leave_router.get("", response_model=RequestListResponse)
async def list_leave_requests(
    session: SessionDep,
    auth: AuthDep,
    directory: DirectoryDep,
    request_filter: FilterDep,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> RequestListResponse:
    """List leave requests. Non-privileged callers only see their own."""
    request_filter = request_filter.model_copy(update={"kind": RequestKind.LEAVE})
    return await query.list_visible_requests(session, auth, request_filter, directory, page, limit)


@leave_router.get("/{request_id}", response_model=RequestResponse)
async def get_leave_request(
    request_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
    directory: DirectoryDep,
) -> RequestResponse:
    """Get a single leave request."""
    return await query.get_visible_request(session, auth, request_id, directory, RequestKind.LEAVE)


@leave_router.get("/{request_id}/history", response_model=list[AuditEntryResponse])
async def get_leave_request_history(
    request_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
) -> list[AuditEntryResponse]:
    """Get the audit history of a leave request."""
    return await query.get_request_history(session, auth, request_id, RequestKind.LEAVE)


@leave_router.patch("/{request_id}/status", response_model=RequestResponse)
async def adjudicate_leave_request(
    request_id: uuid.UUID,
    payload: AdjudicationPayload,
    session: SessionDep,
    auth: AdjudicatorDep,
    directory: DirectoryDep,
) -> RequestResponse:
    """Approve or reject a pending leave request (privileged roles only)."""
    request = await workflow.adjudicate(session, auth, request_id, payload, kind=RequestKind.LEAVE)
    return (await query.enrich([request], directory))[0]
