# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Query, status

from lawdesk.api.deps import AdjudicatorDep, AuthDep, DirectoryDep, FilterDep
from lawdesk.db import SessionDep
from lawdesk.schemas.request import (
    AdjudicationPayload,
    ApprovalPayload,
    AuditEntryResponse,
    RequestListResponse,
    RequestResponse,
)
from lawdesk.services import query, workflow

approvals_router = APIRouter(prefix="/approvals", tags=["approvals"])


@approvals_router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
async def submit_approval(
    payload: ApprovalPayload,
    session: SessionDep,
    auth: AuthDep,
    directory: DirectoryDep,
) -> RequestResponse:
    """Submit an approval request of any kind."""
    request = await workflow.submit(session, auth, payload)
    return (await query.enrich([request], directory))[0]


@approvals_router.get("", response_model=RequestListResponse)
async def list_approvals(
    session: SessionDep,
    auth: AuthDep,
    directory: DirectoryDep,
    request_filter: FilterDep,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> RequestListResponse:
    """List approval requests with optional status, kind and requester filters."""
    return await query.list_visible_requests(session, auth, request_filter, directory, page, limit)


@approvals_router.get("/{request_id}", response_model=RequestResponse)
async def get_approval(
    request_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
    directory: DirectoryDep,
) -> RequestResponse:
    """Get a single approval request."""
    return await query.get_visible_request(session, auth, request_id, directory)


@approvals_router.get("/{request_id}/history", response_model=list[AuditEntryResponse])
async def get_approval_history(
    request_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
) -> list[AuditEntryResponse]:
    """Get the audit history of an approval request."""
    return await query.get_request_history(session, auth, request_id)


@approvals_router.patch("/{request_id}/status", response_model=RequestResponse)
async def adjudicate_approval(
    request_id: uuid.UUID,
    payload: AdjudicationPayload,
    session: SessionDep,
    auth: AdjudicatorDep,
    directory: DirectoryDep,
) -> RequestResponse:
    """Approve or reject a pending request (privileged roles only)."""
    request = await workflow.adjudicate(session, auth, request_id, payload)
    return (await query.enrich([request], directory))[0]
