# ruff: noqa: TC003
from __future__ import annotations

import math
import uuid
from typing import TYPE_CHECKING

from lawdesk.exceptions import ForbiddenError
from lawdesk.models.enums import AuditAction, Priority, ReferenceType, RequestKind, RequestStatus
from lawdesk.schemas.request import (
    AuditEntryResponse,
    Pagination,
    RequestListResponse,
    RequestResponse,
    UserSummary,
)
from lawdesk.services import authority, store
from lawdesk.services.audit import list_audit_entries

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from lawdesk.models.request import WorkflowRequest
    from lawdesk.schemas.auth import AuthContext
    from lawdesk.schemas.request import RequestFilter
    from lawdesk.services.directory import DirectoryService


async def _summaries(directory: DirectoryService, user_ids: set[uuid.UUID]) -> dict[uuid.UUID, UserSummary]:
    """Look up display fields for each user once."""
    summaries: dict[uuid.UUID, UserSummary] = {}
    for user_id in user_ids:
        user = await directory.get_user(user_id)
        if user is None:
            summaries[user_id] = UserSummary(id=user_id)
        else:
            summaries[user_id] = UserSummary(id=user_id, name=user.full_name, email=user.email)
    return summaries


def build_request_response(
    request: WorkflowRequest,
    summaries: dict[uuid.UUID, UserSummary] | None = None,
) -> RequestResponse:
    """Map a request model to its response schema."""
    summaries = summaries or {}
    return RequestResponse(
        id=request.id,
        kind=RequestKind(request.kind),
        status=RequestStatus(request.status),
        title=request.title,
        description=request.description,
        priority=Priority(request.priority),
        reference_id=request.reference_id,
        reference_type=ReferenceType(request.reference_type) if request.reference_type else None,
        start_date=request.start_date,
        end_date=request.end_date,
        reason=request.reason,
        comments=request.comments,
        requester_id=request.requester_id,
        approver_id=request.approver_id,
        requester=summaries.get(request.requester_id),
        approver=summaries.get(request.approver_id) if request.approver_id else None,
        submitted_at=request.submitted_at,
        adjudicated_at=request.adjudicated_at,
        updated_at=request.updated_at,
    )


async def enrich(requests: list[WorkflowRequest], directory: DirectoryService) -> list[RequestResponse]:
    """Join requester/approver display fields onto a batch of requests."""
    user_ids: set[uuid.UUID] = set()
    for r in requests:
        user_ids.add(r.requester_id)
        if r.approver_id is not None:
            user_ids.add(r.approver_id)
    summaries = await _summaries(directory, user_ids)
    return [build_request_response(r, summaries) for r in requests]


async def list_visible_requests(
    session: AsyncSession,
    auth: AuthContext,
    request_filter: RequestFilter,
    directory: DirectoryService,
    page: int = 1,
    limit: int = 10,
) -> RequestListResponse:
    """List the page of requests the principal may see."""
    scoped = authority.scope_for_list(auth, request_filter)
    requests, total = await store.list_requests(session, scoped, page, limit)
    return RequestListResponse(
        items=await enrich(requests, directory),
        pagination=Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit)),
    )


async def _get_visible(
    session: AsyncSession,
    auth: AuthContext,
    request_id: uuid.UUID,
    kind: RequestKind | None,
) -> WorkflowRequest:
    request = await store.get_request_or_404(session, request_id, kind)
    if not authority.can_view(auth, request):
        raise ForbiddenError("Not authorized to view this request")
    return request


async def get_visible_request(
    session: AsyncSession,
    auth: AuthContext,
    request_id: uuid.UUID,
    directory: DirectoryService,
    kind: RequestKind | None = None,
) -> RequestResponse:
    """Get a single request the principal may see."""
    request = await _get_visible(session, auth, request_id, kind)
    return (await enrich([request], directory))[0]


async def get_request_history(
    session: AsyncSession,
    auth: AuthContext,
    request_id: uuid.UUID,
    kind: RequestKind | None = None,
) -> list[AuditEntryResponse]:
    """Return who did what to a request, oldest first."""
    await _get_visible(session, auth, request_id, kind)
    entries = await list_audit_entries(session, request_id)
    return [
        AuditEntryResponse(
            id=e.id,
            request_id=e.request_id,
            actor_id=e.actor_id,
            action=AuditAction(e.action),
            comment=e.comment,
            created_at=e.created_at,
        )
        for e in entries
    ]
