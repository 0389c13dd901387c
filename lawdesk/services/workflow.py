# ruff: noqa: TC003
"""Adjudication state machine shared by leave requests and approvals.

PENDING is the only state with outgoing transitions:

    PENDING --approve--> APPROVED
    PENDING --reject-->  REJECTED
"""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import TYPE_CHECKING, Any

from lawdesk.config import get_settings
from lawdesk.exceptions import ConflictError, ForbiddenError, ValidationError
from lawdesk.models.base import now_utc
from lawdesk.models.enums import AuditAction, RequestKind, RequestStatus
from lawdesk.services import authority, store
from lawdesk.services.audit import model_to_audit_dict, write_audit_log

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from lawdesk.models.request import WorkflowRequest
    from lawdesk.schemas.auth import AuthContext
    from lawdesk.schemas.request import AdjudicationPayload, ApprovalPayload

logger = logging.getLogger(__name__)

_TRANSITIONS: dict[tuple[RequestStatus, RequestStatus], AuditAction] = {
    (RequestStatus.PENDING, RequestStatus.APPROVED): AuditAction.APPROVE,
    (RequestStatus.PENDING, RequestStatus.REJECTED): AuditAction.REJECT,
}

ALREADY_PROCESSED = "Request has already been processed"


def next_status(current: RequestStatus, target: RequestStatus) -> AuditAction:
    """Return the audit action for a legal transition.

    Raises ValidationError for a non-terminal target and ConflictError when
    the request has already left PENDING.
    """
    if target == RequestStatus.PENDING:
        raise ValidationError("status must be APPROVED or REJECTED")
    action = _TRANSITIONS.get((current, target))
    if action is None:
        raise ConflictError(ALREADY_PROCESSED)
    return action


async def submit(
    session: AsyncSession,
    auth: AuthContext,
    payload: ApprovalPayload,
    *,
    today: date | None = None,
) -> WorkflowRequest:
    """Create a PENDING request on behalf of the acting principal."""
    if not authority.can_submit(auth, payload.kind):
        raise ForbiddenError(f"Not allowed to submit {payload.kind.value} requests")

    request = await store.create_request(session, auth.user_id, payload, today=today)

    await write_audit_log(
        session,
        request_id=request.id,
        actor_id=auth.user_id,
        action=AuditAction.SUBMIT,
        comment=request.comments,
        after_json=model_to_audit_dict(request),
    )

    await session.commit()
    await session.refresh(request)
    logger.info("Request %s (%s) submitted by %s", request.id, request.kind, auth.user_id)
    return request


async def adjudicate(
    session: AsyncSession,
    auth: AuthContext,
    request_id: uuid.UUID,
    payload: AdjudicationPayload,
    *,
    kind: RequestKind | None = None,
) -> WorkflowRequest:
    """Approve or reject a PENDING request.

    Role is authorized before the row is read. Self-adjudication is refused
    unless ``allow_self_approval`` is set. The decision is written by a
    conditional update that only lands while the row is still PENDING, so
    approver, timestamp and status change in one statement.
    """
    # 1. Authorize before touching the row.
    if not authority.can_adjudicate(auth):
        logger.warning("Adjudication of %s refused for role %r", request_id, auth.role)
        raise ForbiddenError("You do not have permission to approve or reject requests")

    # 2. Fetch.
    request = await store.get_request_or_404(session, request_id, kind)

    if request.requester_id == auth.user_id and not get_settings().allow_self_approval:
        raise ForbiddenError("You cannot adjudicate your own request")

    # 3. Check state.
    action = next_status(RequestStatus(request.status), payload.status)

    # 4. Mutate.
    before_dict = model_to_audit_dict(request)
    values: dict[str, Any] = {
        "status": payload.status.value,
        "approver_id": auth.user_id,
        "adjudicated_at": now_utc(),
    }
    comments = (payload.comments or "").strip()
    if comments:
        values["comments"] = comments

    if not await store.transition_if_pending(session, request_id, values):
        # Rollback expires ``request``; only plain values may be used after it.
        await session.rollback()
        logger.warning("Request %s was resolved concurrently; %s by %s lost", request_id, action, auth.user_id)
        raise ConflictError(ALREADY_PROCESSED)

    await session.refresh(request)

    await write_audit_log(
        session,
        request_id=request.id,
        actor_id=auth.user_id,
        action=action,
        comment=comments or None,
        before_json=before_dict,
        after_json=model_to_audit_dict(request),
    )

    await session.commit()
    await session.refresh(request)
    logger.info("Request %s %s by %s", request.id, request.status, auth.user_id)
    return request
