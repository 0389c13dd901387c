# ruff: noqa: TC003
"""Persistence for workflow requests.

The store validates submissions and reads/writes rows. It does not know
about roles or the state machine; the workflow engine owns those.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select, update
from sqlmodel import col

from lawdesk.exceptions import NotFoundError, ValidationError
from lawdesk.models.base import now_utc
from lawdesk.models.enums import RequestKind, RequestStatus
from lawdesk.models.request import WorkflowRequest

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from lawdesk.schemas.request import ApprovalPayload, RequestFilter

MIN_REASON_LENGTH = 10
MIN_TITLE_LENGTH = 3

# Fields a request may never change after creation.
_IMMUTABLE_FIELDS = frozenset({"id", "kind", "requester_id", "submitted_at"})


def _validate_leave(payload: ApprovalPayload, today: date) -> None:
    if payload.start_date is None or payload.end_date is None:
        raise ValidationError("start_date and end_date are required for leave requests")
    reason = (payload.reason or "").strip()
    if len(reason) < MIN_REASON_LENGTH:
        raise ValidationError(f"reason must be at least {MIN_REASON_LENGTH} characters")
    if payload.start_date > payload.end_date:
        raise ValidationError("end_date must not be before start_date")
    if payload.start_date < today:
        raise ValidationError("start_date cannot be in the past")


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _build_request(requester_id: uuid.UUID, payload: ApprovalPayload, today: date) -> WorkflowRequest:
    """Validate a submission against its kind's rules and build the row."""
    title = _clean(payload.title)
    leave_fields: dict[str, Any] = {}

    if payload.kind == RequestKind.LEAVE:
        _validate_leave(payload, today)
        leave_fields = {
            "start_date": payload.start_date,
            "end_date": payload.end_date,
            "reason": _clean(payload.reason),
        }
        if title is None:
            title = f"Leave {payload.start_date} to {payload.end_date}"
    elif title is None or len(title) < MIN_TITLE_LENGTH:
        raise ValidationError(f"title must be at least {MIN_TITLE_LENGTH} characters")

    return WorkflowRequest(
        kind=payload.kind.value,
        requester_id=requester_id,
        status=RequestStatus.PENDING.value,
        title=title,
        description=_clean(payload.description),
        priority=payload.priority.value,
        reference_id=payload.reference_id,
        reference_type=payload.reference_type.value if payload.reference_type else None,
        comments=_clean(payload.comments),
        **leave_fields,
    )


async def create_request(
    session: AsyncSession,
    requester_id: uuid.UUID,
    payload: ApprovalPayload,
    *,
    today: date | None = None,
) -> WorkflowRequest:
    """Insert a PENDING request. Raises ValidationError on kind-specific violations.

    The row is flushed but not committed; the caller owns the transaction.
    """
    request = _build_request(requester_id, payload, today or date.today())
    session.add(request)
    await session.flush()
    return request


async def get_request_or_404(
    session: AsyncSession,
    request_id: uuid.UUID,
    kind: RequestKind | None = None,
) -> WorkflowRequest:
    """Fetch a request by ID, optionally restricted to one kind. Raises 404 if not found."""
    query = select(WorkflowRequest).where(col(WorkflowRequest.id) == request_id)
    if kind is not None:
        query = query.where(col(WorkflowRequest.kind) == kind.value)
    result = await session.execute(query)
    request = result.scalar_one_or_none()
    if request is None:
        raise NotFoundError("Request not found")
    return request


async def update_request(
    session: AsyncSession,
    request_id: uuid.UUID,
    patch: dict[str, Any],
) -> WorkflowRequest:
    """Apply a field patch to a request.

    Workflow rules are not checked here. Immutable and unknown fields are refused.
    """
    illegal = _IMMUTABLE_FIELDS.intersection(patch)
    if illegal:
        raise ValidationError(f"Cannot modify immutable fields: {', '.join(sorted(illegal))}")
    unknown = set(patch) - set(WorkflowRequest.model_fields)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")

    request = await get_request_or_404(session, request_id)
    for key, value in patch.items():
        setattr(request, key, value)
    request.updated_at = now_utc()
    await session.flush()
    return request


async def transition_if_pending(
    session: AsyncSession,
    request_id: uuid.UUID,
    values: dict[str, Any],
) -> bool:
    """Apply ``values`` only while the row is still PENDING.

    Returns False when another writer resolved the request first.
    """
    result = await session.execute(
        update(WorkflowRequest)
        .where(
            col(WorkflowRequest.id) == request_id,
            col(WorkflowRequest.status) == RequestStatus.PENDING.value,
        )
        .values(**values, updated_at=now_utc())
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1  # type: ignore[attr-defined]


def _filter_clauses(request_filter: RequestFilter) -> list[Any]:
    clauses: list[Any] = []
    if request_filter.status is not None:
        clauses.append(col(WorkflowRequest.status) == request_filter.status.value)
    if request_filter.kind is not None:
        clauses.append(col(WorkflowRequest.kind) == request_filter.kind.value)
    if request_filter.requester_id is not None:
        clauses.append(col(WorkflowRequest.requester_id) == request_filter.requester_id)
    return clauses


async def list_requests(
    session: AsyncSession,
    request_filter: RequestFilter,
    page: int = 1,
    page_size: int = 10,
) -> tuple[list[WorkflowRequest], int]:
    """List requests matching the filter, newest submitted first.

    Returns the page of rows and the total count over the same filter.
    """
    clauses = _filter_clauses(request_filter)

    count_result = await session.execute(select(func.count()).select_from(WorkflowRequest).where(*clauses))
    total = count_result.scalar_one()

    result = await session.execute(
        select(WorkflowRequest)
        .where(*clauses)
        .order_by(col(WorkflowRequest.submitted_at).desc(), col(WorkflowRequest.id).desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )
    return list(result.scalars().all()), total
