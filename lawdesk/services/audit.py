from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import select
from sqlmodel import col

from lawdesk.models.audit import AuditLog

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlmodel import SQLModel

    from lawdesk.models.enums import AuditAction


def model_to_audit_dict(model: SQLModel) -> dict[str, Any]:
    """Serialize a SQLModel instance to a JSON-safe dict for audit logging."""
    data: dict[str, Any] = {}
    for key, value in model.model_dump().items():
        if isinstance(value, uuid.UUID):
            data[key] = str(value)
        elif isinstance(value, (datetime, date)):
            data[key] = value.isoformat()
        else:
            data[key] = value
    return data


async def write_audit_log(
    session: AsyncSession,
    *,
    request_id: uuid.UUID,
    actor_id: uuid.UUID,
    action: AuditAction,
    comment: str | None = None,
    before_json: dict[str, Any] | None = None,
    after_json: dict[str, Any] | None = None,
) -> AuditLog:
    """Write an immutable audit log entry within the caller's transaction."""
    entry = AuditLog(
        request_id=request_id,
        actor_id=actor_id,
        action=action.value,
        comment=comment,
        before_json=before_json,
        after_json=after_json,
    )
    session.add(entry)
    return entry


async def list_audit_entries(session: AsyncSession, request_id: uuid.UUID) -> list[AuditLog]:
    """Return a request's history, oldest first."""
    result = await session.execute(
        select(AuditLog)
        .where(col(AuditLog.request_id) == request_id)
        .order_by(col(AuditLog.created_at).asc(), col(AuditLog.id).asc())
    )
    return list(result.scalars().all())
