from sqlmodel import SQLModel

from lawdesk.models.audit import AuditLog
from lawdesk.models.base import TimestampMixin, UUIDBase
from lawdesk.models.enums import AuditAction, Priority, ReferenceType, RequestKind, RequestStatus, Role
from lawdesk.models.request import WorkflowRequest

__all__ = [
    "AuditAction",
    "AuditLog",
    "Priority",
    "ReferenceType",
    "RequestKind",
    "RequestStatus",
    "Role",
    "SQLModel",
    "TimestampMixin",
    "UUIDBase",
    "WorkflowRequest",
]
