# ruff: noqa: B008, TC003
from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import Depends, Header, Query
from pydantic import ValidationError as PydanticValidationError

from lawdesk.exceptions import ForbiddenError, ValidationError
from lawdesk.schemas.auth import AuthContext
from lawdesk.schemas.request import RequestFilter
from lawdesk.services.authority import can_adjudicate, is_privileged
from lawdesk.services.directory import DirectoryService, get_directory_service


async def get_auth_context(
    x_user_id: uuid.UUID = Header(),
    x_role: str = Header(),
) -> AuthContext:
    """Extract dev auth context from request headers."""
    return AuthContext(user_id=x_user_id, role=x_role)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


async def require_adjudicator(
    auth: AuthDep,
) -> AuthContext:
    """Require a role entitled to approve or reject requests."""
    if not can_adjudicate(auth):
        raise ForbiddenError("You do not have permission to approve or reject requests")
    return auth


AdjudicatorDep = Annotated[AuthContext, Depends(require_adjudicator)]


async def require_privileged(
    auth: AuthDep,
) -> AuthContext:
    """Require a privileged role for directory maintenance."""
    if not is_privileged(auth):
        raise ForbiddenError("Privileged role required")
    return auth


PrivilegedDep = Annotated[AuthContext, Depends(require_privileged)]

DirectoryDep = Annotated[DirectoryService, Depends(get_directory_service)]


async def get_request_filter(
    status_filter: str | None = Query(default=None, alias="status"),
    kind: str | None = Query(default=None),
    type_filter: str | None = Query(default=None, alias="type"),
    requester_id: uuid.UUID | None = Query(default=None),
    requester_id_camel: uuid.UUID | None = Query(default=None, alias="requesterId"),
) -> RequestFilter:
    """Build the list filter from query parameters.

    ``type`` is an alias for ``kind`` and ``requesterId`` for ``requester_id``.
    """
    try:
        return RequestFilter(
            status=status_filter,
            kind=kind or type_filter,
            requester_id=requester_id or requester_id_camel,
        )
    except PydanticValidationError as exc:
        raise ValidationError(str(exc)) from None


FilterDep = Annotated[RequestFilter, Depends(get_request_filter)]
