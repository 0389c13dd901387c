"""Role checks for submitting, viewing and adjudicating workflow requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lawdesk.models.enums import Role

if TYPE_CHECKING:
    from lawdesk.models.enums import RequestKind
    from lawdesk.models.request import WorkflowRequest
    from lawdesk.schemas.auth import AuthContext
    from lawdesk.schemas.request import RequestFilter

# Roles entitled to approve or reject requests. Matched exactly, no hierarchy.
PRIVILEGED_ROLES: frozenset[str] = frozenset({Role.SENIOR_ASSOCIATE.value, Role.LEGAL_COUNSEL.value})


def is_privileged(auth: AuthContext) -> bool:
    return auth.role in PRIVILEGED_ROLES


def can_submit(auth: AuthContext, kind: RequestKind) -> bool:
    """Any authenticated principal may submit any kind of request."""
    return True


def can_adjudicate(auth: AuthContext) -> bool:
    """Only privileged roles may approve or reject."""
    return is_privileged(auth)


def can_view(auth: AuthContext, request: WorkflowRequest) -> bool:
    """Privileged roles see everything; everyone else sees only their own requests."""
    return is_privileged(auth) or request.requester_id == auth.user_id


def scope_for_list(auth: AuthContext, request_filter: RequestFilter) -> RequestFilter:
    """Return the filter a principal is allowed to list with.

    Non-privileged principals are pinned to their own requests whatever
    requester_id they asked for.
    """
    if is_privileged(auth):
        return request_filter
    return request_filter.model_copy(update={"requester_id": auth.user_id})
