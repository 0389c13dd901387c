from __future__ import annotations

import uuid

import pytest

from lawdesk.models.enums import RequestKind, RequestStatus, Role
from lawdesk.models.request import WorkflowRequest
from lawdesk.schemas.auth import AuthContext
from lawdesk.schemas.request import RequestFilter
from lawdesk.services.authority import (
    PRIVILEGED_ROLES,
    can_adjudicate,
    can_submit,
    can_view,
    scope_for_list,
)


def _auth(role: str) -> AuthContext:
    return AuthContext(user_id=uuid.uuid4(), role=role)


def test_privileged_roles_are_exactly_two() -> None:
    assert PRIVILEGED_ROLES == {"Senior Associate", "Legal Counsel"}


@pytest.mark.parametrize("role", [Role.SENIOR_ASSOCIATE, Role.LEGAL_COUNSEL])
def test_privileged_roles_can_adjudicate(role: Role) -> None:
    assert can_adjudicate(_auth(role.value))


@pytest.mark.parametrize(
    "role",
    ["Junior Associate", "Intern", "Pupil", "Office Assistant", "senior associate", "Senior Associate ", "admin"],
)
def test_other_roles_cannot_adjudicate(role: str) -> None:
    assert not can_adjudicate(_auth(role))


@pytest.mark.parametrize("kind", list(RequestKind))
def test_anyone_can_submit_any_kind(kind: RequestKind) -> None:
    assert can_submit(_auth("Office Assistant"), kind)


def test_can_view_own_request_only() -> None:
    intern = _auth("Intern")
    own = WorkflowRequest(kind=RequestKind.OTHER.value, requester_id=intern.user_id, title="Own")
    other = WorkflowRequest(kind=RequestKind.OTHER.value, requester_id=uuid.uuid4(), title="Other")
    assert can_view(intern, own)
    assert not can_view(intern, other)
    assert can_view(_auth("Legal Counsel"), other)


def test_scope_for_list_pins_non_privileged_to_self() -> None:
    intern = _auth("Intern")
    requested = RequestFilter(status=RequestStatus.PENDING, requester_id=uuid.uuid4())
    scoped = scope_for_list(intern, requested)
    assert scoped.requester_id == intern.user_id
    assert scoped.status == RequestStatus.PENDING


def test_scope_for_list_pins_non_privileged_without_filter() -> None:
    intern = _auth("Pupil")
    assert scope_for_list(intern, RequestFilter()).requester_id == intern.user_id


def test_scope_for_list_keeps_privileged_filter() -> None:
    senior = _auth("Senior Associate")
    target = uuid.uuid4()
    assert scope_for_list(senior, RequestFilter(requester_id=target)).requester_id == target
    assert scope_for_list(senior, RequestFilter()).requester_id is None
