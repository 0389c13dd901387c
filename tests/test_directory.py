"""Tests for the in-memory user directory and the /team routes."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import pytest

from lawdesk.models.enums import Role
from lawdesk.services.directory import (
    DirectoryService,
    InMemoryDirectoryService,
    UserInfo,
    get_directory_service,
    set_directory_service,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from httpx import AsyncClient

COUNSEL_ID = uuid.uuid4()
PUPIL_ID = uuid.uuid4()

COUNSEL_HEADERS = {"X-User-Id": str(COUNSEL_ID), "X-Role": "Legal Counsel"}
PUPIL_HEADERS = {"X-User-Id": str(PUPIL_ID), "X-Role": "Pupil"}


def _make_user(first: str = "Jane", last: str = "Doe", role: Role = Role.INTERN) -> UserInfo:
    return UserInfo(
        id=uuid.uuid4(),
        first_name=first,
        last_name=last,
        email=f"{first.lower()}@example.com",
        role=role,
    )


@pytest.fixture(autouse=True)
def _fresh_directory() -> Iterator[InMemoryDirectoryService]:
    svc = InMemoryDirectoryService()
    set_directory_service(svc)
    yield svc
    set_directory_service(InMemoryDirectoryService())


# ---------------------------------------------------------------------------
# InMemoryDirectoryService
# ---------------------------------------------------------------------------


async def test_directory_get_not_found() -> None:
    assert await InMemoryDirectoryService().get_user(uuid.uuid4()) is None


async def test_directory_seed_and_get() -> None:
    svc = InMemoryDirectoryService()
    user = _make_user()
    svc.seed(user)
    result = await svc.get_user(user.id)
    assert result is not None
    assert result.full_name == "Jane Doe"


async def test_directory_list_sorted_by_name() -> None:
    svc = InMemoryDirectoryService()
    svc.seed(_make_user("Zoe", "Banda"))
    svc.seed(_make_user("Amos", "Wanjiru"))
    svc.seed(_make_user("Ada", "Achieng"))
    names = [u.last_name for u in await svc.list_users()]
    assert names == ["Achieng", "Banda", "Wanjiru"]


def test_in_memory_directory_satisfies_protocol() -> None:
    assert isinstance(InMemoryDirectoryService(), DirectoryService)


def test_set_directory_service_replaces_global() -> None:
    svc = InMemoryDirectoryService()
    set_directory_service(svc)
    assert get_directory_service() is svc


# ---------------------------------------------------------------------------
# /team routes
# ---------------------------------------------------------------------------


async def test_upsert_team_member_privileged(async_client: AsyncClient) -> None:
    user_id = uuid.uuid4()
    resp = await async_client.put(
        f"/team/{user_id}",
        json={"first_name": "Wanjiku", "last_name": "Otieno", "email": "w@example.com", "role": "Intern"},
        headers=COUNSEL_HEADERS,
    )
    assert resp.status_code == 200
    assert resp.json()["role"] == "Intern"

    resp = await async_client.get(f"/team/{user_id}", headers=PUPIL_HEADERS)
    assert resp.status_code == 200
    assert resp.json()["email"] == "w@example.com"


async def test_upsert_team_member_forbidden_for_pupil(async_client: AsyncClient) -> None:
    resp = await async_client.put(
        f"/team/{uuid.uuid4()}",
        json={"first_name": "A", "last_name": "B", "email": "a@example.com", "role": "Intern"},
        headers=PUPIL_HEADERS,
    )
    assert resp.status_code == 403


async def test_upsert_team_member_unknown_role(async_client: AsyncClient) -> None:
    resp = await async_client.put(
        f"/team/{uuid.uuid4()}",
        json={"first_name": "A", "last_name": "B", "email": "a@example.com", "role": "Partner"},
        headers=COUNSEL_HEADERS,
    )
    assert resp.status_code == 400


async def test_get_team_member_not_found(async_client: AsyncClient) -> None:
    resp = await async_client.get(f"/team/{uuid.uuid4()}", headers=PUPIL_HEADERS)
    assert resp.status_code == 404
    assert resp.json()["error"] == "NotFoundError"


async def test_list_team_members(async_client: AsyncClient, _fresh_directory: InMemoryDirectoryService) -> None:
    _fresh_directory.seed(_make_user("Ada", "Achieng"))
    _fresh_directory.seed(_make_user("Zoe", "Banda"))
    resp = await async_client.get("/team", headers=PUPIL_HEADERS)
    assert resp.status_code == 200
    assert resp.json()["total"] == 2
