# ruff: noqa: TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from lawdesk.api.deps import AuthDep, DirectoryDep, PrivilegedDep
from lawdesk.exceptions import NotFoundError, ValidationError
from lawdesk.schemas.directory import UpsertUserRequest, UserListResponse, UserResponse
from lawdesk.services.directory import InMemoryDirectoryService, UserInfo

team_router = APIRouter(prefix="/team", tags=["team"])


def _to_response(user: UserInfo) -> UserResponse:
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        role=user.role,
        department=user.department,
    )


@team_router.put("/{user_id}", response_model=UserResponse)
async def upsert_team_member(
    user_id: uuid.UUID,
    payload: UpsertUserRequest,
    auth: PrivilegedDep,
    directory: DirectoryDep,
) -> UserResponse:
    """Create or update a team member in the stub directory (privileged only)."""
    if not isinstance(directory, InMemoryDirectoryService):
        raise ValidationError("The configured directory is read-only")
    user = UserInfo(
        id=user_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        role=payload.role,
        department=payload.department,
    )
    directory.seed(user)
    return _to_response(user)


@team_router.get("/{user_id}", response_model=UserResponse)
async def get_team_member(
    user_id: uuid.UUID,
    auth: AuthDep,
    directory: DirectoryDep,
) -> UserResponse:
    """Get a team member from the directory."""
    user = await directory.get_user(user_id)
    if user is None:
        raise NotFoundError("Team member not found")
    return _to_response(user)


@team_router.get("", response_model=UserListResponse)
async def list_team_members(
    auth: AuthDep,
    directory: DirectoryDep,
) -> UserListResponse:
    """List all team members."""
    items = [_to_response(u) for u in await directory.list_users()]
    return UserListResponse(items=items, total=len(items))
