# ruff: noqa: TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from lawdesk.models.enums import Role


class UpsertUserRequest(BaseModel):
    """Request body for upserting a team member in the stub directory."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255)
    role: Role
    department: str | None = Field(default=None, max_length=100)


class UserResponse(BaseModel):
    """Response schema for a team member."""

    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    role: Role
    department: str | None


class UserListResponse(BaseModel):
    """List of team members."""

    items: list[UserResponse]
    total: int
