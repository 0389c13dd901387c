# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

from lawdesk.models.enums import Role


class UserInfo(BaseModel):
    """Team member metadata from the user directory."""

    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    role: Role
    department: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@runtime_checkable
class DirectoryService(Protocol):
    """Interface for the user directory."""

    async def get_user(self, user_id: uuid.UUID) -> UserInfo | None:
        """Fetch a team member. Returns None if not found."""
        ...

    async def list_users(self) -> list[UserInfo]:
        """List all team members."""
        ...


class InMemoryDirectoryService:
    """In-memory stub implementation for development."""

    def __init__(self) -> None:
        self._users: dict[uuid.UUID, UserInfo] = {}

    def seed(self, user: UserInfo) -> None:
        """Seed a team member for testing."""
        self._users[user.id] = user

    async def get_user(self, user_id: uuid.UUID) -> UserInfo | None:
        """Fetch a team member. Returns None if not found."""
        return self._users.get(user_id)

    async def list_users(self) -> list[UserInfo]:
        """List all team members ordered by name."""
        return sorted(self._users.values(), key=lambda u: (u.last_name, u.first_name))


_directory_service: DirectoryService = InMemoryDirectoryService()


def get_directory_service() -> DirectoryService:
    """FastAPI dependency for the user directory."""
    return _directory_service


def set_directory_service(service: DirectoryService) -> None:
    """Override the service (for testing or production wiring)."""
    global _directory_service
    _directory_service = service
