"""Pydantic schemas for users and groups endpoints."""

from __future__ import annotations

from pydantic import BaseModel

from despesas_divididas.application.schemas.ledger_commands import (
    GroupCommand,
    UserCommand,
)
from despesas_divididas.repositories.directory_repository import Group, User


class CreateUserRequest(UserCommand):
    """Payload for registering a user."""


class CreateGroupRequest(GroupCommand):
    """Payload for registering a group of existing users."""


class UserResponse(BaseModel):
    """Public user representation."""

    id: int
    name: str
    email: str

    @classmethod
    def from_model(cls, user: User) -> UserResponse:
        return cls(id=user.id, name=user.name, email=user.email)


class UsersListResponse(BaseModel):
    """Users list payload."""

    users: list[UserResponse]

    @classmethod
    def from_models(cls, users: list[User]) -> UsersListResponse:
        return cls(users=[UserResponse.from_model(item) for item in users])


class GroupResponse(BaseModel):
    """Public group representation."""

    id: int
    name: str
    member_ids: list[int]

    @classmethod
    def from_model(cls, group: Group) -> GroupResponse:
        return cls(id=group.id, name=group.name, member_ids=list(group.member_ids))
