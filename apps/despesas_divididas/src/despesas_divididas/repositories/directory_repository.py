"""In-memory user and group directory."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from threading import Lock

from despesas_divididas.domain.errors import (
    UnknownParticipantError,
    compose_error_message,
)
from despesas_divididas.domain.value_objects import GroupId, ParticipantId


@dataclass(frozen=True, slots=True)
class User:
    """Registered participant."""

    id: ParticipantId
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class Group:
    """Named set of participants sharing expenses."""

    id: GroupId
    name: str
    member_ids: tuple[ParticipantId, ...]


class InMemoryDirectory:
    """Key-value store for users and groups with sequential ids from 1."""

    def __init__(self) -> None:
        self._users: dict[ParticipantId, User] = {}
        self._groups: dict[GroupId, Group] = {}
        self._user_ids = count(1)
        self._group_ids = count(1)
        self._lock = Lock()

    def create_user(self, name: str, email: str = "") -> User:
        with self._lock:
            user = User(id=next(self._user_ids), name=name, email=email)
            self._users[user.id] = user
        return user

    def create_group(self, name: str, member_ids: list[ParticipantId]) -> Group:
        """Register a group; every member must already exist."""

        unknown = [member for member in member_ids if not self.user_exists(member)]
        if unknown:
            raise UnknownParticipantError(
                message=compose_error_message(
                    cause=f"Group members {unknown} are not registered.",
                    action="Create the users before adding them to a group.",
                ),
                details={"participant_ids": unknown},
            )

        # Keep first occurrence order while dropping repeated members.
        members = tuple(dict.fromkeys(member_ids))
        with self._lock:
            group = Group(id=next(self._group_ids), name=name, member_ids=members)
            self._groups[group.id] = group
        return group

    def user_exists(self, user_id: ParticipantId) -> bool:
        return user_id in self._users

    def group_exists(self, group_id: GroupId) -> bool:
        return group_id in self._groups

    def get_user(self, user_id: ParticipantId) -> User | None:
        return self._users.get(user_id)

    def get_group(self, group_id: GroupId) -> Group | None:
        return self._groups.get(group_id)

    def list_users(self) -> list[User]:
        return list(self._users.values())

    def display_names(self) -> dict[ParticipantId, str]:
        return {user.id: user.name for user in self._users.values()}
