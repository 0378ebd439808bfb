"""Groups routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from despesas_divididas.api.dependencies import get_directory
from despesas_divididas.api.schemas.directory import CreateGroupRequest, GroupResponse
from despesas_divididas.domain.errors import UnknownGroupError
from despesas_divididas.repositories.directory_repository import InMemoryDirectory

router = APIRouter(prefix="/groups", tags=["Groups"])


@router.post(
    "",
    response_model=GroupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid payload"},
        404: {"description": "Unknown member"},
    },
)
def create_group(
    payload: CreateGroupRequest,
    directory: Annotated[InMemoryDirectory, Depends(get_directory)],
) -> GroupResponse:
    """Register a group of existing users."""

    group = directory.create_group(payload.name, payload.member_ids)
    return GroupResponse.from_model(group)


@router.get(
    "/{group_id}",
    response_model=GroupResponse,
    responses={404: {"description": "Unknown group"}},
)
def get_group(
    group_id: int,
    directory: Annotated[InMemoryDirectory, Depends(get_directory)],
) -> GroupResponse:
    group = directory.get_group(group_id)
    if group is None:
        raise UnknownGroupError(details={"group_id": group_id})
    return GroupResponse.from_model(group)
