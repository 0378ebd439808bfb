"""Users routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from despesas_divididas.api.dependencies import get_directory, get_expense_engine
from despesas_divididas.api.schemas.balances import UserBalancesResponse
from despesas_divididas.api.schemas.directory import (
    CreateUserRequest,
    UserResponse,
    UsersListResponse,
)
from despesas_divididas.domain.errors import UnknownParticipantError
from despesas_divididas.repositories.directory_repository import InMemoryDirectory
from despesas_divididas.services.expense_engine import ExpenseEngine

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=UsersListResponse)
def list_users(
    directory: Annotated[InMemoryDirectory, Depends(get_directory)],
) -> UsersListResponse:
    """List registered users in creation order."""

    return UsersListResponse.from_models(directory.list_users())


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid payload"}},
)
def create_user(
    payload: CreateUserRequest,
    directory: Annotated[InMemoryDirectory, Depends(get_directory)],
) -> UserResponse:
    """Register a user and assign the next sequential id."""

    user = directory.create_user(payload.name, payload.email)
    return UserResponse.from_model(user)


@router.get(
    "/{user_id}/balances",
    response_model=UserBalancesResponse,
    responses={404: {"description": "Unknown user"}},
)
def get_user_balances(
    user_id: int,
    directory: Annotated[InMemoryDirectory, Depends(get_directory)],
    engine: Annotated[ExpenseEngine, Depends(get_expense_engine)],
) -> UserBalancesResponse:
    """Return what each counterparty owes the user (negative when the user owes)."""

    if not directory.user_exists(user_id):
        raise UnknownParticipantError(details={"participant_id": user_id})
    return UserBalancesResponse.from_mapping(user_id, engine.net_balances_for(user_id))
