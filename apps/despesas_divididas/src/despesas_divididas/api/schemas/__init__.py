"""API request and response schemas."""

from despesas_divididas.api.schemas.balances import LedgerResponse, UserBalancesResponse
from despesas_divididas.api.schemas.directory import (
    CreateGroupRequest,
    CreateUserRequest,
    GroupResponse,
    UserResponse,
    UsersListResponse,
)
from despesas_divididas.api.schemas.errors import ErrorResponse
from despesas_divididas.api.schemas.expenses import (
    CreateExpenseRequest,
    CreateSettlementRequest,
    ExpenseListResponse,
    ExpenseResponse,
    SettlementResponse,
)

__all__ = [
    "CreateExpenseRequest",
    "CreateGroupRequest",
    "CreateSettlementRequest",
    "CreateUserRequest",
    "ErrorResponse",
    "ExpenseListResponse",
    "ExpenseResponse",
    "GroupResponse",
    "LedgerResponse",
    "SettlementResponse",
    "UserBalancesResponse",
    "UserResponse",
    "UsersListResponse",
]
