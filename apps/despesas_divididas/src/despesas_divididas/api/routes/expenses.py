"""Expenses and settlements routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from despesas_divididas.api.dependencies import get_expense_engine, get_ledger_context
from despesas_divididas.api.schemas.expenses import (
    CreateExpenseRequest,
    CreateSettlementRequest,
    ExpenseListResponse,
    ExpenseResponse,
    SettlementResponse,
)
from despesas_divididas.application.use_cases.submit_operations import (
    submit_expense,
    submit_settlement,
)
from despesas_divididas.services.expense_engine import ExpenseEngine
from despesas_divididas.services.ledger_context import LedgerContext

router = APIRouter(prefix="/expenses", tags=["Expenses"])
settlements_router = APIRouter(prefix="/settlements", tags=["Settlements"])


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    engine: Annotated[ExpenseEngine, Depends(get_expense_engine)],
    group_id: Annotated[int | None, Query(ge=1)] = None,
) -> ExpenseListResponse:
    """List recorded expenses in creation order, optionally for one group."""

    return ExpenseListResponse.from_models(engine.list_expenses(group_id))


@router.post(
    "",
    response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid payload or amount"},
        404: {"description": "Unknown participant or group"},
        422: {"description": "Splits do not sum to the total"},
    },
)
def create_expense(
    payload: CreateExpenseRequest,
    context: Annotated[LedgerContext, Depends(get_ledger_context)],
) -> ExpenseResponse:
    """Register an equal, exact or percentage expense and update balances."""

    expense = submit_expense(context, payload)
    return ExpenseResponse.from_model(expense)


@router.get(
    "/{expense_id}",
    response_model=ExpenseResponse,
    responses={404: {"description": "Expense not found"}},
)
def get_expense(
    expense_id: int,
    engine: Annotated[ExpenseEngine, Depends(get_expense_engine)],
) -> ExpenseResponse:
    return ExpenseResponse.from_model(engine.get_expense(expense_id))


@settlements_router.post(
    "",
    response_model=SettlementResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid amount or self settlement"},
        404: {"description": "Unknown participant"},
    },
)
def create_settlement(
    payload: CreateSettlementRequest,
    context: Annotated[LedgerContext, Depends(get_ledger_context)],
) -> SettlementResponse:
    """Record a payment that reduces what the payer owes the payee."""

    amount = submit_settlement(context, payload)
    return SettlementResponse.from_values(
        payer_id=payload.payer_id,
        payee_id=payload.payee_id,
        amount=amount,
    )
