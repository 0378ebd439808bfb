"""API dependency providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from despesas_divididas.repositories.directory_repository import InMemoryDirectory
from despesas_divididas.services.expense_engine import ExpenseEngine
from despesas_divididas.services.ledger_context import LedgerContext


def get_ledger_context(request: Request) -> LedgerContext:
    """Return the ledger context owned by the running application."""

    context: LedgerContext = request.app.state.ledger_context
    return context


def get_expense_engine(
    context: Annotated[LedgerContext, Depends(get_ledger_context)],
) -> ExpenseEngine:
    return context.engine


def get_directory(
    context: Annotated[LedgerContext, Depends(get_ledger_context)],
) -> InMemoryDirectory:
    return context.directory
