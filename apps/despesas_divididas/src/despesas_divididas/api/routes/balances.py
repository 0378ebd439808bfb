"""Ledger balances routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from despesas_divididas.api.dependencies import get_ledger_context
from despesas_divididas.api.schemas.balances import LedgerEntryResponse, LedgerResponse
from despesas_divididas.services.balance_report_service import describe_balance
from despesas_divididas.services.ledger_context import LedgerContext

router = APIRouter(prefix="/balances", tags=["Balances"])


@router.get("", response_model=LedgerResponse)
def list_balances(
    context: Annotated[LedgerContext, Depends(get_ledger_context)],
) -> LedgerResponse:
    """List every open balance pair with a readable transfer instruction."""

    display_names = context.directory.display_names()
    return LedgerResponse(
        entries=[
            LedgerEntryResponse.from_entry(
                low_id,
                high_id,
                amount,
                describe_balance(low_id, high_id, amount, display_names),
            )
            for low_id, high_id, amount in context.engine.all_ledger_entries()
        ]
    )
