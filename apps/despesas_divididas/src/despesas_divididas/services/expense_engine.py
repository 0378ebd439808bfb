"""Business service for expense registration and settlements."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from decimal import Decimal
from typing import Protocol

from despesas_divididas.domain.errors import (
    ExpenseNotFoundError,
    InvalidAmountError,
    InvalidPairError,
    SplitMismatchError,
    UnknownGroupError,
    UnknownParticipantError,
    compose_error_message,
)
from despesas_divididas.domain.expense import Expense, Split, sum_splits
from despesas_divididas.domain.ledger import Ledger
from despesas_divididas.domain.split_calculator import equal_split, percentage_split
from despesas_divididas.domain.value_objects import GroupId, Money, ParticipantId

logger = logging.getLogger(__name__)


class DirectoryProtocol(Protocol):
    """Subset of directory lookups used for referential checks."""

    def user_exists(self, user_id: ParticipantId) -> bool: ...
    def group_exists(self, group_id: GroupId) -> bool: ...


class ExpenseRepositoryProtocol(Protocol):
    """Append-only expense log contract consumed by the engine."""

    def next_id(self) -> int: ...
    def append(self, expense: Expense) -> Expense: ...
    def get(self, expense_id: int) -> Expense | None: ...
    def list_expenses(self, group_id: GroupId | None = None) -> list[Expense]: ...
    def __len__(self) -> int: ...


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class ExpenseEngine:
    """Validates expenses, records them and applies their balance deltas."""

    def __init__(
        self,
        *,
        ledger: Ledger,
        expense_repository: ExpenseRepositoryProtocol,
        directory: DirectoryProtocol,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._ledger = ledger
        self._expense_repository = expense_repository
        self._directory = directory
        self._clock = clock

    def create_expense(
        self,
        *,
        payer_id: ParticipantId,
        total_amount: Money,
        splits: Sequence[Split],
        note: str = "",
        group_id: GroupId | None = None,
    ) -> Expense:
        """Record an expense and make every non-payer owe the payer their share.

        Nothing is stored and no balance changes unless every check passes.
        """
        self._validate_expense(
            payer_id=payer_id,
            total_amount=total_amount,
            splits=splits,
            group_id=group_id,
        )

        with self._ledger.transaction():
            expense = Expense(
                id=self._expense_repository.next_id(),
                group_id=group_id,
                payer_id=payer_id,
                total_amount=total_amount,
                note=note.strip(),
                created_at=self._clock(),
                splits=tuple(splits),
            )
            self._expense_repository.append(expense)
            for split in expense.splits:
                if split.participant_id == payer_id:
                    continue
                self._ledger.adjust(payer_id, split.participant_id, split.amount)

        logger.info(
            "expense_created",
            extra={
                "expense_id": expense.id,
                "payer_id": payer_id,
                "group_id": group_id,
                "total_amount": total_amount.format(),
                "splits": len(expense.splits),
            },
        )
        return expense

    def create_equal_expense(
        self,
        *,
        payer_id: ParticipantId,
        total_amount: Money,
        participants: Sequence[ParticipantId],
        note: str = "",
        group_id: GroupId | None = None,
    ) -> Expense:
        """Split ``total_amount`` equally among ``participants`` and record it."""
        self._require_positive(total_amount, field_name="total_amount")
        return self.create_expense(
            payer_id=payer_id,
            total_amount=total_amount,
            splits=equal_split(total_amount, participants),
            note=note,
            group_id=group_id,
        )

    def create_percentage_expense(
        self,
        *,
        payer_id: ParticipantId,
        total_amount: Money,
        percentages: Sequence[tuple[ParticipantId, Decimal]],
        note: str = "",
        group_id: GroupId | None = None,
    ) -> Expense:
        self._require_positive(total_amount, field_name="total_amount")
        return self.create_expense(
            payer_id=payer_id,
            total_amount=total_amount,
            splits=percentage_split(total_amount, percentages),
            note=note,
            group_id=group_id,
        )

    def record_settlement(
        self,
        *,
        payer_id: ParticipantId,
        payee_id: ParticipantId,
        amount: Money,
    ) -> None:
        """Pay down what ``payer_id`` owes ``payee_id``.

        Paying more than is owed flips the balance, leaving the payee in debt.
        """
        self._require_positive(amount, field_name="amount")
        if payer_id == payee_id:
            raise InvalidPairError(
                message=compose_error_message(
                    cause=f"Participant {payer_id} cannot settle with themself.",
                    action="Use different payer and payee IDs.",
                ),
                details={"participant_id": payer_id},
            )
        for participant_id in (payer_id, payee_id):
            self._require_known_user(participant_id)

        self._ledger.adjust(payee_id, payer_id, -amount)
        logger.info(
            "settlement_recorded",
            extra={
                "payer_id": payer_id,
                "payee_id": payee_id,
                "amount": amount.format(),
            },
        )

    def net_balances_for(self, user_id: ParticipantId) -> dict[ParticipantId, Money]:
        return self._ledger.net_balances(user_id)

    def all_ledger_entries(self) -> list[tuple[ParticipantId, ParticipantId, Money]]:
        return [
            (pair.low, pair.high, amount) for pair, amount in self._ledger.all_entries()
        ]

    def list_expenses(self, group_id: GroupId | None = None) -> list[Expense]:
        with self._ledger.transaction():
            return self._expense_repository.list_expenses(group_id)

    def get_expense(self, expense_id: int) -> Expense:
        expense = self._expense_repository.get(expense_id)
        if expense is None:
            raise ExpenseNotFoundError(details={"expense_id": expense_id})
        return expense

    def expense_count(self) -> int:
        with self._ledger.transaction():
            return len(self._expense_repository)

    def _validate_expense(
        self,
        *,
        payer_id: ParticipantId,
        total_amount: Money,
        splits: Sequence[Split],
        group_id: GroupId | None,
    ) -> None:
        self._require_positive(total_amount, field_name="total_amount")
        self._require_known_user(payer_id)
        if group_id is not None and not self._directory.group_exists(group_id):
            raise UnknownGroupError(
                message=compose_error_message(
                    cause=f"Group {group_id} is not registered.",
                    action="Create the group first or omit group_id.",
                ),
                details={"group_id": group_id},
            )
        for split in splits:
            self._require_known_user(split.participant_id)

        splits_total = sum_splits(splits)
        if splits_total != total_amount:
            logger.warning(
                "expense_rejected",
                extra={
                    "payer_id": payer_id,
                    "splits_total": splits_total.format(),
                    "expense_total": total_amount.format(),
                },
            )
            raise SplitMismatchError(
                message=compose_error_message(
                    cause=(
                        f"Splits sum to {splits_total} but the expense "
                        f"total is {total_amount}."
                    ),
                    action="Adjust the split amounts so they match the total.",
                ),
                details={
                    "splits_total": splits_total.format(),
                    "expense_total": total_amount.format(),
                },
            )

    def _require_known_user(self, user_id: ParticipantId) -> None:
        if not self._directory.user_exists(user_id):
            raise UnknownParticipantError(
                message=compose_error_message(
                    cause=f"Participant {user_id} is not registered.",
                    action="Create the user first or use an existing participant ID.",
                ),
                details={"participant_id": user_id},
            )

    @staticmethod
    def _require_positive(amount: Money, *, field_name: str) -> None:
        if amount <= Money.zero():
            raise InvalidAmountError(
                message=compose_error_message(
                    cause=f"{field_name} must be greater than zero.",
                    action="Provide a positive decimal amount with two digits.",
                ),
                details={field_name: amount.format()},
            )
