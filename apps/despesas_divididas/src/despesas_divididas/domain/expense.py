"""Immutable records for expenses and their splits."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from despesas_divididas.domain.errors import InvalidAmountError, compose_error_message
from despesas_divididas.domain.value_objects import GroupId, Money, ParticipantId


@dataclass(frozen=True, slots=True)
class Split:
    """Portion of an expense allocated to one participant."""

    participant_id: ParticipantId
    amount: Money

    def __post_init__(self) -> None:
        if self.amount.is_negative():
            raise InvalidAmountError(
                message=compose_error_message(
                    cause=(
                        f"Split for participant {self.participant_id} "
                        f"has negative amount {self.amount}."
                    ),
                    action="Use split amounts greater than or equal to zero.",
                ),
                details={
                    "participant_id": self.participant_id,
                    "amount": self.amount.format(),
                },
            )


def sum_splits(splits: Iterable[Split]) -> Money:
    """Return the total allocated by the given splits."""
    total = Money.zero()
    for split in splits:
        total += split.amount
    return total


@dataclass(frozen=True, slots=True)
class Expense:
    """Paid amount, its payer and how it was allocated."""

    id: int
    group_id: GroupId | None
    payer_id: ParticipantId
    total_amount: Money
    note: str
    created_at: datetime
    splits: tuple[Split, ...]

    def share_of(self, participant_id: ParticipantId) -> Money:
        """Return the amount allocated to a participant across all their splits."""
        return sum_splits(
            split for split in self.splits if split.participant_id == participant_id
        )
