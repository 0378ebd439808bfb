"""Split builders that reconcile exactly with the expense total."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import MAX_PREC, ROUND_FLOOR, Decimal, localcontext

from despesas_divididas.domain.errors import InvalidAmountError, compose_error_message
from despesas_divididas.domain.expense import Split
from despesas_divididas.domain.value_objects import Money, ParticipantId

ONE_CENT = Money(cents=1)
FULL_PERCENTAGE = Decimal("100")


def _require_non_negative_total(total: Money) -> None:
    if total.is_negative():
        raise InvalidAmountError(
            message=compose_error_message(
                cause=f"Total {total} is negative.",
                action="Split a total greater than or equal to zero.",
            ),
            details={"total": total.format()},
        )


def equal_split(total: Money, participants: Sequence[ParticipantId]) -> list[Split]:
    """Share ``total`` equally, handing leftover cents to the first participants.

    The result sums to ``total`` and no two shares differ by more than one
    cent.
    """
    if not participants:
        raise InvalidAmountError(
            message=compose_error_message(
                cause="Equal split requires at least one participant.",
                action="Provide the participants sharing the expense.",
            ),
        )
    _require_non_negative_total(total)

    share, remainder = total.divide_into_shares(len(participants))
    return [
        Split(
            participant_id=participant_id,
            amount=share + ONE_CENT if index < remainder.cents else share,
        )
        for index, participant_id in enumerate(participants)
    ]


def percentage_split(
    total: Money,
    percentages: Sequence[tuple[ParticipantId, Decimal]],
) -> list[Split]:
    """Share ``total`` by percentage, flooring each share to the cent.

    Leftover cents go one by one to the participants with a non-zero
    percentage, in the given order.
    """
    if not percentages:
        raise InvalidAmountError(
            message=compose_error_message(
                cause="Percentage split requires at least one participant.",
                action="Provide the percentage owed by each participant.",
            ),
        )
    _require_non_negative_total(total)

    for participant_id, percentage in percentages:
        if percentage < 0:
            raise InvalidAmountError(
                message=compose_error_message(
                    cause=f"Participant {participant_id} has a negative percentage.",
                    action="Use percentages between 0 and 100.",
                ),
                details={
                    "participant_id": participant_id,
                    "percentage": str(percentage),
                },
            )

    with localcontext(prec=MAX_PREC):
        # Exact sum: long inputs must not round to 100.
        percentage_total = sum(
            (percentage for _, percentage in percentages), Decimal(0)
        )
    if percentage_total != FULL_PERCENTAGE:
        raise InvalidAmountError(
            message=compose_error_message(
                cause=f"Percentages sum to {percentage_total}, not 100.",
                action="Adjust the percentages so they add up to 100.",
            ),
            details={"percentage_total": str(percentage_total)},
        )

    share_cents = [
        int(
            (Decimal(total.cents) * percentage / FULL_PERCENTAGE).to_integral_value(
                rounding=ROUND_FLOOR
            )
        )
        for _, percentage in percentages
    ]
    remainder_cents = total.cents - sum(share_cents)
    for index, (_, percentage) in enumerate(percentages):
        if remainder_cents == 0:
            break
        if percentage > 0:
            share_cents[index] += 1
            remainder_cents -= 1

    return [
        Split(participant_id=participant_id, amount=Money(cents=cents))
        for (participant_id, _), cents in zip(percentages, share_cents, strict=True)
    ]
