"""Canonical key for the balance between two participants."""

from __future__ import annotations

from dataclasses import dataclass

from despesas_divididas.domain.errors import InvalidPairError, compose_error_message
from despesas_divididas.domain.value_objects import ParticipantId


@dataclass(frozen=True, slots=True)
class BalancePair:
    """Unordered participant pair stored as ``(low, high)`` with ``low < high``."""

    low: ParticipantId
    high: ParticipantId

    def __post_init__(self) -> None:
        if self.low >= self.high:
            raise InvalidPairError(
                details={"low": self.low, "high": self.high},
            )

    @classmethod
    def canonicalize(cls, id_a: ParticipantId, id_b: ParticipantId) -> BalancePair:
        """Normalize two distinct participant ids into the canonical pair."""
        if id_a == id_b:
            raise InvalidPairError(
                message=compose_error_message(
                    cause=f"Participant {id_a} cannot owe themself.",
                    action="Use two different participant IDs.",
                ),
                details={"participant_id": id_a},
            )
        if id_a < id_b:
            return cls(low=id_a, high=id_b)
        return cls(low=id_b, high=id_a)

    def involves(self, participant_id: ParticipantId) -> bool:
        return participant_id in (self.low, self.high)

    def counterparty_of(self, participant_id: ParticipantId) -> ParticipantId:
        """Return the other side of the pair."""
        if participant_id == self.low:
            return self.high
        if participant_id == self.high:
            return self.low
        raise ValueError(f"Participant {participant_id} is not part of {self}")

    def __str__(self) -> str:
        return f"({self.low},{self.high})"
