"""Domain exceptions used across API, CLI and services."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidAmountError(DomainError):
    """Raised when a monetary value is malformed or out of range."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_AMOUNT",
            message=message
            or compose_error_message(
                cause="Amount is malformed or not allowed here.",
                action="Provide a positive decimal amount with two digits.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class InvalidPairError(DomainError):
    """Raised when a balance would link a participant to themself."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_PAIR",
            message=message
            or compose_error_message(
                cause="A participant cannot owe themself.",
                action="Use two different participant IDs.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class UnknownParticipantError(DomainError):
    """Raised when a participant is not registered in the directory."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="UNKNOWN_PARTICIPANT",
            message=message
            or compose_error_message(
                cause="Participant is not registered.",
                action="Create the user first or use an existing participant ID.",
            ),
            status_code=HTTPStatus.NOT_FOUND,
            details=details or {},
        )


class UnknownGroupError(DomainError):
    """Raised when a group is not registered in the directory."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="UNKNOWN_GROUP",
            message=message
            or compose_error_message(
                cause="Group is not registered.",
                action="Create the group first or omit group_id.",
            ),
            status_code=HTTPStatus.NOT_FOUND,
            details=details or {},
        )


class SplitMismatchError(DomainError):
    """Raised when split amounts do not add up to the expense total."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="SPLIT_MISMATCH",
            message=message
            or compose_error_message(
                cause="Split amounts do not sum to the expense total.",
                action="Adjust the split amounts so they match the total.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details or {},
        )


class ExpenseNotFoundError(DomainError):
    """Raised when an expense id is not present in the log."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="EXPENSE_NOT_FOUND",
            message=message
            or compose_error_message(
                cause="Expense was not found.",
                action="Check the expense ID and retry.",
            ),
            status_code=HTTPStatus.NOT_FOUND,
            details=details or {},
        )
