"""Error body returned by every failing endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from despesas_divididas.domain.errors import DomainError


class ErrorResponse(BaseModel):
    """``details`` is omitted when the error carries none."""

    code: str
    message: str
    details: dict[str, Any] | None = None

    @classmethod
    def from_domain_error(cls, error: DomainError) -> ErrorResponse:
        return cls(
            code=error.code,
            message=error.message,
            details=error.details or None,
        )

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
