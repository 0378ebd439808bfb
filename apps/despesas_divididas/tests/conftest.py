from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from despesas_divididas.api.app import create_app
from despesas_divididas.core.settings import Settings
from despesas_divididas.services.expense_engine import ExpenseEngine
from despesas_divididas.services.ledger_context import (
    LedgerContext,
    create_ledger_context,
)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def ledger_context(settings: Settings) -> LedgerContext:
    context = create_ledger_context(settings)
    for name in ("Alice", "Bob", "Charlie"):
        context.directory.create_user(name, f"{name.lower()}@example.com")
    return context


@pytest.fixture
def engine(ledger_context: LedgerContext) -> ExpenseEngine:
    return ledger_context.engine


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client: TestClient) -> TestClient:
    for name in ("Alice", "Bob", "Charlie"):
        response = client.post(
            "/v1/users",
            json={"name": name, "email": f"{name.lower()}@example.com"},
        )
        assert response.status_code == 201
    return client
