"""FastAPI app bootstrap for despesas_divididas."""

from __future__ import annotations

from fastapi import FastAPI

from despesas_divididas.api.error_handlers import register_error_handlers
from despesas_divididas.api.routes import v1_router
from despesas_divididas.core.logging import configure_logging
from despesas_divididas.core.settings import Settings, get_settings
from despesas_divididas.services.ledger_context import create_ledger_context


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create a FastAPI application with its own empty in-memory ledger."""

    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        version="0.1.0",
    )
    app.state.ledger_context = create_ledger_context(settings)

    @app.get("/health/live", include_in_schema=False)
    def health_live() -> dict[str, str]:
        return {"status": "alive"}

    register_error_handlers(app)
    app.include_router(v1_router)
    return app


app = create_app()
