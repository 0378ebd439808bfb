"""API v1 router registration."""

from fastapi import APIRouter

from despesas_divididas.api.routes import balances, expenses, groups, users

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(users.router)
v1_router.include_router(groups.router)
v1_router.include_router(expenses.router)
v1_router.include_router(expenses.settlements_router)
v1_router.include_router(balances.router)
