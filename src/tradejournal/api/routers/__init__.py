"""API routers package."""

from tradejournal.api.routers.auth import router as auth_router
from tradejournal.api.routers.trades import router as trades_router
from tradejournal.api.routers.performance import router as performance_router
from tradejournal.api.routers.journal import router as journal_router

__all__ = [
    "auth_router",
    "trades_router",
    "performance_router",
    "journal_router",
]
