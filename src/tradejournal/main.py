"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tradejournal import __version__
from tradejournal.config.settings import get_settings
from tradejournal.config.logging_config import setup_logging
from tradejournal.repositories.sqlalchemy.database import init_db
from tradejournal.api.routers import (
    auth_router,
    trades_router,
    performance_router,
    journal_router,
)
from tradejournal.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Trading journal with positions, realized P/L and per-ticker notes",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(auth_router)
app.include_router(trades_router)
app.include_router(performance_router)
app.include_router(journal_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
        headers=headers,
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
