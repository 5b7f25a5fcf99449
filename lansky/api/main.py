"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lansky import __version__
from lansky.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from lansky.api.middleware.error_handler import setup_exception_handlers
from lansky.api.routes import (
    admin_router,
    advisor_router,
    dashboard_router,
    expenses_router,
    health_router,
    image_editor_router,
    inventory_router,
    sales_router,
    settings_router,
    taxes_router,
)
from lansky.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Migrates the database and loads the ledger on startup; closes the
    database connection on shutdown.
    """
    from lansky.application.ledger_store import get_ledger_store, reset_ledger_store
    from lansky.infrastructure.storage.sqlite import close_database
    from lansky.infrastructure.storage.sqlite.migrations.migrator import run_migrations

    settings = get_settings()
    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        db_path=str(settings.storage.db_path),
    )

    results = await run_migrations()
    failed = [r for r in results if not r.success]
    if failed:
        raise RuntimeError(f"Migration v{failed[0].version} failed: {failed[0].error}")

    store = await get_ledger_store()
    logger.info(
        "application_started",
        inventory=len(store.state.inventory),
        sales=len(store.state.sales),
        admin_enabled=bool(settings.admin.token),
    )

    yield

    logger.info("application_stopping")
    reset_ledger_store()
    await close_database()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title="Lansky Ledger API",
        description="Inventory, sales, expenses and tax bookkeeping for resellers",
        version=__version__,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(dashboard_router)
    app.include_router(inventory_router)
    app.include_router(sales_router)
    app.include_router(expenses_router)
    app.include_router(taxes_router)
    app.include_router(advisor_router)
    app.include_router(image_editor_router)
    app.include_router(settings_router)
    app.include_router(admin_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {
            "name": settings.app_name,
            "version": __version__,
            "docs": "/docs",
        }

    # Root health endpoint (for container health checks)
    @app.get("/health")
    async def root_health() -> dict[str, str]:
        return {"status": "healthy", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "lansky.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
