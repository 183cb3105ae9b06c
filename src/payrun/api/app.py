"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from payrun import __version__
from payrun.api.routes import health_router, pay_runs_router
from payrun.calculators.pay_calculator import PayrollCalculationError
from payrun.config import get_settings
from payrun.database import init_db
from payrun.providers.base import DeliveryProvider
from payrun.providers.console_stub import ConsoleDeliveryProvider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    if get_settings().data_source == "database":
        init_db(create_tables=True)
    yield


def create_app(delivery_provider: DeliveryProvider | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Pay Run API",
        description="Pay date selection, gross pay and pay dispatch",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.delivery_provider = delivery_provider or ConsoleDeliveryProvider()

    # Exception handlers
    @app.exception_handler(PayrollCalculationError)
    async def calculation_exception_handler(
        request: Request, exc: PayrollCalculationError
    ) -> JSONResponse:
        """Fail-fast pay runs abort on the first calculation error."""
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "code": "CALCULATION_ERROR"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(pay_runs_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "payrun.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
