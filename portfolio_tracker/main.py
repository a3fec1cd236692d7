"""
FastAPI Main Application
Portfolio ledger behind a small REST API
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator, Optional

from portfolio_tracker.config import Settings, settings as default_settings
from portfolio_tracker.core.logging import setup_logging
from portfolio_tracker.domain.models import InvalidInput
from portfolio_tracker.domain.services.ledger import PortfolioLedger
from portfolio_tracker.api.routes import health, portfolio

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Invalid payload"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    """
    settings: Settings = app.state.settings
    ledger: PortfolioLedger = app.state.ledger

    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.APP_NAME} ({settings.APP_ENV})")
    logger.info(f"   📊 Holdings loaded: {len(ledger.list_holdings().holdings)}")
    logger.info(f"   ✅ API Server: http://{settings.API_HOST}:{settings.PORT}")
    logger.info(f"   ✅ API Docs: http://{settings.API_HOST}:{settings.PORT}/docs")
    logger.info("=" * 60)

    yield

    # Ledger is in-memory only; everything is dropped here
    logger.info(f"👋 {settings.APP_NAME} shutdown complete")


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_PAYLOAD, "detail": str(exc)},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_PAYLOAD, "detail": jsonable_encoder(exc.errors())},
    )


def create_app(
    settings: Optional[Settings] = None,
    ledger: Optional[PortfolioLedger] = None,
) -> FastAPI:
    """
    Build the API around a ledger instance.

    Args:
        settings: Application settings (default: loaded from environment)
        ledger: Ledger to serve (default: demo-seeded or empty, per
            SEED_DEMO_DATA)
    """
    settings = settings or default_settings
    if ledger is None:
        ledger = PortfolioLedger.with_demo_data() if settings.SEED_DEMO_DATA else PortfolioLedger()

    app = FastAPI(
        title=settings.APP_NAME,
        description="In-memory stock portfolio ledger with mock prices",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.ledger = ledger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidInput, invalid_input_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
        }

    app.include_router(health.router, tags=["Health"])
    app.include_router(portfolio.router, prefix="/portfolio", tags=["Portfolio"])

    return app


setup_logging(default_settings.LOG_LEVEL)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "portfolio_tracker.main:app",
        host=default_settings.API_HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
    )
