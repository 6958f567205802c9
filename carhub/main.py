"""Carhub — FastAPI application factories for the vehicles and pricing services.

Run each service in its own process:
  uvicorn carhub.main:vehicles_app --port 8080
  uvicorn carhub.main:pricing_app --port 8082
"""


import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carhub.core.config import settings
from carhub.core.exceptions import register_exception_handlers
from carhub.db.base import async_session_factory, create_tables
from carhub.domain import Car, Price
from carhub.middleware.request_log import RequestLogMiddleware
from carhub.schemas.common import HealthResponse
from carhub.services.price import PriceService

from carhub.routers.price_lookup import router as price_lookup_router

# v1 routers
from carhub.routers.v1.cars import router as cars_v1_router
from carhub.routers.v1.prices import router as prices_v1_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _build_app(title: str, lifespan) -> FastAPI:
    app = FastAPI(
        title=title,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=title, env=settings.app_env)

    return app


# ---------------------------------------------------------------------------
# Vehicles service
# ---------------------------------------------------------------------------

@asynccontextmanager
async def _vehicles_lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.create_tables:
        await create_tables(Car.__table__)
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout)
    if not settings.maps_enabled:
        logger.info("MAPS_BASE_URL not set; car addresses will be synthesized")
    try:
        yield
    finally:
        await app.state.http_client.aclose()


def create_vehicles_app() -> FastAPI:
    _configure_logging()
    app = _build_app(f"{settings.app_name} Vehicles API", _vehicles_lifespan)
    app.include_router(cars_v1_router, prefix="/api/v1")
    return app


# ---------------------------------------------------------------------------
# Pricing service
# ---------------------------------------------------------------------------

@asynccontextmanager
async def _pricing_lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.create_tables:
        await create_tables(Price.__table__)
    if settings.seed_prices:
        async with async_session_factory() as session:
            await PriceService(session).seed_prices(range(1, settings.price_seed_count + 1))
            await session.commit()
    yield


def create_pricing_app() -> FastAPI:
    _configure_logging()
    app = _build_app(f"{settings.app_name} Pricing Service", _pricing_lifespan)

    # --- Inter-service lookup (/services/price) ---
    app.include_router(price_lookup_router)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(prices_v1_router, prefix="/api/v1")
    return app


vehicles_app = create_vehicles_app()
pricing_app = create_pricing_app()
