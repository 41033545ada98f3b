"""
EOSB Calculator - Main Application Entry Point

An End-of-Service Benefit calculator that computes UAE gratuity
from salary, service dates, termination type and contract type.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.core.config import settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.core.rate_limit import limiter
from src.presentation.api import api_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
    error_handler_middleware,
)
from src.presentation.schemas import ServiceBannerSchema


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    The calculator holds no resources, so startup only configures logging.
    """
    setup_logging(settings)

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        environment=settings.environment,
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="UAE EOSB Calculator",
    description="End of Service Benefits calculator (UAE Labour Law Article 132)",
    version=__version__,
    docs_url="/api-docs",
    redoc_url=None,
    openapi_url="/api-docs.json",
    lifespan=lifespan,
)
app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Authorization",
        "Accept",
        "Origin",
        "X-Requested-With",
        RequestContextMiddleware.HEADER_NAME,
    ],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


if settings.metrics_enabled:

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=get_metrics(),
            media_type=get_metrics_content_type(),
        )


FEATURES = [
    "Gratuity per UAE Labour Law Article 132: (Monthly Salary / 30) x Eligible Days",
    "21 days per year for the first 5 years, 30 days per year after",
    "Service period from calendar dates",
    "Resignation penalties for unlimited contracts only",
    "Swagger and OpenAPI documentation",
]


@app.get("/", include_in_schema=False)
async def root() -> ServiceBannerSchema:
    """Service banner with documentation links and the endpoint map."""
    return ServiceBannerSchema(
        message="UAE EOSB Calculator API",
        version=__version__,
        documentation={
            "swagger": app.docs_url,
            "openapi": app.openapi_url,
        },
        endpoints={
            "health": "/api/eosb/health",
            "config": "/api/eosb/config",
            "calculate": "/api/eosb/calculate",
        },
        features=FEATURES,
    )


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )
