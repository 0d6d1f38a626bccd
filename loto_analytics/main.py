"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from loto_analytics.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
logger.add(
    settings.LOG_DIR / "app.log",
    rotation=settings.LOG_ROTATION,
    retention=settings.LOG_RETENTION,
    level="INFO",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ({}) ...", settings.APP_NAME, settings.APP_ENV)
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Análise estatística do histórico da Lotofácil",
    lifespan=lifespan,
)

from loto_analytics.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")
