import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from epochclock import __version__
from epochclock.api.deps import get_settings
from epochclock.api.routes import epoch, health
from epochclock.domain.errors import ConfigLoadError, ConfigValidationFailed
from epochclock.rules.loader import load_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load config on startup (fail-fast)
    try:
        load_config(settings.config_path)
    except (FileNotFoundError, ConfigLoadError, ConfigValidationFailed) as e:
        logger.critical("Config load failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="epochclock API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(epoch.router, prefix="/api", tags=["Epoch"])
app.include_router(health.router, prefix="/health", tags=["Health"])
