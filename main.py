"""
PrepCoach - AI-Powered Mock Interview Engine

Main application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prepcoach.config.settings import get_settings
from prepcoach.api import api_router, register_exception_handlers
from prepcoach.api.dependencies import cleanup, get_registry
from prepcoach.core.provider_registry import ProviderRegistry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Running in {'debug' if settings.debug else 'production'} mode")
    registry = get_registry()
    logger.info(f"Completion provider: {registry.provider_name}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}...")
    await cleanup()


# Create FastAPI application
settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="AI-Powered Mock Interview Engine",
    version=settings.app_version,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Mount API routes
app.include_router(api_router, prefix="/api")


# ============================================================================
# ROOT ROUTES
# ============================================================================

@app.get("/")
async def root():
    """Service banner."""
    return {"name": settings.app_name, "version": settings.app_version, "docs": "/docs"}


@app.get("/health")
async def health_check(registry: ProviderRegistry = Depends(get_registry)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "provider": registry.provider_name,
    }


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
