import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from barangay_records.infrastructure.config.settings import get_settings
from barangay_records.infrastructure.persistence.database import engine, get_db
from barangay_records.presentation.api.errors import register_exception_handlers
from barangay_records.presentation.api.v1.routes import (announcements, auth,
                                                         barangays, residents,
                                                         users)
from barangay_records.presentation.middleware import (CorrelationIDMiddleware,
                                                      limiter)
from barangay_records.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for application initialization and cleanup"""
    setup_logging()
    logger.info("%s %s starting", settings.app_name, settings.app_version)

    yield

    await engine.dispose()
    logger.info("Database engine disposed")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Authentication and authorization failures
register_exception_handlers(app)

# Correlation ID for request tracing
app.add_middleware(CorrelationIDMiddleware)

# Using allow_credentials=True requires specific origins (not wildcard)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.allowed_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router, prefix="/auth", tags=["authentication"])
app.include_router(residents.router, prefix="/residents", tags=["residents"])
app.include_router(barangays.router, prefix="/barangays", tags=["barangays"])
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(announcements.router, prefix="/announcements", tags=["announcements"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
    - 200 OK if the database answers
    - 503 Service Unavailable otherwise
    """
    checks: dict[str, Any] = {"api": True, "database": False}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = True
    except SQLAlchemyError as e:
        logger.error("Health check database failure: %s", e)
        checks["error"] = str(e)
        return JSONResponse(status_code=503, content={"status": "unhealthy", "checks": checks})

    return {"status": "healthy", "checks": checks}
