#!/usr/bin/env python3
"""
TalentDesk Web API - FastAPI Application

Candidate ranking, recruiter review and role/permission lookups with
automatic API documentation.

Usage:
    talentdesk-web
    # or
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from core.config_loader import get_config
from core.scorer import ScoringValidationError
from database.database import init_db
from .dependencies import get_db_manager
from .exceptions import (
    ServiceException,
    service_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    rankings_router,
    applications_router,
    roles_router
)

# Load configuration
config = get_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.logging.level.upper(), logging.INFO),
    format=config.logging.format
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables before serving requests."""
    init_db(get_db_manager().engine)
    logger.info("Database schema ready")
    yield


# Create FastAPI app
app = FastAPI(
    title="TalentDesk API",
    description="API for ranking candidates and reviewing applications",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(ScoringValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(rankings_router)
app.include_router(applications_router)
app.include_router(roles_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "talentdesk-web"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting TalentDesk Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level=config.logging.level.lower()
    )


if __name__ == "__main__":
    main()
