#!/usr/bin/env python3
"""
OnePercent Backend - FastAPI Application

Per-user planning data (tasks, notes, career and business maps, daily
dashboards) plus AI-assisted CV analysis, behind Firebase authentication.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/health - Health check (default port, configurable in config.yaml)
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import ServiceException
from .app_context import AppContext
from .config import AppConfig, get_config
from .exceptions import (
    general_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    request_validation_exception_handler,
    service_exception_handler,
)
from .routers import (
    ai_router,
    auth_router,
    dashboard_router,
    maps_router,
    notes_router,
    tasks_router,
)
from .security import SecurityHeadersMiddleware

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "onepercent-backend"


def build_limiter(config: AppConfig) -> Limiter:
    """Per-client-address limiter applying the configured default to every route."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[config.rate_limit.default],
        enabled=config.rate_limit.enabled
    )


def create_app(config: Optional[AppConfig] = None, context: Optional[AppContext] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Application configuration; loaded from config.yaml and the
            environment when omitted.
        context: Pre-built services. When given, the lifespan neither builds
            nor closes them.
    """
    config = config or get_config()
    logging.getLogger().setLevel(config.web.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if context is not None:
            app.state.context = context
            yield
            return

        logger.info("Building application context")
        app.state.context = AppContext.build(config)
        try:
            yield
        finally:
            logger.info("Closing application context")
            app.state.context.close()

    app = FastAPI(
        title="OnePercent API",
        description="Personal planning data and AI-assisted CV analysis",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.config = config
    if context is not None:
        app.state.context = context

    # Configure rate limiting
    app.state.limiter = build_limiter(config)
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"]
    )

    # Register exception handlers
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(auth_router)
    app.include_router(tasks_router)
    app.include_router(notes_router)
    app.include_router(maps_router)
    app.include_router(dashboard_router)
    app.include_router(ai_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": SERVICE_NAME}

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = app.state.config
    logger.info(f"Starting OnePercent backend on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level=config.web.log_level.lower()
    )


if __name__ == "__main__":
    main()
