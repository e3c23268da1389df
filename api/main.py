#!/usr/bin/env python3
"""
Hearth API - HTTP layer for the Hearth household manager.

Backend-for-frontend for the React interface. It serves:
- Person display names (full name and graph label)
- Relationship graph visualization data
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from household.logging_config import configure_logging, get_logger

from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api", level=get_settings().log_level)
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Hearth API", description="Hearth household management API")

    settings = get_settings()
    logger.debug(f"CORS allowed origins: {settings.allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import graph, names

    app.include_router(names.router)
    app.include_router(graph.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "hearth-api"}

    return app


# Create app instance for uvicorn
app = create_app()
