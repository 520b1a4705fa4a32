"""FastAPI dashboard application factory with JSON API and WebSocket hub."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from stockcast.dashboard.routes import api, ws
from stockcast.dashboard.routes.ws import DashboardHub


def create_dashboard_app(lifespan: Any = None) -> FastAPI:
    """Create and configure the FastAPI dashboard application.

    Args:
        lifespan: Optional async context manager for application lifespan events.
                  Used by main.py to inject startup/shutdown logic.

    Returns:
        Configured FastAPI application with WebSocket hub and routes.
    """
    app = FastAPI(
        title="Stockcast Dashboard",
        lifespan=lifespan,
    )

    app.state.hub = DashboardHub()
    # Set by the stock loading routes
    app.state.current_snapshot = None

    app.include_router(api.router, prefix="/api")
    app.include_router(ws.router)

    return app
