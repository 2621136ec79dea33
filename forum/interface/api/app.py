"""FastAPI application."""

from fastapi import FastAPI

from forum.interface.api.routes import groups, health, subjects, topics
from forum.interface.error import register_error_handlers
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi


def create_app(with_container: bool = True) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        with_container: Attach the production DI container. Tests pass
            False and attach their own container with ``setup_di``.
    """
    app_instance = FastAPI(
        title="Forum API",
        description="Backend API for community groups, topics and replies",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    if with_container:
        # Settings are loaded from environment automatically
        setup_di(app_instance, create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(groups.router)
    app_instance.include_router(topics.router)
    app_instance.include_router(subjects.router)

    return app_instance
