"""
Application entry point.

Creates the FastAPI application and wires together:
- The filesystem record store (created eagerly, fails fast)
- Routers (records, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Middleware (security headers, request logging)
- Rate limiting (decorated endpoints only)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from userfiles.core.config import Settings, settings as default_settings
from userfiles.domain.records.ports import RecordStore
from userfiles.infrastructure.records.file_record_store import FileRecordStore
from userfiles.interfaces.health import router as health_router
from userfiles.interfaces.records.router import router as records_router
from userfiles.shared.errors.handlers import register_error_handlers
from userfiles.shared.logging import configure_logging
from userfiles.shared.middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from userfiles.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)


def create_app(
    settings: Settings | None = None,
    store: RecordStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Unless a store is
    injected, the user files directory is ensured here, so a bad
    ``user_files_path`` fails before any server is started.

    Args:
        settings: Settings to use. Defaults to the environment-loaded ones.
        store: Record store override, mainly for tests.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        StartupFatalError: If the user files directory cannot be ensured.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.settings = settings
    app.state.record_store = (
        store if store is not None else FileRecordStore(settings.user_files_path)
    )

    # --- Rate Limiting ---
    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware (last added runs first) ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(records_router)

    return app
