"""FastAPI application."""

from fastapi import FastAPI

from faf.adapter.error import AdapterError
from faf.domain.error import ApiError
from faf.interface.api.routes import health, users
from faf.interface.error import (
    AccessDeniedError,
    AuthenticationError,
    access_denied_handler,
    adapter_error_handler,
    api_error_handler,
    authentication_error_handler,
)
from faf.util.di.container import create_container, setup_di
from faf.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def register_error_handlers(app_instance: FastAPI) -> None:
    """Map domain, adapter and auth errors to HTTP responses."""
    app_instance.add_exception_handler(ApiError, api_error_handler)
    app_instance.add_exception_handler(AdapterError, adapter_error_handler)
    app_instance.add_exception_handler(AuthenticationError, authentication_error_handler)
    app_instance.add_exception_handler(AccessDeniedError, access_denied_handler)


def create_app() -> FastAPI:
    """Create FastAPI application without dependency injection.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.
    """
    # Instrument httpx for outbound HTTP requests (Steam)
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="FAF User Service",
        description="Account lifecycle API for Forged Alliance Forever: registration, activation, credentials and Steam linking",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)

    return app_instance


def create_production_app() -> FastAPI:
    """Create the application wired to production providers.

    Settings are loaded from environment automatically.
    """
    app_instance = create_app()
    setup_di(app_instance, create_container())
    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_production_app()
