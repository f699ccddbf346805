"""Observability configuration using Logfire.

Spans and structured events come from the domain services
(``user_service.register``, ``token_service.resolve_token``, ...); this
module configures Logfire once at startup and instruments the libraries the
service talks through: FastAPI for inbound requests, SQLAlchemy for the
account tables and httpx for Steam.

Request bodies of this API carry passwords and every authenticated request
carries a bearer token, so neither headers nor credential fields ever reach
a span.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from faf.config import Settings

# Body fields that never leave the process
CREDENTIAL_FIELDS = frozenset(
    {"password", "current_password", "new_password", "token"}
)

# Extra patterns for Logfire's scrubber, on top of its defaults
SCRUB_PATTERNS = ["token_secret", "jwt_secret", "smtp_password", "api_key"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the account service.

    Logs go to the console; they are also sent to Logfire when
    OBSERVABILITY__SEND_TO_LOGFIRE says so, or when a token is configured
    and the flag is left unset.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name="faf-user-service",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def scrub_request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Drop credential fields from the validated request values of a span."""
    values = attributes.get("values")
    if isinstance(values, dict):
        attributes = {
            **attributes,
            "values": {
                name: value
                for name, value in values.items()
                if name not in CREDENTIAL_FIELDS
            },
        }
    return attributes


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request to the account API.

    The health check is excluded; it is polled by the load balancer.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=scrub_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries against the account tables."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound requests to Steam."""
    logfire.instrument_httpx()
