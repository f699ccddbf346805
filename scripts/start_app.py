#!/usr/bin/env python3
"""Serve the account API with uvicorn.

Logging and Logfire are configured before the app module is imported, so
failures while building the app are reported too.
"""

import argparse
import sys

import logfire
import uvicorn

from faf.config import Settings
from faf.util.logging import setup_logging
from faf.util.observability import configure_logfire


def main() -> int:
    parser = argparse.ArgumentParser(description="Serve the FAF user API")
    parser.add_argument(
        "--bind", default="0.0.0.0", help="Interface to listen on (default: all)"
    )
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes (development)"
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting user API",
        environment=settings.environment,
        base_url=settings.api.base_url,
    )
    try:
        uvicorn.run(
            "faf.interface.api.app:app",
            host=args.bind,
            port=settings.port,
            reload=args.reload,
            # The API runs behind the FAF reverse proxy
            proxy_headers=True,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("User API failed to start")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
