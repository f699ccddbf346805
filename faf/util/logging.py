"""Console logging for the account service.

Application events go through Logfire; this only sets up the standard
library loggers used by uvicorn, alembic and the client libraries.
"""

import logging
import sys

from faf.config import Settings

# Library loggers and the level they run at outside of debug mode
LIBRARY_LEVELS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "aiosmtplib": logging.WARNING,
    "fastapi_mail": logging.WARNING,
    "alembic": logging.INFO,
}


def log_level_for(settings: Settings) -> int:
    """Debug everywhere in debug mode, quiet under test, INFO otherwise."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and the library loggers."""
    level = log_level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name, library_level in LIBRARY_LEVELS.items():
        if settings.debug:
            library_level = min(level, library_level)
        logging.getLogger(name).setLevel(library_level)

    # Access logs duplicate the FastAPI spans in production
    if settings.environment == "production":
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("faf").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
