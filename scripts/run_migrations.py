#!/usr/bin/env python3
"""Migrate the account schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py --revision 3c1f5a9e7b20
    python scripts/run_migrations.py --sql        # print the SQL instead
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from faf.config import Settings
from faf.util.logging import setup_logging
from faf.util.observability import configure_logfire


def main() -> int:
    parser = argparse.ArgumentParser(description="Migrate the FAF account schema")
    parser.add_argument("--revision", default="head", help="Target revision")
    parser.add_argument(
        "--sql",
        action="store_true",
        help="Print the migration SQL for a DBA instead of applying it",
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=args.revision, sql=args.sql):
        try:
            command.upgrade(Config("alembic.ini"), args.revision, sql=args.sql)
        except Exception:
            # The deployment must not start the API against a half-migrated schema
            logfire.exception("Database migration failed", revision=args.revision)
            raise

    logfire.info("Database migrations completed", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
