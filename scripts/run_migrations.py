#!/usr/bin/env python3
"""Apply the trip engine schema with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from trip.config import Settings
from trip.util.logging import setup_logging
from trip.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the latest revision."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations")
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail loudly so nothing runs against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main())
