#!/usr/bin/env python3
"""Apply comment store migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py [revision]   # defaults to "head"
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from murmur.config import Settings
from murmur.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    try:
        with logfire.span("run_migrations", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Comment store migrated", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Comment store migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than start against a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
