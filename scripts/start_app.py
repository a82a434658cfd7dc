#!/usr/bin/env python3
"""Start the comment API under uvicorn, reporting startup failures to Logfire."""

import os
import sys

import logfire
import uvicorn

from murmur.config import Settings
from murmur.util.observability import configure_logfire


def main() -> int:
    """Start the API server."""
    settings = Settings()

    # Configure Logfire before the app module is imported
    configure_logfire(settings)

    port = int(os.environ.get("PORT", "8000"))
    try:
        logfire.info("Starting comment API", port=port, environment=settings.environment)
        uvicorn.run(
            "murmur.interface.api.app:app",
            host="0.0.0.0",
            port=port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
        return 0

    except Exception as e:
        logfire.error(
            "Comment API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
