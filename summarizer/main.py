"""Application bootstrap for the placement feedback summarizer.

This module starts the FastAPI application under uvicorn when executed as a
script. Keeping the runtime bootstrap here (instead of in ``summarizer.app``)
ensures the app module can be safely imported by unit tests and tooling
without side-effects.
"""
from __future__ import annotations

import os
import sys

import uvicorn

# Import the fully configured ``app`` and logger from the application
from summarizer.app import app, logger


def main() -> None:  # pragma: no cover
    """Serve the API until the process receives a termination signal."""

    raw_port = os.getenv("PORT", "3000")
    try:
        port = int(raw_port)
    except ValueError:
        logger.error("Invalid PORT value '%s'; must be integer.", raw_port)
        sys.exit(1)

    host = os.getenv("HOST", "0.0.0.0")
    logger.info("Starting summarizer on %s:%d…", host, port)
    try:
        uvicorn.run(app, host=host, port=port, log_level="info")
    except KeyboardInterrupt:  # pragma: no cover
        logger.info("Shutdown requested (KeyboardInterrupt). Exiting…")
    finally:
        logger.info("Goodbye.")


if __name__ == "__main__":  # pragma: no cover
    main()
