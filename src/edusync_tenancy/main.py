"""Tenancy service entry point."""

import os

import uvicorn

from .config.logging_config import LoggingConfig

# Configure logging based on environment
LoggingConfig.configure()

from .infrastructure.fastapi import create_app

logger = LoggingConfig.get_logger(__name__)


def main() -> None:
    """Run the application."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    debug = os.getenv("DEBUG", "false").lower() == "true"

    logger.info(f"Starting tenancy service on {host}:{port}")

    uvicorn.run(
        "edusync_tenancy.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=debug,
        log_level="debug" if debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
