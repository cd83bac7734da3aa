"""
Soulscape server entry point

Runs the API application with uvicorn. The app is built by uvicorn through
the create_app factory, so importing soulscape.api has no side effects.
"""

import logging

import uvicorn

from soulscape.config.settings import get_config

logger = logging.getLogger(__name__)

APP_FACTORY = "soulscape.api.main:create_app"


def run() -> None:
    """Start the API server using environment configuration."""
    config = get_config()
    config.configure_logging()

    logger.info(f"Server running on {config.host}:{config.port}")
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    run()
