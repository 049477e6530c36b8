# gamepass_relay/__main__.py
"""
Serve the relay with uvicorn.

Usage:
    PORT=8080 python -m gamepass_relay
"""

import logging

import uvicorn

from gamepass_relay.config import get_settings


def main():
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("gamepass_relay")
    logger.info("Starting server on port %s", settings.port)

    uvicorn.run(
        "gamepass_relay.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
