"""Entry point for running the web server."""

import logging

import uvicorn

from tictactoe.config import get_settings


def main() -> None:
    """Run the web server."""
    settings = get_settings()
    logging.basicConfig(
        level="DEBUG" if settings.debug else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run(
        "tictactoe.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
