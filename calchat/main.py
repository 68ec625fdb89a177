"""Main entry point for the calchat API."""

import uvicorn

from .api import create_fastapi_app
from .config import Settings
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    """Run the application."""
    settings = Settings()
    setup_logging(log_level=settings.log_level, log_file=settings.log_file)

    app = create_fastapi_app(settings=settings)
    logger.info(f"Serving on {settings.api_url}")

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
