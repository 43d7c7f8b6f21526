"""Run the API with uvicorn on the configured host and port."""

import logging

import uvicorn

from exercise_tracker.config import get_settings
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Exercise Tracker starting on port {settings.port}",
        extra={"port": settings.port},
    )
    uvicorn.run(
        "exercise_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
