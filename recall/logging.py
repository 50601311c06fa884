import logging

import structlog

from recall.config import settings


def configure_logging() -> None:
    """Route structlog through stdlib logging with ISO timestamps and JSON output."""
    logging.basicConfig(level=settings.log_level.upper())
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


logger = structlog.get_logger()
