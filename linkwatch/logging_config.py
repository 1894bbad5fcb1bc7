"""Logging configuration for LinkWatch application."""

import logging
import os
import sys

LOG_LEVEL_ENV = "LINKWATCH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are chatty at DEBUG on every probe
NOISY_LOGGERS = ("urllib3", "requests")


def resolve_log_level(value: str | None) -> int:
    """Map a level name such as "debug" to its logging constant.

    Unknown or empty names resolve to INFO.
    """
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> int:
    """Configure application-wide logging.

    Logs to stderr with timestamp, logger name, level and message. The level
    comes from LINKWATCH_LOG_LEVEL (default: INFO). Connection pool chatter
    from urllib3/requests is held at WARNING unless LINKWATCH_LOG_HTTP is set.

    Examples:
        $ python -m linkwatch
        $ LINKWATCH_LOG_LEVEL=DEBUG python -m linkwatch

    Returns:
        The effective root log level
    """
    raw_level = os.environ.get(LOG_LEVEL_ENV)
    log_level = resolve_log_level(raw_level)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Override any existing configuration
    )

    if not os.environ.get("LINKWATCH_LOG_HTTP"):
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    logger = logging.getLogger(__name__)
    if raw_level and log_level == logging.INFO and raw_level.strip().upper() != "INFO":
        logger.warning("Unknown %s=%r, using INFO", LOG_LEVEL_ENV, raw_level)
    logger.info("Logging configured: level=%s", logging.getLevelName(log_level))

    return log_level
