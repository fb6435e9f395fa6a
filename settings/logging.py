"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True):
    """Configure stderr output and an optional daily log file.

    The file sink is queued because the schema store is shared across threads,
    and always records DEBUG so Helm command lines end up in the file.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "rudder_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {thread.name} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
            enqueue=True,
        )
        logger.debug("Logging to {} (console level {})", LOG_DIR, level)

    return logger
