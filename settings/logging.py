"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR


def _is_render_output(record) -> bool:
    return record["extra"].get("source") == "render"


def setup_logging(level: str = "INFO", to_file: bool = True):
    """Configure console logging, plus daily files for app and renderer output.

    Lines streamed from the chart renderer are bound with ``source="render"``;
    on the console they are prefixed so they stand apart from our own messages.
    """
    logger.remove()
    logger.configure(extra={"source": "app"})

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
        "<cyan>{extra[source]: <6}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "content_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            filter=lambda record: not _is_render_output(record),
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.add(
            LOG_DIR / "render_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {message}",
            level="DEBUG",
            filter=_is_render_output,
            rotation="00:00",
            retention="7 days",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
