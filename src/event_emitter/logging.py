"""Central logging configuration using loguru."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from event_emitter.config import EmitterSettings

_LOGGER_CONFIGURED = False


def configure_logging(settings: EmitterSettings, level: str | None = None) -> None:
    """Route logs to stderr and a rotating file only once."""

    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    log_dir: Path = settings.paths.logs_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.configure(extra={"context": settings.app_name})
    logger.add(
        sink=sys.stderr,
        level=level or settings.log_level,
        colorize=True,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {extra[context]} | {message}",
    )
    logger.add(
        log_dir / "event_emitter.log",
        level="DEBUG",
        rotation="1 week",
        retention=4,
        backtrace=True,
    )

    _LOGGER_CONFIGURED = True


def get_logger(name: str | None = None):
    return logger.bind(context=name or "event-emitter")
