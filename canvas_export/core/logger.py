"""
Loguru sink configuration.

``canvas_export.utils.logging`` renders each event as a JSON string; the sinks
here decide where those strings go and how they are decorated.
"""
import sys
from pathlib import Path

from loguru import logger

from canvas_export.config import settings

# Local runs: colored prefix in front of the JSON event
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <8}</level> "
    "<cyan>{extra[name]}</cyan> "
    "{message}"
)

# Containers and files: the event is already a complete JSON document
JSON_FORMAT = "{message}"

LOG_FILE_NAME = "canvas-export.log"


def setup_logging() -> None:
    """
    Replace loguru's default handler with the service sinks.

    Debug: one colored console sink with loguru's diagnostics enabled.
    Otherwise: plain JSON lines on stdout plus a rotating file under
    ``settings.log_dir``.
    """
    logger.remove()
    logger.configure(extra={"name": "canvas_export"})

    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT if settings.debug else JSON_FORMAT,
        level=settings.log_level,
        colorize=settings.debug,
        backtrace=settings.debug,
        diagnose=settings.debug,
    )

    if not settings.debug:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / LOG_FILE_NAME,
            format=JSON_FORMAT,
            level=settings.log_level,
            rotation="50 MB",
            retention="7 days",
            compression="zip",
            enqueue=True,
        )

    logger.debug(
        f"Log sinks ready (level={settings.log_level}, debug={settings.debug})"
    )
