"""loguru sinks for command-line runs.

The library's own logger is disabled on import (see ``pikaia/__init__.py``);
:func:`setup_logger` is what turns it on.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "{name}:{function}:{line} | "
    "<level>{message}</level>"
)


def setup_logger(
    log_dir: str = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
) -> str:
    """Send ``pikaia`` log records to stderr and to a rotating file in *log_dir*.

    Returns:
        Path of the log file.
    """
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / f"pikaia_{datetime.now(timezone.utc):%Y%m%d_%H%M%S}.log"

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=enable_colors and sys.stderr.isatty(),
    )
    logger.add(
        log_file,
        level=level,
        format=LOG_FORMAT,
        colorize=False,
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
    )
    logger.enable("pikaia")

    logger.info("[Logging] level={}, file={}", level, log_file)
    return str(log_file)
