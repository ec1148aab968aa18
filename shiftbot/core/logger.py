"""Logger configuration for the shiftbot CLI and services.

The console sink stays short because the CLI prints its own results to
stdout; keyword context is appended only when a call carries some. The
optional file sink keeps the full call site and context.
"""

import sys
from pathlib import Path

from loguru import logger

from shiftbot.config.settings import settings

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def _console_format(record) -> str:
    if record["extra"]:
        return CONSOLE_FORMAT + " <dim>{extra}</dim>\n{exception}"
    return CONSOLE_FORMAT + "\n{exception}"


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str | None = None,
    retention: str | None = None,
) -> None:
    """Configure loguru with a console sink and an optional file sink.

    Every argument left as None falls back to its SHIFTBOT_LOG_* setting.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to a log file; no file sink when neither this nor
            SHIFTBOT_LOG_FILE is set
        rotation: Log rotation size or interval (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    logger.remove()

    logger.add(
        sys.stderr,
        format=_console_format,
        level=level,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation or settings.log_rotation,
            retention=retention or settings.log_retention,
            backtrace=True,
            diagnose=False,
            encoding="utf-8",
        )

    logger.debug("Logger initialized", log_level=level, log_file=log_file)
