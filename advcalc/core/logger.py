"""
Logging configuration for the console surface.

Library modules only create `logging.getLogger(__name__)` loggers under the
"advcalc" namespace; handlers are installed here, by the CLI.
"""

import logging
import sys

LOGGER_NAME = "advcalc"


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colours records by level.
    """

    GREY = "\x1b[38;20m"
    GREEN = "\x1b[32;20m"
    YELLOW = "\x1b[33;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    # Format: [TIME] [LEVEL] logger: message
    FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

    FORMATS = {
        logging.DEBUG: GREY + FORMAT + RESET,
        logging.INFO: GREEN + FORMAT + RESET,
        logging.WARNING: YELLOW + FORMAT + RESET,
        logging.ERROR: RED + FORMAT + RESET,
        logging.CRITICAL: BOLD_RED + FORMAT + RESET,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.FORMAT)
        formatter = logging.Formatter(log_fmt, datefmt="%H:%M:%S")
        return formatter.format(record)


def configure_logging(level: str | int = logging.WARNING, color: bool = True) -> logging.Logger:
    """
    Install a single stderr handler on the "advcalc" logger.

    Repeated calls replace the handler instead of stacking new ones.

    Args:
        level: Level name ("INFO") or number
        color: Use ColoredFormatter (plain Formatter otherwise)

    Returns:
        The configured "advcalc" logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_advcalc_console", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        ColoredFormatter()
        if color
        else logging.Formatter(ColoredFormatter.FORMAT, datefmt="%H:%M:%S")
    )
    handler._advcalc_console = True
    logger.addHandler(handler)

    return logger
