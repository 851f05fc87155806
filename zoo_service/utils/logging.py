import logging
import os
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%d-%m-%Y %H:%M:%S"

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "httpx", "urllib3")


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps each record in an ANSI color for its level"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        log_message = super().format(record)
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        return f"{color}{log_message}{self.COLORS['RESET']}"


def supports_color() -> bool:
    """
    Check if the console should receive ANSI colors.

    FORCE_COLOR always wins; NO_COLOR, CI and non-TTY streams disable colors.
    """
    if os.getenv("FORCE_COLOR"):
        return True

    if os.getenv("NO_COLOR") or os.getenv("CI"):
        return False

    if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
        return False

    return os.getenv("TERM", "").lower() not in ("dumb", "unknown")


def setup_logging(level: str = "INFO", use_colors: Optional[bool] = None) -> None:
    """
    Configure the root logger for the whole service.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_colors: Whether to use colored output (auto-detected if None)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if use_colors is None:
        use_colors = supports_color()

    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter_class(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace rather than append so repeated calls do not duplicate output
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)
