"""Logging configuration for hostsetup.

Provides colored console output on stderr and optional file logging.
Probes run on worker threads, so file records carry the thread name.
Uses % formatting (PEP 391) for security.
"""

import logging
import sys
from pathlib import Path

# Marks handlers installed here so a second setup_logging() replaces them
_HANDLER_TAG = "_hostsetup_handler"


class ColoredFormatter(logging.Formatter):
    """Add ANSI colors to log levels."""

    COLORS = {
        "DEBUG": "\033[96m",  # Cyan
        "INFO": "\033[92m",  # Green
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[95m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        The record is shared with other handlers (e.g. the file handler),
        so the original levelname is restored after formatting.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with color codes.
        """
        levelname = record.levelname
        if levelname not in self.COLORS:
            return super().format(record)

        record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    use_colors: bool = True,
) -> None:
    """Configure logging.

    Console output always goes to stderr so the report on stdout can be
    redirected or piped cleanly.

    Args:
        verbose: Enable DEBUG level (default: WARNING+ only)
        log_file: Optional file output path (always DEBUG)
        use_colors: Color console level names
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose or log_file else logging.WARNING)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if use_colors:
        console_handler.setFormatter(ColoredFormatter("%(levelname)s: %(message)s"))
    else:
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(file_formatter)
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    # requests/urllib3 log every connection at DEBUG
    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("requests").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module.
    """
    return logging.getLogger(name)
