"""
Logging setup for csm.

All loggers live under the "csm" namespace. The TUI owns the terminal,
so by default nothing is printed; pass a log file to see what the
scanner is doing.
"""

import logging
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "csm"

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the csm namespace.

    Args:
        name: component name, e.g. "scanner"

    Returns:
        Logger named "csm.<name>"
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = False,
    rich_console: bool = False,
) -> None:
    """Configure the csm logger.

    Existing handlers are removed first, so calling this twice does not
    duplicate output.

    Args:
        level: level for the csm logger
        log_file: if given, append plain-text records to this file
        console: also log to stderr
        rich_console: use Rich's handler for console output
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(level)
    root.propagate = False

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    if console:
        if rich_console:
            from rich.logging import RichHandler

            root.addHandler(RichHandler(show_path=False))
        else:
            stream_handler = logging.StreamHandler()
            stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(stream_handler)


def setup_cli_logging(log_file: Optional[Path] = None) -> logging.Logger:
    """Configure logging for the csm command.

    Without a log file only warnings are kept and nothing reaches the
    terminal. With one, everything down to DEBUG goes to the file.
    """
    if log_file is None:
        setup_logging(level=logging.WARNING)
        # Keep logging's last-resort stderr handler away from the TUI
        logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
    else:
        setup_logging(level=logging.DEBUG, log_file=log_file)
    return get_logger("cli")
