"""Logging configuration for the tic-tac-toe engine."""

import logging
import sys


def setup_logging(level: str = "WARNING", format_style: str = "simple") -> None:
    """
    Set up logging configuration for the entire application.

    Diagnostics are written to stderr so they never interleave with the
    board and prompts printed on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple" or "detailed"
    """
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)

    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    }
    log_format = formats.get(format_style, formats["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module, dropping the package prefix.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Logger named e.g. 'board' for 'ttt.board'
    """
    if name.startswith("ttt."):
        name = name[len("ttt."):]
    return logging.getLogger(name)
