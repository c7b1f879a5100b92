"""Configuration for board dimensions and logging.
Defaults can be overridden via CLI before creating boards.
"""
import os

BOARD_SIZE = 3

LOG_LEVEL = os.getenv("TTT_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("TTT_LOG_FORMAT", "simple")


def set_board(size: int) -> None:
    """Set the global board size used by boards built without an explicit size."""
    global BOARD_SIZE
    if isinstance(size, str):
        size = int(size)
    if isinstance(size, bool) or int(size) != size:
        raise ValueError(f"Board size must be an integer, got {size!r}")
    size = int(size)
    if size < 1:
        raise ValueError(f"Board size must be at least 1, got {size}")
    BOARD_SIZE = size
