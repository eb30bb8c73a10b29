"""
Logging utilities for Load64.
Provides error logging with timestamps and traceback support.
"""

import os
import sys
from datetime import datetime
from typing import Optional

from constants import APP_NAME, APP_VERSION, TEMP_LOG_DIR

# Module-level log file path
_log_file: str = os.path.join(TEMP_LOG_DIR, "error.log")


def get_log_file() -> str:
    """Get the current log file path."""
    return _log_file


def update_log_file_path(log_dir: str) -> None:
    """
    Point the error log at a different directory.

    Args:
        log_dir: Directory that should hold error.log (created if missing)
    """
    global _log_file
    os.makedirs(log_dir, exist_ok=True)
    _log_file = os.path.join(log_dir, "error.log")


def log_error(
    error_msg: str,
    error_type: Optional[str] = None,
    traceback_str: Optional[str] = None,
) -> None:
    """
    Log an error message to the log file.

    Args:
        error_msg: The error message to log
        error_type: Optional error type/class name
        traceback_str: Optional traceback string
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_message = f"[{timestamp}] ERROR: {error_msg}\n"

    if error_type:
        log_message += f"Type: {error_type}\n"

    if traceback_str:
        log_message += f"Traceback:\n{traceback_str}\n"

    log_message += "-" * 80 + "\n"

    try:
        with open(_log_file, "a") as f:
            f.write(log_message)
    except OSError as e:
        # If logging fails, print to console as fallback
        print(f"Failed to write to log file: {e}")
        print(log_message)


def init_log_file() -> bool:
    """
    Initialize the log file with system information.

    Returns:
        True if successful, False otherwise
    """
    try:
        log_dir = os.path.dirname(_log_file) or "."
        os.makedirs(log_dir, exist_ok=True)

        with open(_log_file, "w") as f:
            f.write(
                f"{APP_NAME} {APP_VERSION} Error Log - Started at "
                f"{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n"
            )
            f.write(f"Python version: {sys.version}\n")
            f.write(f"Platform: {sys.platform}\n")
            f.write("-" * 80 + "\n")

        print(f"Log file initialized: {_log_file}")
        return True

    except OSError as e:
        print(f"Failed to initialize log file: {e}")
        return False
