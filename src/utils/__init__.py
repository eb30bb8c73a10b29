"""
Utility functions for Load64.
"""

from .logging import log_error, init_log_file, update_log_file_path, get_log_file
from .formatting import format_metadata, get_initials, truncate_text

__all__ = [
    "log_error",
    "init_log_file",
    "update_log_file_path",
    "get_log_file",
    "format_metadata",
    "get_initials",
    "truncate_text",
]
