"""
Configuration management for Load64.
"""

from .settings import (
    load_settings,
    save_settings,
    get_default_settings,
    get_controller_mapping,
    load_controller_mapping,
    save_controller_mapping,
    Settings,
)

__all__ = [
    'load_settings',
    'save_settings',
    'get_default_settings',
    'get_controller_mapping',
    'load_controller_mapping',
    'save_controller_mapping',
    'Settings',
]
