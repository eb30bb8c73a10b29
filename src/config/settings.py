"""
Settings management for Load64.
Handles loading, saving, and managing application settings.
"""

import json
import os
import traceback
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

import constants
from constants import (
    DEFAULT_GAMES_DIR,
    VISIBILITY_FILE_NAME,
    CONTROLLER_MAPPING_FILE_NAME,
    CARD_SPACING,
)


@dataclass
class Settings:
    """Application settings with default values."""

    games_dir: str = ""
    visibility_file: str = ""
    mode: str = "browse"  # "browse" or "manage"
    last_item_id: str = ""  # Restored on start via jump-to-item
    fullscreen: bool = False
    enable_boxart: bool = True
    carousel_spacing: int = CARD_SPACING

    def __post_init__(self):
        """Set default paths if not specified."""
        if not self.games_dir:
            self.games_dir = DEFAULT_GAMES_DIR
        if not self.visibility_file:
            self.visibility_file = os.path.join(
                os.path.dirname(constants.CONFIG_FILE), VISIBILITY_FILE_NAME
            )
        if self.mode not in ("browse", "manage"):
            self.mode = "browse"

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)


def get_default_settings() -> Dict[str, Any]:
    """Get default settings as a dictionary."""
    return Settings().to_dict()


def load_settings() -> Dict[str, Any]:
    """
    Load settings from config file.

    Returns:
        Dictionary of settings with defaults for missing values
    """
    default_settings = get_default_settings()
    config_file = constants.CONFIG_FILE

    try:
        if os.path.exists(config_file):
            with open(config_file, "r") as f:
                loaded_settings = json.load(f)
                # Merge with defaults to handle new settings
                default_settings.update(loaded_settings)
        else:
            # Create config file with defaults
            save_settings(default_settings)
    except (OSError, ValueError) as e:
        from utils.logging import log_error

        log_error(
            "Failed to load settings, using defaults",
            type(e).__name__,
            traceback.format_exc(),
        )

    return Settings.from_dict(default_settings).to_dict()


def save_settings(settings_to_save: Dict[str, Any]) -> bool:
    """
    Save settings to config file.

    Args:
        settings_to_save: Dictionary of settings to save

    Returns:
        True if successful, False otherwise
    """
    config_file = constants.CONFIG_FILE
    try:
        config_dir = os.path.dirname(config_file)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(config_file, "w") as f:
            json.dump(settings_to_save, f, indent=2)
        return True
    except (OSError, TypeError) as e:
        from utils.logging import log_error

        log_error("Failed to save settings", type(e).__name__, traceback.format_exc())
        return False


# ---- Controller Mapping ---- #

_controller_mapping: Dict[str, Any] = {}


def _mapping_file() -> str:
    return os.path.join(os.path.dirname(constants.CONFIG_FILE), CONTROLLER_MAPPING_FILE_NAME)


def get_controller_mapping() -> Dict[str, Any]:
    """Get the current controller mapping."""
    return _controller_mapping


def load_controller_mapping() -> bool:
    """
    Load controller mapping from file.

    Hat entries are stored as JSON lists and converted back to
    ("hat", x, y) tuples.

    Returns:
        True if mapping was loaded, False otherwise
    """
    global _controller_mapping

    mapping_file = _mapping_file()

    try:
        if os.path.exists(mapping_file):
            with open(mapping_file, "r") as f:
                raw = json.load(f)
            _controller_mapping = {
                action: tuple(value) if isinstance(value, list) else value
                for action, value in raw.items()
            }
            print("Controller mapping loaded from file")
            return True
        else:
            print("No controller mapping found, using defaults")
            _controller_mapping = {}
            return False
    except (OSError, ValueError, AttributeError) as e:
        from utils.logging import log_error

        log_error(
            "Failed to load controller mapping",
            type(e).__name__,
            traceback.format_exc(),
        )
        _controller_mapping = {}
        return False


def save_controller_mapping(mapping: Optional[Dict[str, Any]] = None) -> bool:
    """
    Save controller mapping to file.

    Args:
        mapping: Controller mapping to save. If None, saves current mapping.

    Returns:
        True if successful, False otherwise
    """
    global _controller_mapping

    if mapping is not None:
        _controller_mapping = mapping

    mapping_file = _mapping_file()

    try:
        os.makedirs(os.path.dirname(mapping_file), exist_ok=True)
        with open(mapping_file, "w") as f:
            json.dump(_controller_mapping, f, indent=2)
        print("Controller mapping saved")
        return True
    except (OSError, TypeError) as e:
        from utils.logging import log_error

        log_error(
            "Failed to save controller mapping",
            type(e).__name__,
            traceback.format_exc(),
        )
        return False
