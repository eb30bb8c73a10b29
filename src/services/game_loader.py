"""
Game loading service for Load64.
Reads one game per sub-directory of the games folder into Items.

Layout of a game directory::

    <games_dir>/<game>/config.json
    <games_dir>/<game>/media/2d-box-front-thumbnail.png
    <games_dir>/<game>/<rom files listed in config.json>
"""

import json
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from constants import GAME_CONFIG_FILE_NAME, MEDIA_DIR_NAME, MEDIA_EXTENSIONS
from domain.item import Item, ItemId, Media, MediaSet, MediaType, Rom
from utils.logging import log_error

REQUIRED_FIELDS = ("id", "title", "sortTitle")
MAX_YEAR = 0xFFFF


class GamesDirectoryError(Exception):
    """Raised when the games directory itself cannot be read."""


class GameConfigError(ValueError):
    """Raised when a single game's config.json is unusable."""


def load_games_from_directory(games_dir: Union[str, Path]) -> List[Item]:
    """
    Load every game found under a games directory.

    Entries that fail to load are logged and skipped; they never abort
    the batch.

    Args:
        games_dir: Directory containing one sub-directory per game

    Returns:
        List of Items in directory-name order

    Raises:
        GamesDirectoryError: If games_dir is missing or cannot be listed
    """
    games_dir = Path(games_dir)
    if not games_dir.is_dir():
        raise GamesDirectoryError(f"Games directory does not exist: {games_dir}")

    try:
        entries = sorted(games_dir.iterdir())
    except OSError as e:
        raise GamesDirectoryError(f"Failed to read games directory: {e}") from e

    games: List[Item] = []
    for game_dir in entries:
        if not game_dir.is_dir():
            continue

        config_path = game_dir / GAME_CONFIG_FILE_NAME
        if not config_path.exists():
            continue

        try:
            games.append(load_game_from_config(config_path, game_dir))
        except (OSError, ValueError) as e:
            log_error(
                f"Failed to load game from {config_path}: {e}",
                type(e).__name__,
                traceback.format_exc(),
            )

    print(f"Loaded {len(games)} games from {games_dir}")
    return games


def load_game_from_config(config_path: Path, game_dir: Path) -> Item:
    """
    Build an Item from a game's config.json.

    Raises:
        GameConfigError: If required fields are missing or have the wrong type
        ValueError: If the file is not valid JSON
        OSError: If the file cannot be read
    """
    with open(config_path, "r", encoding="utf-8") as f:
        config = json.load(f)

    if not isinstance(config, dict):
        raise GameConfigError("config.json must contain an object")

    for key in REQUIRED_FIELDS:
        if not isinstance(config.get(key), str) or not config[key]:
            raise GameConfigError(f"Missing or invalid '{key}'")

    return Item(
        id=ItemId(config["id"]),
        title=config["title"],
        sort_key=config["sortTitle"],
        year=parse_year(config.get("year")),
        publisher=_optional_str(config, "publisher"),
        notes=_optional_str(config, "notes"),
        media=load_media_set(game_dir),
        roms=_load_roms(config, game_dir),
    )


def parse_year(value: Any) -> Optional[int]:
    """
    Parse a release year stored as a string or number.

    Returns:
        The year, or None if missing, unparsable or outside 0..65535
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        year = int(str(value).strip())
    except ValueError:
        return None
    if 0 <= year <= MAX_YEAR:
        return year
    return None


def load_media_set(game_dir: Path) -> MediaSet:
    media_dir = game_dir / MEDIA_DIR_NAME
    found: Dict[str, Optional[Media]] = {
        media_type.name.lower(): load_media(media_dir, media_type)
        for media_type in MediaType
    }
    return MediaSet(**found)


def load_media(media_dir: Path, media_type: MediaType) -> Optional[Media]:
    """Find the first existing image for a media type (png, then jpg, then jpeg)."""
    for ext in MEDIA_EXTENSIONS:
        path = media_dir / f"{media_type.value}.{ext}"
        if path.exists():
            return Media(media_type, path)
    return None


def _load_roms(config: Dict[str, Any], game_dir: Path) -> List[Rom]:
    roms = config.get("roms") or []
    if not isinstance(roms, list):
        raise GameConfigError("'roms' must be a list of file names")
    return [Rom(game_dir / str(name)) for name in roms]


def _optional_str(config: Dict[str, Any], key: str) -> Optional[str]:
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise GameConfigError(f"'{key}' must be a string")
    return value or None
