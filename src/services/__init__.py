"""
Services layer for Load64.
Handles game loading, visibility persistence, library building, and image caching.
"""

from .game_loader import (
    GamesDirectoryError,
    GameConfigError,
    load_games_from_directory,
    load_game_from_config,
    parse_year,
)
from .visibility_store import VisibilityStore
from .library_builder import (
    VisibilityMode,
    create_library,
    build_library,
    revalidate_cursor,
)
from .browser import LibraryBrowser
from .image_cache import ImageCache

__all__ = [
    # Game loader
    'GamesDirectoryError',
    'GameConfigError',
    'load_games_from_directory',
    'load_game_from_config',
    'parse_year',
    # Visibility
    'VisibilityStore',
    # Library building
    'VisibilityMode',
    'create_library',
    'build_library',
    'revalidate_cursor',
    'LibraryBrowser',
    # Image cache
    'ImageCache',
]
