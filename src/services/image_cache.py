"""
Image caching service for Load64.
Loads box art for carousel cards in the background and caches the surfaces.
"""

import traceback
from pathlib import Path
from queue import Queue, Empty
from threading import Thread
from typing import Dict, Optional, Tuple, Union

import pygame

from constants import CARD_WIDTH, CARD_HEIGHT, CURRENT_CARD_SCALE
from domain.item import Item
from utils.logging import log_error

# One copy per image, at the current (largest) card size
CACHE_SIZE = (int(CARD_WIDTH * CURRENT_CARD_SCALE), int(CARD_HEIGHT * CURRENT_CARD_SCALE))

_LOADING = "loading"


class ImageCache:
    """
    Caches box art surfaces keyed by file path.

    Files are read and decoded on background threads; finished surfaces
    travel back through a queue that the main thread drains in update().
    A failed load is cached as None so it is not retried every frame.
    """

    def __init__(self, target_size: Tuple[int, int] = CACHE_SIZE):
        self._target_size = target_size
        self._cache: Dict[Path, Union[pygame.Surface, str, None]] = {}
        self._queue: Queue = Queue()

    def get_artwork(self, item: Item) -> Optional[pygame.Surface]:
        """
        Get the card image for an item, starting a load if needed.

        Returns:
            pygame.Surface if loaded, None while loading or if there is no artwork
        """
        media = item.media.artwork()
        if media is None:
            return None

        if media.path in self._cache:
            cached = self._cache[media.path]
            return None if cached == _LOADING else cached

        self._cache[media.path] = _LOADING
        thread = Thread(target=self._load_image_async, args=(media.path,), daemon=True)
        thread.start()
        return None

    def is_loading(self, item: Item) -> bool:
        """Check whether the item's artwork is still being read in the background."""
        media = item.media.artwork()
        return media is not None and self._cache.get(media.path) == _LOADING

    def update(self) -> None:
        """
        Move loaded images from background threads into the cache.
        Should be called from the main thread each frame.
        """
        while True:
            try:
                path, image = self._queue.get_nowait()
            except Empty:
                break
            self._cache[path] = image

    def _load_image_async(self, path: Path) -> None:
        try:
            image = _to_scalable(pygame.image.load(str(path)))
            scaled_image = pygame.transform.smoothscale(image, self._target_size)
            self._queue.put((path, scaled_image))
        except (pygame.error, OSError, ValueError) as e:
            log_error(
                f"Failed to load image from {path}",
                type(e).__name__,
                traceback.format_exc(),
            )
            self._queue.put((path, None))


def _to_scalable(image: pygame.Surface) -> pygame.Surface:
    """Get a 32-bit copy of a decoded image; smoothscale rejects palettized surfaces."""
    if pygame.display.get_surface() is not None:
        return image.convert_alpha()
    if image.get_bitsize() in (24, 32):
        return image
    converted = pygame.Surface(image.get_size(), pygame.SRCALPHA, 32)
    converted.blit(image, (0, 0))
    return converted
