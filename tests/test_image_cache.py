"""Tests for background box art loading."""

import os
import sys
import time

import pygame

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from domain import Item, ItemId, Media, MediaSet, MediaType
from services.image_cache import ImageCache
from utils.logging import get_log_file, update_log_file_path


def item_with_art(path):
    media = MediaSet(box_front_2d=Media(MediaType.BOX_FRONT_2D, path))
    return Item(id=ItemId("zak"), title="Zak", sort_key="zak", media=media)


def wait_for(cache, item, timeout=2.0):
    """Drain the cache queue until the image is resolved or the timeout passes."""
    deadline = time.time() + timeout
    cache.update()
    while cache.is_loading(item) and time.time() < deadline:
        time.sleep(0.01)
        cache.update()
    return cache.get_artwork(item)


def test_item_without_artwork():
    cache = ImageCache()
    assert cache.get_artwork(Item(id=ItemId("a"), title="A", sort_key="a")) is None


def test_loads_and_scales_in_background(tmp_path):
    path = tmp_path / "2d-box-front.png"
    source = pygame.Surface((60, 80))
    source.fill((255, 0, 0))
    pygame.image.save(source, str(path))

    cache = ImageCache(target_size=(30, 40))
    item = item_with_art(path)

    assert cache.get_artwork(item) is None
    assert cache.is_loading(item)
    image = wait_for(cache, item)
    assert image is not None
    assert image.get_size() == (30, 40)


def test_broken_image_is_logged_once(tmp_path):
    update_log_file_path(str(tmp_path / "logs"))
    path = tmp_path / "2d-box-front.png"
    path.write_bytes(b"not an image")

    cache = ImageCache()
    item = item_with_art(path)
    cache.get_artwork(item)

    assert wait_for(cache, item) is None
    assert cache.get_artwork(item) is None
    with open(get_log_file()) as f:
        assert f.read().count("Failed to load image") == 1


def test_palettized_image_is_converted_before_scaling(tmp_path):
    update_log_file_path(str(tmp_path / "logs"))
    path = tmp_path / "2d-box-front.png"
    source = pygame.Surface((60, 80), depth=8)
    source.fill((0, 0, 255))
    pygame.image.save(source, str(path))

    cache = ImageCache(target_size=(30, 40))
    item = item_with_art(path)
    cache.get_artwork(item)

    image = wait_for(cache, item)
    assert not cache.is_loading(item)
    assert image is not None
    assert image.get_size() == (30, 40)
    assert image.get_bitsize() == 32
