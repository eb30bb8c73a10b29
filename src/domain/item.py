"""
Catalog item model for Load64.

An Item is a single game in the library. Items are ordered by their
sort key (never by title) and carry optional metadata plus references
to artwork and executable images on disk.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, NewType, Optional

ItemId = NewType("ItemId", str)


def normalize_character(value: str) -> str:
    """
    Get the bucket character for a sort key or lookup key.

    Takes the first character, upper-cases it and keeps the first
    character of the result ('ß' upper-cases to 'SS', which buckets
    as 'S'). An empty value normalizes to an empty string.

    Args:
        value: Sort key or user supplied key

    Returns:
        Single uppercase character, or "" for an empty value
    """
    if not value:
        return ""
    return value[0].upper()[:1]


class MediaType(Enum):
    """Kinds of artwork a game directory can provide."""

    BOX_FRONT_2D = "2d-box-front"
    BOX_FRONT_2D_THUMBNAIL = "2d-box-front-thumbnail"
    SCREENSHOT_LOADING = "screenshot-loading"
    SCREENSHOT_TITLE = "screenshot-title"
    SCREENSHOT_GAMEPLAY = "screenshot-gameplay"


@dataclass(frozen=True)
class Media:
    media_type: MediaType
    path: Path


@dataclass(frozen=True)
class MediaSet:
    """Artwork references for a single game, one optional slot per type."""

    box_front_2d: Optional[Media] = None
    box_front_2d_thumbnail: Optional[Media] = None
    screenshot_loading: Optional[Media] = None
    screenshot_title: Optional[Media] = None
    screenshot_gameplay: Optional[Media] = None

    def get(self, media_type: MediaType) -> Optional[Media]:
        """Get the media stored for a type, if any."""
        return getattr(self, media_type.name.lower())

    def artwork(self) -> Optional[Media]:
        """Best image for a carousel card: thumbnail first, then full box front."""
        return self.box_front_2d_thumbnail or self.box_front_2d


@dataclass(frozen=True)
class Rom:
    path: Path


@dataclass
class Item:
    """
    A game in the library.

    Only ``hidden`` is expected to change after construction; the
    visibility store flips it and the library is rebuilt afterwards.
    Ordering compares ``sort_key`` by codepoint.
    """

    id: ItemId
    title: str
    sort_key: str
    year: Optional[int] = None
    publisher: Optional[str] = None
    notes: Optional[str] = None
    media: MediaSet = field(default_factory=MediaSet)
    roms: List[Rom] = field(default_factory=list)
    hidden: bool = False

    def __lt__(self, other: "Item") -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __gt__(self, other: "Item") -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.sort_key > other.sort_key

    def first_character(self) -> str:
        return self.sort_key[:1]

    def starts_with(self, character: str) -> bool:
        """Check whether this item buckets under the given character (case-insensitive)."""
        return normalize_character(self.sort_key) == normalize_character(character)

    def same_section(self, other: "Item") -> bool:
        return normalize_character(self.sort_key) == normalize_character(other.sort_key)
