"""
Navigation engine for Load64.
Items, alphabetic sections, cursors and the library that ties them together.
"""

from .item import ItemId, Item, Media, MediaType, MediaSet, Rom
from .section import SectionId, Section, CharacterSection, normalize_character
from .cursor import Cursor
from .library import Library
from .errors import MembershipMismatch, StaleCursorError

__all__ = [
    "ItemId",
    "Item",
    "Media",
    "MediaType",
    "MediaSet",
    "Rom",
    "SectionId",
    "Section",
    "CharacterSection",
    "normalize_character",
    "Cursor",
    "Library",
    "MembershipMismatch",
    "StaleCursorError",
]
