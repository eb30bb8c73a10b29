"""
Library construction for Load64.
Builds a Library from the full item list for a visibility mode and
re-derives cursors after a rebuild.
"""

from enum import Enum
from typing import Iterable, Optional

from domain.cursor import Cursor
from domain.item import Item, ItemId
from domain.library import Library
from domain.section import CharacterSection


class VisibilityMode(Enum):
    BROWSE = "browse"  # hidden games are left out
    MANAGE = "manage"  # everything is shown so games can be (un)hidden

    def includes(self, item: Item) -> bool:
        return self is VisibilityMode.MANAGE or not item.hidden


def create_library() -> Library:
    """Empty library that buckets games by the first letter of their sort key."""
    return Library(CharacterSection)


def build_library(items: Iterable[Item], mode: VisibilityMode) -> Library:
    library = create_library()
    library.add_items(item for item in items if mode.includes(item))
    return library


def revalidate_cursor(library: Library, item_id: Optional[ItemId]) -> Optional[Cursor]:
    """
    Re-derive a cursor after the library was rebuilt.

    Args:
        library: The freshly built library
        item_id: Id of the item the old cursor pointed at, if any

    Returns:
        Cursor on the same item if it survived the rebuild, otherwise the
        initial cursor (None if the library is empty)
    """
    if item_id is not None:
        cursor = library.jump_to_item(item_id)
        if cursor is not None:
            return cursor
    return library.initial_cursor()
