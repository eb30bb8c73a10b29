"""
Cursor value type for Load64.
"""

from dataclasses import dataclass
from typing import Optional

from .item import ItemId
from .section import Section, SectionId


@dataclass(frozen=True)
class Cursor:
    """
    A traversal position: (section id, item id).

    Holds no index, so it stays meaningful when the library re-sorts
    its sections. Only the library should build cursors for callers.
    """

    section_id: SectionId
    item_id: ItemId

    @classmethod
    def first_item(cls, section: Section) -> Optional["Cursor"]:
        item_id = section.first_id()
        if item_id is None:
            return None
        return cls(section.id, item_id)

    @classmethod
    def last_item(cls, section: Section) -> Optional["Cursor"]:
        item_id = section.last_id()
        if item_id is None:
            return None
        return cls(section.id, item_id)

    @classmethod
    def for_item(cls, section: Section, item_id: ItemId) -> "Cursor":
        return cls(section.id, item_id)
