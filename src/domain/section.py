"""
Sections for Load64.

A section is an ordered bucket of item ids sharing a classification
predicate. Sections store ids rather than items, so sorting members
needs the owning library's item map.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Tuple

from .errors import MembershipMismatch
from .item import Item, ItemId, normalize_character

SectionId = uuid.UUID


def new_section_id() -> SectionId:
    """Mint a fresh section id. Ids are random and never reused."""
    return uuid.uuid4()


class Section(ABC):
    """
    Capability set every section variant provides.

    Members are kept sorted by item order after every insertion.
    Neighbor lookups return None at either end, or when the given id
    is not a member at all.
    """

    def __init__(self):
        self._id: SectionId = new_section_id()
        self._member_ids: List[ItemId] = []

    @property
    def id(self) -> SectionId:
        return self._id

    @property
    def member_ids(self) -> Tuple[ItemId, ...]:
        return tuple(self._member_ids)

    @property
    @abstractmethod
    def label(self) -> str:
        """Short label shown in the section header."""

    @property
    def title(self) -> str:
        return f"Section '{self.label}'"

    @abstractmethod
    def accepts(self, item: Item) -> bool:
        """Check whether an item belongs in this section. Must be side effect free."""

    @abstractmethod
    def satisfies(self, key: str) -> bool:
        """Check whether a lookup key (e.g. a typed character) selects this section."""

    def insert(self, item: Item, items: Mapping[ItemId, Item]) -> None:
        """
        Add an item and re-sort the members.

        Args:
            item: Item to add
            items: Item map used to resolve member ids while sorting

        Raises:
            MembershipMismatch: If the section does not accept the item
        """
        if not self.accepts(item):
            raise MembershipMismatch(
                f"Game '{item.title}' does not belong in {self.title}"
            )
        if item.id not in self._member_ids:
            self._member_ids.append(item.id)
        self._member_ids.sort(key=items.__getitem__)

    def discard(self, item_id: ItemId) -> None:
        """Remove a member id if present."""
        if item_id in self._member_ids:
            self._member_ids.remove(item_id)

    def first_id(self) -> Optional[ItemId]:
        return self._member_ids[0] if self._member_ids else None

    def last_id(self) -> Optional[ItemId]:
        return self._member_ids[-1] if self._member_ids else None

    def id_after(self, current: ItemId) -> Optional[ItemId]:
        position = self._position(current)
        if position is None or position + 1 >= len(self._member_ids):
            return None
        return self._member_ids[position + 1]

    def id_before(self, current: ItemId) -> Optional[ItemId]:
        position = self._position(current)
        if position is None or position == 0:
            return None
        return self._member_ids[position - 1]

    def _position(self, item_id: ItemId) -> Optional[int]:
        try:
            return self._member_ids.index(item_id)
        except ValueError:
            return None

    def __len__(self) -> int:
        return len(self._member_ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._member_ids


class CharacterSection(Section):
    """
    Section holding every item whose sort key starts with one character.

    The character is taken from a sample item, normalized to uppercase,
    so 'monkey-island' and 'Maniac-Mansion' share section 'M'. Sections
    order by their character using plain ordinal comparison.
    """

    def __init__(self, item: Item):
        super().__init__()
        self._character = normalize_character(item.sort_key)

    @property
    def character(self) -> str:
        return self._character

    @property
    def label(self) -> str:
        return self._character

    def accepts(self, item: Item) -> bool:
        return normalize_character(item.sort_key) == self._character

    def satisfies(self, key: str) -> bool:
        if not key:
            return False
        return normalize_character(key) == self._character

    def __lt__(self, other: "CharacterSection") -> bool:
        if not isinstance(other, CharacterSection):
            return NotImplemented
        return self._character < other._character

    def __repr__(self) -> str:
        return f"CharacterSection({self._character!r}, members={len(self)})"
