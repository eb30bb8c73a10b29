"""
Library for Load64.

Owns every item (keyed by id) and the sorted list of sections, and
provides all cursor movement: item and section stepping with circular
wrap-around, jumps, and the fixed-size carousel window.
"""

from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .cursor import Cursor
from .errors import StaleCursorError
from .item import Item, ItemId
from .section import Section, SectionId

SectionFactory = Callable[[Item], Section]


def _next_index(current: int, length: int) -> int:
    return (current + 1) % length


def _previous_index(current: int, length: int) -> int:
    return (current + length - 1) % length


class Library:
    """
    Item store plus navigation over sections.

    Sections must be orderable (``__lt__``); the list is re-sorted every
    time a section is created. Cursors are resolved to sections by id,
    never by position, so re-sorting never invalidates them.
    """

    def __init__(self, section_factory: SectionFactory):
        self._items: Dict[ItemId, Item] = {}
        self._sections: List[Section] = []
        self._sections_by_id: Dict[SectionId, Section] = {}
        self._section_factory = section_factory

    # ---- Contents ---- #

    @property
    def items(self) -> Mapping[ItemId, Item]:
        return MappingProxyType(self._items)

    @property
    def sections(self) -> Tuple[Section, ...]:
        return tuple(self._sections)

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._sections

    def get_item(self, item_id: ItemId) -> Optional[Item]:
        return self._items.get(item_id)

    def item_at(self, cursor: Cursor) -> Optional[Item]:
        """Get the item a cursor points at."""
        return self._items.get(cursor.item_id)

    def section_at(self, cursor: Cursor) -> Optional[Section]:
        return self._sections_by_id.get(cursor.section_id)

    # ---- Insertion ---- #

    def add_item(self, item: Item) -> None:
        """
        Store an item and file it under its section.

        An item with an id already in the library replaces the old one;
        the old entry is dropped from its section first, and a section
        left empty by that is removed.
        """
        if item.id in self._items:
            self._forget(item.id)
        self._items[item.id] = item
        section = self._ensure_section(item)
        section.insert(item, self._items)

    def add_items(self, items: Iterable[Item]) -> None:
        for item in items:
            self.add_item(item)

    def _forget(self, item_id: ItemId) -> None:
        for section in list(self._sections):
            if item_id in section:
                section.discard(item_id)
                if not len(section):
                    self._sections.remove(section)
                    del self._sections_by_id[section.id]

    def _ensure_section(self, item: Item) -> Section:
        section = self._find_section(item)
        if section is None:
            section = self._create_section(item)
        return section

    def _find_section(self, item: Item) -> Optional[Section]:
        for section in self._sections:
            if section.accepts(item):
                return section
        return None

    def _create_section(self, item: Item) -> Section:
        section = self._section_factory(item)
        self._sections.append(section)
        self._sections.sort()
        self._sections_by_id[section.id] = section
        return section

    # ---- Traversal ---- #

    def initial_cursor(self) -> Optional[Cursor]:
        """First item of the first section, or None when empty."""
        if not self._sections:
            return None
        return Cursor.first_item(self._sections[0])

    def next_section(self, cursor: Cursor) -> Optional[Cursor]:
        if not self._sections:
            return None
        return Cursor.first_item(self._neighbor_section(cursor, _next_index))

    def previous_section(self, cursor: Cursor) -> Optional[Cursor]:
        if not self._sections:
            return None
        return Cursor.first_item(self._neighbor_section(cursor, _previous_index))

    def next_item(self, cursor: Cursor) -> Optional[Cursor]:
        """
        Step to the next item, crossing into the next section (circularly)
        when the cursor is on the last item of its section.
        """
        if not self._sections:
            return None
        section = self._current_section(cursor)

        next_id = section.id_after(cursor.item_id)
        if next_id is not None:
            return Cursor.for_item(section, next_id)

        return Cursor.first_item(self._neighbor_section(cursor, _next_index))

    def previous_item(self, cursor: Cursor) -> Optional[Cursor]:
        """
        Step to the previous item. Crossing a section boundary lands on the
        last item of the previous section, so next/previous stay inverse.
        """
        if not self._sections:
            return None
        section = self._current_section(cursor)

        previous_id = section.id_before(cursor.item_id)
        if previous_id is not None:
            return Cursor.for_item(section, previous_id)

        return Cursor.last_item(self._neighbor_section(cursor, _previous_index))

    def jump_to_section(self, key: str) -> Optional[Cursor]:
        for section in self._sections:
            if section.satisfies(key):
                return Cursor.first_item(section)
        return None

    def jump_to_item(self, item_id: ItemId) -> Optional[Cursor]:
        item = self._items.get(item_id)
        if item is None:
            return None
        section = self._find_section(item)
        if section is None:
            return None
        return Cursor.for_item(section, item_id)

    # ---- Windowing ---- #

    def window(self, cursor: Cursor, magnitude: int, count: int) -> Optional[List[Item]]:
        """
        Materialize ``count`` items for the carousel strip.

        The strip starts ``abs(magnitude)`` items before the cursor (the
        sign of magnitude is ignored) and walks forward from there. When
        count exceeds the number of items, items repeat in wrap order.

        Args:
            cursor: Position to build the strip around
            magnitude: Number of items to step back before filling
            count: Number of items to return

        Returns:
            List of exactly ``count`` items, or None if the library is empty
        """
        if not self._sections:
            return None

        start = self._step_back(cursor, abs(magnitude))
        if start is None:
            return None
        if count <= 0:
            return []

        window = [self._items[start.item_id]]
        current = start
        for _ in range(count - 1):
            current = self.next_item(current)
            if current is None:
                return None
            window.append(self._items[current.item_id])
        return window

    def _step_back(self, cursor: Cursor, steps: int) -> Optional[Cursor]:
        current: Optional[Cursor] = cursor
        for _ in range(steps):
            current = self.previous_item(current)
            if current is None:
                return None
        return current

    # ---- Section resolution ---- #

    def _section_index(self, cursor: Cursor) -> int:
        section = self._sections_by_id.get(cursor.section_id)
        if section is None:
            raise StaleCursorError(cursor.section_id)
        return self._sections.index(section)

    def _current_section(self, cursor: Cursor) -> Section:
        return self._sections[self._section_index(cursor)]

    def _neighbor_section(
        self, cursor: Cursor, step: Callable[[int, int], int]
    ) -> Section:
        index = step(self._section_index(cursor), len(self._sections))
        return self._sections[index]
