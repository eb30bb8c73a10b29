"""
Library browsing session for Load64.

LibraryBrowser is the single owner of navigation state: the full item
list, the library built from it for the current visibility mode, and
the cursor. The UI loop drives it one call at a time.
"""

from typing import Iterable, List, Optional

from domain.cursor import Cursor
from domain.item import Item, ItemId
from domain.library import Library
from input.intents import Intent, IntentKind
from services.library_builder import VisibilityMode, build_library, revalidate_cursor
from services.visibility_store import VisibilityStore


class LibraryBrowser:
    """
    Applies intents to a cursor over a Library.

    A transition that finds nothing (unknown item, no matching section)
    keeps the previous cursor. Changing visibility rebuilds the library
    from the retained items and re-derives the cursor by item id.
    """

    def __init__(
        self,
        items: Iterable[Item],
        store: Optional[VisibilityStore] = None,
        mode: VisibilityMode = VisibilityMode.BROWSE,
    ):
        self._items: List[Item] = list(items)
        self._store = store
        self._mode = mode

        if self._store is not None:
            self._store.apply(self._items)

        self._library: Library = build_library(self._items, self._mode)
        self._cursor: Optional[Cursor] = self._library.initial_cursor()

    # ---- State ---- #

    @property
    def library(self) -> Library:
        return self._library

    @property
    def cursor(self) -> Optional[Cursor]:
        return self._cursor

    @property
    def mode(self) -> VisibilityMode:
        return self._mode

    @property
    def items(self) -> List[Item]:
        return list(self._items)

    def current_item(self) -> Optional[Item]:
        if self._cursor is None:
            return None
        return self._library.item_at(self._cursor)

    def current_section_label(self) -> Optional[str]:
        if self._cursor is None:
            return None
        section = self._library.section_at(self._cursor)
        return section.label if section is not None else None

    def window(self, magnitude: int, count: int) -> Optional[List[Item]]:
        """Carousel strip around the current cursor, or None if there is nothing to show."""
        if self._cursor is None:
            return None
        return self._library.window(self._cursor, magnitude, count)

    # ---- Transitions ---- #

    def apply(self, intent: Intent) -> bool:
        """
        Move the cursor according to an intent.

        Returns:
            True if the cursor changed
        """
        new_cursor = self._resolve(intent)
        if new_cursor is None or new_cursor == self._cursor:
            return False
        self._cursor = new_cursor
        return True

    def _resolve(self, intent: Intent) -> Optional[Cursor]:
        library = self._library

        if intent.kind is IntentKind.JUMP_TO_SECTION:
            return library.jump_to_section(intent.value or "")
        if intent.kind is IntentKind.JUMP_TO_ITEM:
            if not intent.value:
                return None
            return library.jump_to_item(ItemId(intent.value))

        if self._cursor is None:
            return None
        if intent.kind is IntentKind.NEXT_ITEM:
            return library.next_item(self._cursor)
        if intent.kind is IntentKind.PREVIOUS_ITEM:
            return library.previous_item(self._cursor)
        if intent.kind is IntentKind.NEXT_SECTION:
            return library.next_section(self._cursor)
        if intent.kind is IntentKind.PREVIOUS_SECTION:
            return library.previous_section(self._cursor)
        return None

    # ---- Visibility ---- #

    def set_mode(self, mode: VisibilityMode) -> None:
        if mode is self._mode:
            return
        self._mode = mode
        self.rebuild()

    def toggle_mode(self) -> VisibilityMode:
        if self._mode is VisibilityMode.BROWSE:
            self.set_mode(VisibilityMode.MANAGE)
        else:
            self.set_mode(VisibilityMode.BROWSE)
        return self._mode

    def toggle_hidden(self) -> bool:
        """
        Flip the hidden flag of the current game (manage mode only).

        Returns:
            True if a game was toggled
        """
        if self._mode is not VisibilityMode.MANAGE:
            return False
        item = self.current_item()
        if item is None:
            return False

        if self._store is not None:
            self._store.set_hidden(item, not item.hidden)
        else:
            item.hidden = not item.hidden
        self.rebuild()
        return True

    def rebuild(self) -> None:
        """Rebuild the library for the current mode and re-derive the cursor."""
        remembered = self._cursor.item_id if self._cursor is not None else None
        self._library = build_library(self._items, self._mode)
        self._cursor = revalidate_cursor(self._library, remembered)
