"""
Visibility persistence for Load64.
Stores the ids of hidden games in a small JSON file.
"""

import json
import os
import traceback
from typing import Iterable, Set

from domain.item import Item, ItemId
from utils.logging import log_error


class VisibilityStore:
    """
    Reads and writes the set of hidden game ids.

    File format: ``{"hidden": ["id-1", "id-2"]}``. A missing file means
    nothing is hidden; a corrupt one is logged and treated the same way.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Set[ItemId]:
        if not os.path.exists(self.path):
            return set()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            hidden = data.get("hidden", []) if isinstance(data, dict) else []
            return {ItemId(str(item_id)) for item_id in hidden}
        except (OSError, ValueError, TypeError) as e:
            log_error(
                f"Failed to load hidden games from {self.path}",
                type(e).__name__,
                traceback.format_exc(),
            )
            return set()

    def save(self, hidden_ids: Iterable[ItemId]) -> bool:
        """
        Write the hidden set to disk.

        Returns:
            True if successful, False otherwise
        """
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"hidden": sorted(hidden_ids)}, f, indent=2)
            return True
        except OSError as e:
            log_error(
                f"Failed to save hidden games to {self.path}",
                type(e).__name__,
                traceback.format_exc(),
            )
            return False

    def apply(self, items: Iterable[Item]) -> None:
        """Set each item's hidden flag from the stored set."""
        hidden = self.load()
        for item in items:
            item.hidden = item.id in hidden

    def set_hidden(self, item: Item, hidden: bool) -> bool:
        """
        Change one item's visibility and persist it.

        The item is updated even if writing fails, so the running
        session stays consistent with what the user just did.
        """
        item.hidden = hidden
        hidden_ids = self.load()
        if hidden:
            hidden_ids.add(item.id)
        else:
            hidden_ids.discard(item.id)
        return self.save(hidden_ids)
