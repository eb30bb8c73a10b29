"""
Input vocabulary for Load64.

Intents are the only ways the cursor can move. Commands are
application actions that do not move the cursor directly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class IntentKind(Enum):
    NEXT_ITEM = "next_item"
    PREVIOUS_ITEM = "previous_item"
    NEXT_SECTION = "next_section"
    PREVIOUS_SECTION = "previous_section"
    JUMP_TO_SECTION = "jump_to_section"
    JUMP_TO_ITEM = "jump_to_item"


@dataclass(frozen=True)
class Intent:
    """
    A requested cursor transition.

    ``value`` carries the section key for JUMP_TO_SECTION and the item
    id for JUMP_TO_ITEM; it is None for the stepping intents.
    """

    kind: IntentKind
    value: Optional[str] = None

    @classmethod
    def jump_to_section(cls, key: str) -> "Intent":
        return cls(IntentKind.JUMP_TO_SECTION, key)

    @classmethod
    def jump_to_item(cls, item_id: str) -> "Intent":
        return cls(IntentKind.JUMP_TO_ITEM, item_id)


NEXT_ITEM = Intent(IntentKind.NEXT_ITEM)
PREVIOUS_ITEM = Intent(IntentKind.PREVIOUS_ITEM)
NEXT_SECTION = Intent(IntentKind.NEXT_SECTION)
PREVIOUS_SECTION = Intent(IntentKind.PREVIOUS_SECTION)


class Command(Enum):
    QUIT = "quit"
    TOGGLE_MODE = "toggle_mode"
    TOGGLE_HIDDEN = "toggle_hidden"
