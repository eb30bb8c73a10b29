"""
Controller input handling for Load64.
Turns keyboard and gamepad events into navigation intents and app commands.
"""

import pygame
from typing import Dict, Any, Optional, List

from input.intents import (
    Command,
    Intent,
    NEXT_ITEM,
    PREVIOUS_ITEM,
    NEXT_SECTION,
    PREVIOUS_SECTION,
)


class ControllerHandler:
    """
    Maps pygame events to intents and commands.

    Keyboard keys are fixed. Gamepad buttons come from the controller
    mapping: an int is a button index, ("hat", x, y) is a D-pad direction.
    """

    # Actions a gamepad mapping may bind
    MAPPABLE_ACTIONS = [
        'left', 'right',
        'left_shoulder', 'right_shoulder',
        'left_trigger', 'right_trigger',
        'back', 'start', 'detail',
    ]

    DEFAULT_MAPPING: Dict[str, Any] = {
        'left': ("hat", -1, 0),
        'right': ("hat", 1, 0),
    }

    KEY_INTENTS = {
        pygame.K_LEFT: PREVIOUS_ITEM,
        pygame.K_RIGHT: NEXT_ITEM,
        pygame.K_UP: PREVIOUS_SECTION,
        pygame.K_DOWN: NEXT_SECTION,
        pygame.K_PAGEUP: PREVIOUS_SECTION,
        pygame.K_PAGEDOWN: NEXT_SECTION,
    }

    KEY_COMMANDS = {
        pygame.K_ESCAPE: Command.QUIT,
        pygame.K_TAB: Command.TOGGLE_MODE,
        pygame.K_DELETE: Command.TOGGLE_HIDDEN,
    }

    ACTION_INTENTS = {
        'left': PREVIOUS_ITEM,
        'right': NEXT_ITEM,
        'left_shoulder': PREVIOUS_SECTION,
        'right_shoulder': NEXT_SECTION,
        'left_trigger': PREVIOUS_SECTION,
        'right_trigger': NEXT_SECTION,
    }

    ACTION_COMMANDS = {
        'back': Command.QUIT,
        'start': Command.TOGGLE_MODE,
        'detail': Command.TOGGLE_HIDDEN,
    }

    def __init__(self, mapping: Optional[Dict[str, Any]] = None):
        """
        Initialize controller handler.

        Args:
            mapping: Optional button mapping, merged over the defaults
        """
        self._mapping: Dict[str, Any] = dict(self.DEFAULT_MAPPING)
        if mapping:
            self._mapping.update(mapping)

    def set_mapping(self, mapping: Dict[str, Any]) -> None:
        self._mapping = dict(self.DEFAULT_MAPPING)
        self._mapping.update(mapping)

    def get_mapping(self) -> Dict[str, Any]:
        return self._mapping.copy()

    def get_button(self, action: str) -> Optional[Any]:
        return self._mapping.get(action)

    def intent_for_event(self, event: pygame.event.Event) -> Optional[Intent]:
        """
        Get the cursor transition an event asks for.

        Args:
            event: Pygame event

        Returns:
            Intent, or None if the event is not a navigation input
        """
        if event.type == pygame.KEYDOWN:
            intent = self.KEY_INTENTS.get(event.key)
            if intent is not None:
                return intent
            character = getattr(event, "unicode", "")
            if len(character) == 1 and character.isalnum():
                return Intent.jump_to_section(character)
            return None

        action = self.action_for_event(event)
        if action is None:
            return None
        return self.ACTION_INTENTS.get(action)

    def command_for_event(self, event: pygame.event.Event) -> Optional[Command]:
        if event.type == pygame.KEYDOWN:
            return self.KEY_COMMANDS.get(event.key)

        action = self.action_for_event(event)
        if action is None:
            return None
        return self.ACTION_COMMANDS.get(action)

    def action_for_event(self, event: pygame.event.Event) -> Optional[str]:
        """
        Get the mapped gamepad action name for a joystick event.

        Args:
            event: Pygame event

        Returns:
            Action name or None if no match
        """
        for action in self.MAPPABLE_ACTIONS:
            if self.input_matches_action(event, action):
                return action
        return None

    def input_matches_action(self, event: pygame.event.Event, action: str) -> bool:
        button_info = self.get_button(action)

        if button_info is None:
            return False

        if event.type == pygame.JOYBUTTONDOWN:
            if isinstance(button_info, int):
                return event.button == button_info

        elif event.type == pygame.JOYHATMOTION:
            if (isinstance(button_info, (tuple, list))
                    and len(button_info) >= 3 and button_info[0] == "hat"):
                _, expected_x, expected_y = button_info[0:3]
                return tuple(event.value) == (expected_x, expected_y)

        return False

    def get_unmapped_actions(self) -> List[str]:
        return [
            action for action in self.MAPPABLE_ACTIONS
            if action not in self._mapping
        ]
