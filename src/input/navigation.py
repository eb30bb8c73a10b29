"""
Held-direction handling for Load64.
Repeats item stepping while left/right is held, speeding up over time.
"""

import pygame
from typing import Dict, Optional, Callable, Any

from constants import (
    AXIS_THRESHOLD,
    NAVIGATION_INITIAL_DELAY,
    NAVIGATION_START_RATE,
    NAVIGATION_MAX_RATE,
    NAVIGATION_ACCELERATION,
)
from input.intents import Intent, NEXT_ITEM, PREVIOUS_ITEM


class NavigationHandler:
    """
    Tracks held left/right input and emits repeated item intents.

    The first step comes from the key/button press event itself; this
    handler only produces the repeats, starting after an initial delay
    and accelerating towards NAVIGATION_MAX_RATE. The left analog stick
    counts as held once it passes AXIS_THRESHOLD.
    """

    DIRECTIONS = ("left", "right")
    INTENTS = {"left": PREVIOUS_ITEM, "right": NEXT_ITEM}

    def __init__(self, get_ticks: Callable[[], int] = pygame.time.get_ticks):
        self._get_ticks = get_ticks

        self._state: Dict[str, bool] = {d: False for d in self.DIRECTIONS}
        self._start_time: Dict[str, int] = {d: 0 for d in self.DIRECTIONS}
        self._last_repeat: Dict[str, int] = {d: 0 for d in self.DIRECTIONS}
        self._velocity: Dict[str, float] = {d: 0 for d in self.DIRECTIONS}

        self._joystick: Optional[pygame.joystick.JoystickType] = None
        self._controller_mapping: Dict[str, Any] = {}

    def set_joystick(self, joystick: Optional[pygame.joystick.JoystickType]) -> None:
        self._joystick = joystick

    def set_controller_mapping(self, mapping: Dict[str, Any]) -> None:
        self._controller_mapping = mapping

    def update(self) -> None:
        """
        Poll keyboard and joystick state. Call once per frame.
        """
        pressed = {d: False for d in self.DIRECTIONS}

        if self._joystick and self._joystick.get_init():
            self._read_joystick(pressed)

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]:
            pressed["left"] = True
        if keys[pygame.K_RIGHT]:
            pressed["right"] = True

        self.set_pressed(pressed)

    def _read_joystick(self, pressed: Dict[str, bool]) -> None:
        joystick = self._joystick

        if joystick.get_numhats() > 0:
            hat_x, _ = joystick.get_hat(0)
            if hat_x < 0:
                pressed["left"] = True
            elif hat_x > 0:
                pressed["right"] = True

        if joystick.get_numaxes() > 0:
            stick_x = joystick.get_axis(0)
            if stick_x < -AXIS_THRESHOLD:
                pressed["left"] = True
            elif stick_x > AXIS_THRESHOLD:
                pressed["right"] = True

        for direction in self.DIRECTIONS:
            button_info = self._controller_mapping.get(direction)
            if (
                isinstance(button_info, int)
                and joystick.get_numbuttons() > button_info
                and joystick.get_button(button_info)
            ):
                pressed[direction] = True

    def set_pressed(self, pressed: Dict[str, bool]) -> None:
        """Record which directions are held and update repeat timing."""
        current_time = self._get_ticks()
        for direction in self.DIRECTIONS:
            was_held = self._state[direction]
            self._state[direction] = bool(pressed.get(direction, False))
            if self._state[direction]:
                if not was_held:
                    self._start_time[direction] = current_time
                    self._last_repeat[direction] = current_time
                    self._velocity[direction] = NAVIGATION_START_RATE
            else:
                self._start_time[direction] = 0
                self._last_repeat[direction] = 0
                self._velocity[direction] = 0

    def is_held(self, direction: str) -> bool:
        return self._state.get(direction, False)

    def should_repeat(self, direction: str) -> bool:
        """
        Check whether a held direction should step again this frame.

        Returns:
            True if a repeat is due
        """
        if not self.is_held(direction):
            return False

        current_time = self._get_ticks()
        if current_time - self._start_time[direction] < NAVIGATION_INITIAL_DELAY:
            return False

        current_velocity = self._velocity[direction]
        if current_time - self._last_repeat[direction] >= current_velocity:
            self._last_repeat[direction] = current_time
            self._velocity[direction] = max(
                current_velocity * NAVIGATION_ACCELERATION, NAVIGATION_MAX_RATE
            )
            return True

        return False

    def pending_intent(self) -> Optional[Intent]:
        """Repeat intent due this frame, if any (one direction per frame)."""
        for direction in self.DIRECTIONS:
            if self.should_repeat(direction):
                return self.INTENTS[direction]
        return None

    def reset(self) -> None:
        for direction in self.DIRECTIONS:
            self._state[direction] = False
            self._start_time[direction] = 0
            self._last_repeat[direction] = 0
            self._velocity[direction] = 0
