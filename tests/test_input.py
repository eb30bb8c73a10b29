"""Tests for keyboard/gamepad decoding and held-direction repeats."""

import os
import sys

import pygame
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from constants import NAVIGATION_INITIAL_DELAY, NAVIGATION_START_RATE, NAVIGATION_MAX_RATE
from input.controller import ControllerHandler
from input.intents import (
    Command,
    Intent,
    IntentKind,
    NEXT_ITEM,
    PREVIOUS_ITEM,
    NEXT_SECTION,
    PREVIOUS_SECTION,
)
from input.navigation import NavigationHandler


def key_event(key, unicode=""):
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode, mod=0)


def button_event(button):
    return pygame.event.Event(pygame.JOYBUTTONDOWN, button=button, joy=0, instance_id=0)


def hat_event(x, y):
    return pygame.event.Event(pygame.JOYHATMOTION, value=(x, y), hat=0, joy=0, instance_id=0)


GAMEPAD = {
    "left_shoulder": 4,
    "right_shoulder": 5,
    "left_trigger": 6,
    "right_trigger": 7,
    "back": 8,
    "start": 9,
    "detail": 3,
}


# ---------------------------------------------------------------------------
# Keyboard
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "key,expected",
    [
        (pygame.K_LEFT, PREVIOUS_ITEM),
        (pygame.K_RIGHT, NEXT_ITEM),
        (pygame.K_UP, PREVIOUS_SECTION),
        (pygame.K_DOWN, NEXT_SECTION),
        (pygame.K_PAGEUP, PREVIOUS_SECTION),
        (pygame.K_PAGEDOWN, NEXT_SECTION),
    ],
)
def test_navigation_keys(key, expected):
    handler = ControllerHandler()
    assert handler.intent_for_event(key_event(key)) == expected
    assert handler.command_for_event(key_event(key)) is None


def test_typed_character_jumps_to_section():
    handler = ControllerHandler()
    intent = handler.intent_for_event(key_event(pygame.K_m, unicode="m"))
    assert intent == Intent.jump_to_section("m")
    assert intent.kind is IntentKind.JUMP_TO_SECTION

    assert handler.intent_for_event(key_event(pygame.K_7, unicode="7")).value == "7"


def test_non_alphanumeric_keys_ignored():
    handler = ControllerHandler()
    assert handler.intent_for_event(key_event(pygame.K_SPACE, unicode=" ")) is None
    assert handler.intent_for_event(key_event(pygame.K_LSHIFT)) is None


@pytest.mark.parametrize(
    "key,expected",
    [
        (pygame.K_ESCAPE, Command.QUIT),
        (pygame.K_TAB, Command.TOGGLE_MODE),
        (pygame.K_DELETE, Command.TOGGLE_HIDDEN),
    ],
)
def test_command_keys(key, expected):
    assert ControllerHandler().command_for_event(key_event(key)) is expected


# ---------------------------------------------------------------------------
# Gamepad
# ---------------------------------------------------------------------------


def test_default_dpad_steps_items():
    handler = ControllerHandler()
    assert handler.intent_for_event(hat_event(-1, 0)) == PREVIOUS_ITEM
    assert handler.intent_for_event(hat_event(1, 0)) == NEXT_ITEM
    assert handler.intent_for_event(hat_event(0, 0)) is None


def test_mapped_buttons():
    handler = ControllerHandler(GAMEPAD)
    assert handler.intent_for_event(button_event(4)) == PREVIOUS_SECTION
    assert handler.intent_for_event(button_event(7)) == NEXT_SECTION
    assert handler.command_for_event(button_event(8)) is Command.QUIT
    assert handler.command_for_event(button_event(9)) is Command.TOGGLE_MODE
    assert handler.command_for_event(button_event(3)) is Command.TOGGLE_HIDDEN
    assert handler.intent_for_event(button_event(8)) is None
    assert handler.action_for_event(button_event(42)) is None


def test_unmapped_actions():
    handler = ControllerHandler()
    assert "left" not in handler.get_unmapped_actions()
    assert "back" in handler.get_unmapped_actions()

    handler.set_mapping(GAMEPAD)
    assert handler.get_unmapped_actions() == []
    assert handler.get_button("left") == ("hat", -1, 0)


# ---------------------------------------------------------------------------
# Held direction repeats
# ---------------------------------------------------------------------------


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def test_no_repeat_before_initial_delay():
    clock = FakeClock()
    nav = NavigationHandler(get_ticks=clock)

    nav.set_pressed({"right": True})
    assert nav.is_held("right")
    clock.now = NAVIGATION_INITIAL_DELAY - 1
    assert nav.pending_intent() is None


def test_repeat_after_delay_and_acceleration():
    clock = FakeClock()
    nav = NavigationHandler(get_ticks=clock)
    nav.set_pressed({"left": True})

    clock.now = NAVIGATION_START_RATE + NAVIGATION_INITIAL_DELAY
    assert nav.pending_intent() == PREVIOUS_ITEM
    # Just repeated, so nothing due in the same tick
    assert nav.pending_intent() is None

    # Repeats get faster but never beyond the max rate
    gaps = []
    last = clock.now
    while len(gaps) < 40:
        clock.now += 1
        nav.set_pressed({"left": True})
        if nav.pending_intent() is not None:
            gaps.append(clock.now - last)
            last = clock.now
    assert gaps[0] < NAVIGATION_START_RATE
    assert gaps[-1] == NAVIGATION_MAX_RATE


def test_release_stops_repeat():
    clock = FakeClock()
    nav = NavigationHandler(get_ticks=clock)
    nav.set_pressed({"right": True})
    nav.set_pressed({})
    clock.now = 10_000
    assert not nav.is_held("right")
    assert nav.pending_intent() is None


def test_holding_from_time_zero_keeps_start_time():
    clock = FakeClock()
    nav = NavigationHandler(get_ticks=clock)
    nav.set_pressed({"right": True})

    clock.now = 100
    nav.set_pressed({"right": True})
    clock.now = NAVIGATION_INITIAL_DELAY
    assert nav.pending_intent() == NEXT_ITEM


def test_reset():
    nav = NavigationHandler(get_ticks=FakeClock())
    nav.set_pressed({"left": True, "right": True})
    nav.reset()
    assert not nav.is_held("left")
    assert not nav.is_held("right")
    assert nav.pending_intent() is None
