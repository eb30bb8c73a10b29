"""
Load64 Application - Main orchestrator.

This module provides the main application class that coordinates
all components: settings, game loading, the library browser, input, and UI.
"""

import traceback
from typing import Optional

import pygame

from constants import APP_NAME, FPS, SCREEN_WIDTH, SCREEN_HEIGHT
from state import AppState
from config.settings import (
    load_settings,
    save_settings,
    load_controller_mapping,
    get_controller_mapping,
)
from domain.item import Item
from input.controller import ControllerHandler
from input.intents import Command, Intent
from input.navigation import NavigationHandler
from services.browser import LibraryBrowser
from services.game_loader import GamesDirectoryError, load_games_from_directory
from services.image_cache import ImageCache
from services.library_builder import VisibilityMode
from services.visibility_store import VisibilityStore
from ui.theme import Theme
from ui.screens.carousel_screen import CarouselScreen
from utils.logging import log_error, init_log_file


class LibraryBrowserApp:
    """
    Main application class for Load64.

    Owns the LibraryBrowser and runs the pygame loop. Every input is
    decoded into an intent or a command and applied in order.
    """

    def __init__(self, games_dir: Optional[str] = None, start_at: Optional[str] = None):
        """
        Initialize the application.

        Args:
            games_dir: Overrides the games directory from settings
            start_at: Item id to select first, instead of the remembered one
        """
        init_log_file()

        self.state = AppState()
        self.settings = load_settings()
        if games_dir:
            self.settings["games_dir"] = games_dir

        pygame.init()
        pygame.display.set_caption(APP_NAME)
        if self.settings.get("fullscreen"):
            display_info = pygame.display.Info()
            self.screen = pygame.display.set_mode(
                (display_info.current_w, display_info.current_h),
                pygame.FULLSCREEN,
            )
        else:
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.clock = pygame.time.Clock()

        # Initialize joystick
        pygame.joystick.init()
        self.joystick: Optional[pygame.joystick.JoystickType] = None
        if pygame.joystick.get_count() > 0:
            self.joystick = pygame.joystick.Joystick(0)
            self.joystick.init()
            print(f"Joystick detected: {self.joystick.get_name()}")
        else:
            print("No joystick detected, using keyboard")

        load_controller_mapping()
        self.controller = ControllerHandler(get_controller_mapping())
        unmapped = self.controller.get_unmapped_actions()
        if self.joystick is not None and unmapped:
            print(f"Unmapped gamepad actions: {', '.join(unmapped)}")

        self.navigation = NavigationHandler()
        self.navigation.set_joystick(self.joystick)
        self.navigation.set_controller_mapping(self.controller.get_mapping())

        self.theme = Theme()
        self.screen_view = CarouselScreen(
            self.theme, spacing=self.settings.get("carousel_spacing")
        )
        self.image_cache = ImageCache()

        self.browser = self._create_browser()
        self._restore_position(start_at or self.settings.get("last_item_id"))

    def _create_browser(self) -> LibraryBrowser:
        games_dir = self.settings["games_dir"]
        try:
            items = load_games_from_directory(games_dir)
        except GamesDirectoryError as e:
            log_error(str(e), type(e).__name__, traceback.format_exc())
            items = []

        store = VisibilityStore(self.settings["visibility_file"])
        mode = VisibilityMode(self.settings.get("mode", "browse"))
        return LibraryBrowser(items, store=store, mode=mode)

    def _restore_position(self, item_id: Optional[str]) -> None:
        if item_id:
            self.browser.apply(Intent.jump_to_item(item_id))

    def _get_artwork(self, item: Item) -> Optional[pygame.Surface]:
        if not self.settings.get("enable_boxart", True):
            return None
        return self.image_cache.get_artwork(item)

    def run(self):
        """Run the main application loop."""
        while self.state.running:
            self.clock.tick(FPS)

            self.navigation.update()
            repeat = self.navigation.pending_intent()
            if repeat is not None:
                self.browser.apply(repeat)

            for event in pygame.event.get():
                self._handle_event(event)

            self.image_cache.update()
            self._render()

        self._save_position()
        pygame.quit()

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.state.running = False
            return

        if event.type == pygame.KEYDOWN:
            self.state.input_mode = "keyboard"
        elif event.type in (pygame.JOYBUTTONDOWN, pygame.JOYHATMOTION):
            self.state.input_mode = "gamepad"
        else:
            return

        command = self.controller.command_for_event(event)
        if command is not None:
            self._run_command(command)
            return

        intent = self.controller.intent_for_event(event)
        if intent is not None:
            self.browser.apply(intent)

    def _run_command(self, command: Command) -> None:
        now = pygame.time.get_ticks()

        if command is Command.QUIT:
            self.state.running = False

        elif command is Command.TOGGLE_MODE:
            mode = self.browser.toggle_mode()
            self.navigation.reset()
            self.settings["mode"] = mode.value
            save_settings(self.settings)
            self.state.show_status(mode.value.upper(), now)

        elif command is Command.TOGGLE_HIDDEN:
            item = self.browser.current_item()
            if self.browser.toggle_hidden() and item is not None:
                self.state.show_status("HIDDEN" if item.hidden else "VISIBLE", now)

    def _render(self) -> None:
        now = pygame.time.get_ticks()
        status = self.state.status.text if self.state.status.active(now) else None

        self.screen_view.render(
            self.screen,
            self.browser,
            get_image=self._get_artwork,
            status=status,
        )
        pygame.display.flip()

    def _save_position(self) -> None:
        item = self.browser.current_item()
        self.settings["last_item_id"] = item.id if item is not None else ""
        save_settings(self.settings)


def main(games_dir: Optional[str] = None, start_at: Optional[str] = None):
    """Entry point for the application."""
    try:
        app = LibraryBrowserApp(games_dir=games_dir, start_at=start_at)
        app.run()
    except Exception as e:
        log_error(f"Application error: {e}", type(e).__name__, traceback.format_exc())
        raise


if __name__ == "__main__":
    main()
