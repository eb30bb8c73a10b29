"""
Carousel screen - The library browser.
"""

import pygame
from typing import Callable, Optional

from domain.item import Item
from services.browser import LibraryBrowser
from services.library_builder import VisibilityMode
from ui.carousel_layout import CarouselLayout
from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from ui.organisms.header import Header
from ui.organisms.carousel import Carousel
from ui.organisms.game_info import GameInfo

EMPTY_MESSAGE = "No games available"


class CarouselScreen:
    """
    Full-screen browser view.

    Asks the browser for a window sized by the carousel layout, so the
    strip always fills the screen even for tiny libraries.
    """

    def __init__(self, theme: Theme = default_theme, spacing: Optional[int] = None):
        self.theme = theme
        self.spacing = spacing
        self.text = Text(theme)
        self.header = Header(theme)
        self.carousel = Carousel(theme)
        self.game_info = GameInfo(theme)
        self._layout: Optional[CarouselLayout] = None
        self._layout_width = 0

    def layout_for(self, width: int) -> CarouselLayout:
        """Layout for a screen width, cached until the width changes."""
        if self._layout is None or self._layout_width != width:
            if self.spacing is None:
                self._layout = CarouselLayout(width)
            else:
                self._layout = CarouselLayout(width, spacing=self.spacing)
            self._layout_width = width
        return self._layout

    def render(
        self,
        screen: pygame.Surface,
        browser: LibraryBrowser,
        get_image: Optional[Callable[[Item], Optional[pygame.Surface]]] = None,
        status: Optional[str] = None,
    ) -> None:
        screen.fill(self.theme.background)
        width, height = screen.get_size()

        manage = browser.mode is VisibilityMode.MANAGE
        section = browser.current_section_label()
        self.header.render(
            screen,
            f"[{section}]" if section else "",
            right_text=status or ("MANAGE" if manage else None),
        )

        layout = self.layout_for(width)
        window = browser.window(layout.magnitude, layout.number_of_cards)
        if not window:
            self.text.render(
                screen,
                EMPTY_MESSAGE,
                (width // 2, height // 2),
                color=self.theme.text_secondary,
                align="center",
            )
            return

        center_y = self.theme.header_height + (
            height - self.theme.header_height - self.theme.info_panel_height
        ) // 2
        self.carousel.render(
            screen,
            window,
            layout,
            center_y,
            get_image=get_image,
            show_hidden=manage,
        )

        item = browser.current_item()
        if item is not None:
            self.game_info.render(
                screen, item, height - self.theme.info_panel_height + self.theme.padding_sm
            )
