"""
Game info organism - Title and metadata of the current game.
"""

import pygame

from domain.item import Item
from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from utils.formatting import format_metadata


class GameInfo:
    """Metadata panel: title, then "year - publisher" when known."""

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(self, screen: pygame.Surface, item: Item, top: int) -> pygame.Rect:
        center_x = screen.get_width() // 2
        max_width = screen.get_width() - self.theme.padding_lg * 2

        rect = self.text.render(
            screen,
            item.title,
            (center_x, top),
            size=self.theme.font_size_xl,
            max_width=max_width,
            align="center",
        )

        metadata = format_metadata(item.year, item.publisher)
        if metadata:
            meta_rect = self.text.render(
                screen,
                metadata,
                (center_x, rect.bottom + self.theme.padding_xs),
                color=self.theme.text_secondary,
                size=self.theme.font_size_md,
                max_width=max_width,
                align="center",
            )
            rect = rect.union(meta_rect)

        return rect
