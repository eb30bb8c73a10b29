"""
Header organism - Section letter and mode indicator.
"""

import pygame
from typing import Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text


class Header:
    """
    Header organism.

    Shows the current section on the left and an optional
    right-aligned status (e.g. "MANAGE").
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        title: str,
        right_text: Optional[str] = None,
    ) -> pygame.Rect:
        screen_width = screen.get_width()
        height = self.theme.header_height
        header_rect = pygame.Rect(0, 0, screen_width, height)

        pygame.draw.rect(screen, self.theme.surface, header_rect)
        pygame.draw.line(
            screen,
            self.theme.primary,
            (0, height - 1),
            (screen_width, height - 1),
        )

        text_y = (height - self.theme.font_size_lg) // 2 + 4
        self.text.render(
            screen,
            title,
            (self.theme.padding_md, text_y),
            size=self.theme.font_size_lg,
        )

        if right_text:
            self.text.render(
                screen,
                right_text,
                (screen_width - self.theme.padding_md, text_y),
                color=self.theme.secondary,
                size=self.theme.font_size_md,
                align="right",
            )

        return header_rect
