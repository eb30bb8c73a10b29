"""
Text atom - Single-line labels for titles, initials and status badges.
"""

import pygame
from typing import Dict, Tuple, Optional

from ui.theme import Theme, Color, default_theme


class Text:
    """
    Single-line text atom.

    Fonts are cached per size. Text wider than ``max_width`` is cut
    with an ellipsis; ``align`` picks which edge of the text sits on
    the given x position.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self._fonts: Dict[int, pygame.font.Font] = {}

    def get_font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(self.theme.font_path, size)
            self._fonts[size] = font
        return font

    def render(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[int, int],
        color: Optional[Color] = None,
        size: Optional[int] = None,
        max_width: Optional[int] = None,
        align: str = "left",
    ) -> pygame.Rect:
        """
        Draw one line of text.

        Args:
            screen: Surface to draw on
            text: Label to draw
            position: (x, top) of the anchor edge
            color: Text color (default: text_primary)
            size: Font size (default: font_size_md)
            max_width: Pixel width to ellipsize at
            align: "left", "center" or "right"

        Returns:
            Rect covered by the text
        """
        font = self.get_font(size or self.theme.font_size_md)
        if max_width:
            text = self.fit(text, font, max_width)

        label = font.render(text, True, color or self.theme.text_primary)
        rect = self._place(label.get_rect(), position, align)
        screen.blit(label, rect)
        return rect

    def fit(self, text: str, font: pygame.font.Font, max_width: int, suffix: str = "...") -> str:
        """Longest prefix of text that fits max_width pixels once the suffix is added."""
        if font.size(text)[0] <= max_width:
            return text

        budget = max_width - font.size(suffix)[0]
        low, high = 0, len(text)
        while low < high:
            mid = (low + high + 1) // 2
            if font.size(text[:mid])[0] <= budget:
                low = mid
            else:
                high = mid - 1
        return text[:low] + suffix

    def _place(self, rect: pygame.Rect, position: Tuple[int, int], align: str) -> pygame.Rect:
        x, y = position
        rect.top = y
        if align == "center":
            rect.centerx = x
        elif align == "right":
            rect.right = x
        else:
            rect.left = x
        return rect
