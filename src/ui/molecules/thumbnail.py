"""
Thumbnail molecule - Box art card with placeholder and hidden overlay.
"""

import pygame
from typing import Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text


class Thumbnail:
    """
    Thumbnail molecule.

    Displays box art stretched to the card, or the game's initials when
    no artwork is available. Hidden games get a dark overlay.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        image: Optional[pygame.Surface] = None,
        placeholder_text: str = "?",
        highlighted: bool = False,
        dimmed: bool = False,
    ) -> pygame.Rect:
        """
        Render a card.

        Args:
            screen: Surface to render to
            rect: Card rectangle
            image: Box art surface
            placeholder_text: Text when no image (initials)
            highlighted: Draw the current-card border
            dimmed: Draw the hidden-game overlay

        Returns:
            Card rect
        """
        bg_color = self.theme.surface_hover if highlighted else self.theme.surface
        pygame.draw.rect(screen, bg_color, rect)

        if image is not None:
            scaled = pygame.transform.smoothscale(image, rect.size)
            screen.blit(scaled, rect.topleft)
        else:
            self.text.render(
                screen,
                placeholder_text,
                (rect.centerx, rect.centery - self.theme.font_size_xl // 2),
                color=self.theme.text_disabled,
                size=self.theme.font_size_xl,
                align="center",
            )

        if dimmed:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(self.theme.hidden_overlay)
            screen.blit(overlay, rect.topleft)

        if highlighted:
            pygame.draw.rect(screen, self.theme.primary_light, rect, width=3)

        return rect
