"""
Carousel organism - Horizontal strip of game cards.
"""

import pygame
from typing import Callable, List, Optional

from domain.item import Item
from ui.carousel_layout import CarouselLayout
from ui.theme import Theme, default_theme
from ui.molecules.thumbnail import Thumbnail
from utils.formatting import get_initials


class Carousel:
    """
    Carousel organism.

    Draws a window of items left to right, vertically centered on
    ``center_y``. The card at the layout's current index is enlarged
    and highlighted.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.thumbnail = Thumbnail(theme)

    def render(
        self,
        screen: pygame.Surface,
        items: List[Item],
        layout: CarouselLayout,
        center_y: int,
        get_image: Optional[Callable[[Item], Optional[pygame.Surface]]] = None,
        show_hidden: bool = False,
    ) -> List[pygame.Rect]:
        """
        Render the strip.

        Args:
            screen: Surface to render to
            items: Window of items, as returned by Library.window()
            layout: Card geometry
            center_y: Vertical center line of the strip
            get_image: Function returning box art for an item
            show_hidden: Dim cards of hidden games (manage mode)

        Returns:
            Card rects in window order
        """
        rects = []
        x = int(layout.canvas_padding)

        for index, item in enumerate(items):
            width, height = layout.card_size(index)
            rect = pygame.Rect(x, center_y - height // 2, width, height)

            image = get_image(item) if get_image else None
            self.thumbnail.render(
                screen,
                rect,
                image=image,
                placeholder_text=get_initials(item.title),
                highlighted=(index == layout.current_index),
                dimmed=(show_hidden and item.hidden),
            )

            rects.append(rect)
            x += width + layout.spacing

        return rects
