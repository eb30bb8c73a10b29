"""
Carousel sizing for Load64.

Works out how many cards fit on screen, which decides the window the
library is asked for: ``magnitude`` cards before the current one and
``number_of_cards`` in total.
"""

import math

from constants import CARD_WIDTH, CARD_HEIGHT, CURRENT_CARD_SCALE, CARD_SPACING


class CarouselLayout:
    """
    Card geometry for a given window width.

    The current card is drawn CURRENT_CARD_SCALE times larger and sits
    in the middle, with the same number of regular cards on each side.
    """

    def __init__(self, window_width: float, spacing: int = CARD_SPACING):
        self.spacing = spacing
        self.current_width = CARD_WIDTH * CURRENT_CARD_SCALE
        self.current_height = CARD_HEIGHT * CURRENT_CARD_SCALE

        side_space = (window_width - self.current_width) / 2
        self.cards_each_side = max(0, math.floor(side_space / (CARD_WIDTH + spacing)))

        total_width = (
            self.current_width + self.cards_each_side * 2 * (CARD_WIDTH + spacing)
        )
        self.canvas_padding = (window_width - total_width) / 2

    @property
    def number_of_cards(self) -> int:
        return self.cards_each_side * 2 + 1

    @property
    def magnitude(self) -> int:
        """Steps back from the cursor to the first card (negative: cards lie before it)."""
        return -self.cards_each_side

    @property
    def current_index(self) -> int:
        return self.cards_each_side

    def card_size(self, index: int):
        if index == self.current_index:
            return int(self.current_width), int(self.current_height)
        return CARD_WIDTH, CARD_HEIGHT
