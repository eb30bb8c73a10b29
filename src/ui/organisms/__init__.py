"""
UI Organisms - Complex UI sections.
Composed of multiple molecules working together.
"""

from .header import Header
from .carousel import Carousel
from .game_info import GameInfo

__all__ = [
    "Header",
    "Carousel",
    "GameInfo",
]
