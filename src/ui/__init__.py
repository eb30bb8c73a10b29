"""
UI components for Load64.
Follows Atomic Design methodology: atoms -> molecules -> organisms -> screens.
"""

from .theme import Theme
from .carousel_layout import CarouselLayout

__all__ = ["Theme", "CarouselLayout"]
