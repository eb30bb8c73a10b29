"""
UI Screens - Full page components with data binding.
The final layer of the atomic design hierarchy.
"""

from .carousel_screen import CarouselScreen

__all__ = [
    'CarouselScreen',
]
