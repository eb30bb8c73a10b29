"""
Theme and design tokens for Load64.
Centralizes all visual constants for consistent styling.
"""

from dataclasses import dataclass
from typing import Tuple, Optional

# Type alias for colors
Color = Tuple[int, int, int]
ColorAlpha = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Theme:
    """
    Design tokens for the application UI.

    This class is immutable to prevent accidental modifications.
    """

    # ---- Base Colors ---- #
    background: Color = (0, 20, 0)  # Dark green CRT phosphor
    surface: Color = (0, 30, 0)
    surface_hover: Color = (0, 40, 0)

    # ---- Accents ---- #
    primary: Color = (0, 255, 65)
    primary_light: Color = (0, 255, 100)
    secondary: Color = (200, 200, 0)

    # ---- Text Colors ---- #
    text_primary: Color = (0, 255, 65)
    text_secondary: Color = (0, 180, 45)
    text_disabled: Color = (0, 80, 20)

    # ---- Effects ---- #
    hidden_overlay: ColorAlpha = (0, 0, 0, 160)

    # ---- Spacing ---- #
    padding_xs: int = 4
    padding_sm: int = 8
    padding_md: int = 16
    padding_lg: int = 24

    # ---- Typography ---- #
    font_size_sm: int = 20
    font_size_md: int = 28
    font_size_lg: int = 36
    font_size_xl: int = 48
    font_path: Optional[str] = None  # pygame default font

    # ---- Component Sizes ---- #
    header_height: int = 60
    info_panel_height: int = 110


# Default theme instance
default_theme = Theme()
