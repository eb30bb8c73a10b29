"""
UI Molecules - Combinations of atoms.
Simple groups of atoms functioning together.
"""

from .thumbnail import Thumbnail

__all__ = [
    "Thumbnail",
]
