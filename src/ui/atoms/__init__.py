"""
UI Atoms - Basic building blocks.
Smallest UI components with no dependencies on other components.
"""

from .text import Text

__all__ = [
    'Text',
]
