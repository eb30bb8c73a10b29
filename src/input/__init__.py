"""
Input handling for Load64.
Handles keyboard and controller input.
"""

from .intents import Intent, IntentKind, Command
from .navigation import NavigationHandler
from .controller import ControllerHandler

__all__ = [
    "Intent",
    "IntentKind",
    "Command",
    "NavigationHandler",
    "ControllerHandler",
]
