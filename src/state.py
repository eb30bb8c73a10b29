"""
Application state management for Load64.
Runtime flags of the app loop. Navigation state lives in LibraryBrowser.
"""

from dataclasses import dataclass


@dataclass
class StatusMessage:
    """Short-lived message shown in the header (e.g. "HIDDEN")."""

    text: str = ""
    expires_at: int = 0

    def active(self, now: int) -> bool:
        return bool(self.text) and now < self.expires_at


class AppState:
    """
    Centralized runtime state for Load64.
    """

    def __init__(self):
        self.running: bool = True
        self.input_mode: str = "keyboard"  # "keyboard" or "gamepad"
        self.status = StatusMessage()

    def show_status(self, text: str, now: int, duration: int = 1500) -> None:
        self.status = StatusMessage(text, now + duration)
