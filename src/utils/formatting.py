"""
Formatting utilities for Load64.
Turns item metadata into display strings.
"""

from typing import Optional


def format_metadata(year: Optional[int], publisher: Optional[str]) -> Optional[str]:
    """
    Build the metadata line shown under a game title.

    Args:
        year: Release year
        publisher: Publisher name

    Returns:
        "1990 - LucasArts", "1990", "LucasArts", or None when both are missing
    """
    parts = []
    if year is not None:
        parts.append(str(year))
    if publisher:
        parts.append(publisher)
    if not parts:
        return None
    return " - ".join(parts)


def get_initials(title: str, max_letters: int = 2) -> str:
    """
    Placeholder text for a card without artwork.

    Args:
        title: Game title
        max_letters: Maximum number of initials

    Returns:
        Uppercase initials of the first words, or "?" for an empty title
    """
    words = [word for word in title.split() if word[:1].isalnum()]
    if not words:
        return "?"
    return "".join(word[0] for word in words[:max_letters]).upper()


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length, adding suffix if truncated.

    Args:
        text: The text to truncate
        max_length: Maximum allowed length
        suffix: Suffix to add if truncated (default: "...")

    Returns:
        Truncated text with suffix if needed
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix
