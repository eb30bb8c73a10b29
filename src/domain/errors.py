"""
Exceptions raised by the navigation engine.

Lookups that simply find nothing (unknown item, no matching section,
empty library) return None instead of raising.
"""


class MembershipMismatch(ValueError):
    """Raised when a section is asked to take an item it does not accept."""


class StaleCursorError(LookupError):
    """Raised when a cursor refers to a section this library does not own."""

    def __init__(self, section_id):
        super().__init__(f"Cursor references unknown section {section_id}")
        self.section_id = section_id
