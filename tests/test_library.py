"""Tests for the Library: insertion, section ordering, traversal and windowing."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from domain import (
    CharacterSection,
    Cursor,
    Item,
    ItemId,
    Library,
    StaleCursorError,
)
from domain.section import new_section_id


def make_item(title, sort_key=None, item_id=None):
    return Item(
        id=ItemId(item_id or title.lower().replace(" ", "-")),
        title=title,
        sort_key=sort_key if sort_key is not None else title.lower().replace(" ", "-"),
    )


def make_library(*items):
    library = Library(CharacterSection)
    library.add_items(items)
    return library


def titles(library, cursors):
    return [library.item_at(c).title for c in cursors]


def walk(library, step, count):
    """Apply a traversal function `count` times from the initial cursor."""
    cursor = library.initial_cursor()
    visited = [cursor]
    for _ in range(count):
        cursor = step(cursor)
        visited.append(cursor)
    return visited


# ---------------------------------------------------------------------------
# Empty library
# ---------------------------------------------------------------------------


def test_empty_library_has_no_cursor():
    library = Library(CharacterSection)
    assert library.is_empty()
    assert len(library) == 0
    assert library.initial_cursor() is None


def test_empty_library_operations_return_none():
    library = Library(CharacterSection)
    cursor = Cursor(new_section_id(), ItemId("anything"))

    assert library.next_item(cursor) is None
    assert library.previous_item(cursor) is None
    assert library.next_section(cursor) is None
    assert library.previous_section(cursor) is None
    assert library.jump_to_section("A") is None
    assert library.jump_to_item(ItemId("anything")) is None
    assert library.window(cursor, 1, 3) is None


# ---------------------------------------------------------------------------
# Insertion and ordering
# ---------------------------------------------------------------------------


def test_sections_sorted_by_character_regardless_of_insert_order():
    library = make_library(
        make_item("Zork"),
        make_item("Monkey Island"),
        make_item("Alice"),
    )
    assert [s.label for s in library.sections] == ["A", "M", "Z"]


def test_members_sorted_by_sort_key_not_title():
    library = make_library(
        make_item("The Secret", sort_key="secret"),
        make_item("Space Quest", sort_key="space-quest"),
        make_item("Sam and Max", sort_key="sam-and-max"),
    )
    (section,) = library.sections
    assert list(section.member_ids) == ["sam-and-max", "the-secret", "space-quest"]


def test_every_item_in_exactly_one_section():
    items = [make_item(t) for t in ("Alice", "Another", "Bubble", "Boulder", "Zak")]
    library = make_library(*items)

    for item in items:
        owners = [s for s in library.sections if item.id in s]
        assert len(owners) == 1
        assert owners[0].accepts(item)

    assert sum(len(s) for s in library.sections) == len(library)


def test_no_empty_sections():
    library = make_library(make_item("Alice"), make_item("Bubble"))
    assert all(len(s) > 0 for s in library.sections)


def test_case_insensitive_bucketing():
    library = make_library(
        make_item("monkey", sort_key="monkey"),
        make_item("Maniac", sort_key="Maniac"),
    )
    assert len(library.sections) == 1
    assert library.sections[0].label == "M"


def test_empty_sort_key_gets_its_own_section_first():
    library = make_library(make_item("Alice"), make_item("Untitled", sort_key=""))
    assert [s.label for s in library.sections] == ["", "A"]
    assert library.item_at(library.initial_cursor()).title == "Untitled"


def test_duplicate_id_replaces_existing_item():
    library = make_library(make_item("Alice", item_id="g1"))
    library.add_item(make_item("Alice Deluxe", item_id="g1"))

    assert len(library) == 1
    assert library.get_item(ItemId("g1")).title == "Alice Deluxe"
    assert list(library.sections[0].member_ids) == ["g1"]


def test_duplicate_id_moving_sections_drops_empty_section():
    library = make_library(make_item("Alice", item_id="g1"), make_item("Bubble"))
    library.add_item(make_item("Zork", item_id="g1"))

    assert [s.label for s in library.sections] == ["B", "Z"]
    assert len(library) == 2


def test_items_view_is_read_only():
    library = make_library(make_item("Alice"))
    with pytest.raises(TypeError):
        library.items["x"] = make_item("X")


# ---------------------------------------------------------------------------
# Item traversal
# ---------------------------------------------------------------------------


def test_next_item_wraps_within_single_section():
    """Maniac Mansion -> Monkey Island -> Maniac Mansion."""
    library = make_library(make_item("Monkey Island"), make_item("Maniac Mansion"))
    cursor = library.initial_cursor()
    assert library.item_at(cursor).title == "Maniac Mansion"

    cursor = library.next_item(cursor)
    assert library.item_at(cursor).title == "Monkey Island"

    cursor = library.next_item(cursor)
    assert library.item_at(cursor).title == "Maniac Mansion"


def test_next_item_crosses_into_next_section():
    library = make_library(make_item("Alice"), make_item("Another"), make_item("Bubble"))
    visited = walk(library, library.next_item, 3)
    assert titles(library, visited) == ["Alice", "Another", "Bubble", "Alice"]


def test_previous_item_crosses_to_last_item_of_previous_section():
    library = make_library(
        make_item("Alice"), make_item("Another"), make_item("Boulder"), make_item("Bubble")
    )
    cursor = library.jump_to_item(ItemId("boulder"))
    cursor = library.previous_item(cursor)
    assert library.item_at(cursor).title == "Another"


def test_previous_item_wraps_from_first_to_last():
    library = make_library(make_item("Alice"), make_item("Bubble"), make_item("Boulder"))
    cursor = library.previous_item(library.initial_cursor())
    assert library.item_at(cursor).title == "Bubble"


def test_next_and_previous_item_are_inverse():
    library = make_library(
        make_item("Alice"), make_item("Another"), make_item("Bubble"), make_item("Zak")
    )
    cursor = library.initial_cursor()
    for _ in range(len(library)):
        assert library.previous_item(library.next_item(cursor)) == cursor
        assert library.next_item(library.previous_item(cursor)) == cursor
        cursor = library.next_item(cursor)


def test_stepping_total_count_returns_to_start():
    library = make_library(*(make_item(t) for t in ("Alice", "Bubble", "Boulder", "Zak")))
    start = library.initial_cursor()

    cursor = start
    for _ in range(len(library)):
        cursor = library.next_item(cursor)
    assert cursor == start

    for _ in range(len(library)):
        cursor = library.previous_item(cursor)
    assert cursor == start


# ---------------------------------------------------------------------------
# Section traversal
# ---------------------------------------------------------------------------


def test_next_section_lands_on_first_item_and_wraps():
    library = make_library(
        make_item("Alice"), make_item("Another"), make_item("Bubble"), make_item("Boulder")
    )
    cursor = library.initial_cursor()
    assert library.item_at(cursor).title == "Alice"

    cursor = library.next_section(cursor)
    assert library.item_at(cursor).title == "Boulder"

    cursor = library.next_section(cursor)
    assert library.item_at(cursor).title == "Alice"


def test_previous_section_lands_on_first_item():
    library = make_library(make_item("Alice"), make_item("Bubble"), make_item("Boulder"))
    cursor = library.jump_to_item(ItemId("alice"))
    cursor = library.previous_section(cursor)
    assert library.item_at(cursor).title == "Boulder"


def test_section_stepping_with_single_section_stays_put():
    library = make_library(make_item("Alice"), make_item("Another"))
    cursor = library.next_item(library.initial_cursor())
    cursor = library.next_section(cursor)
    assert library.item_at(cursor).title == "Alice"


def test_cursor_survives_section_creation():
    library = make_library(make_item("Monkey Island"))
    cursor = library.initial_cursor()

    # 'A' sorts before 'M', shifting the section's position
    library.add_item(make_item("Alice"))

    assert library.item_at(cursor).title == "Monkey Island"
    assert library.item_at(library.next_item(cursor)).title == "Alice"


def test_stale_cursor_raises():
    library = make_library(make_item("Alice"))
    stale = Cursor(new_section_id(), ItemId("alice"))

    with pytest.raises(StaleCursorError) as excinfo:
        library.next_item(stale)
    assert excinfo.value.section_id == stale.section_id


# ---------------------------------------------------------------------------
# Jumps
# ---------------------------------------------------------------------------


def test_jump_to_section_is_case_insensitive():
    library = make_library(make_item("Alice"), make_item("Monkey Island"), make_item("Maniac"))
    cursor = library.jump_to_section("m")
    assert library.item_at(cursor).title == "Maniac"


def test_jump_to_missing_section_returns_none():
    library = make_library(make_item("Alice"), make_item("Monkey Island"))
    assert library.jump_to_section("z") is None


def test_jump_to_section_with_empty_key_returns_none():
    library = make_library(make_item("Alice"), make_item("Untitled", sort_key=""))
    assert library.jump_to_section("") is None


def test_jump_to_item():
    library = make_library(make_item("Alice"), make_item("Bubble"))
    cursor = library.jump_to_item(ItemId("bubble"))
    assert cursor.section_id == library.sections[1].id
    assert library.item_at(cursor).title == "Bubble"
    assert library.jump_to_item(ItemId("missing")) is None


# ---------------------------------------------------------------------------
# Windowing
# ---------------------------------------------------------------------------


def window_titles(library, cursor, magnitude, count):
    return [item.title for item in library.window(cursor, magnitude, count)]


def test_window_single_item_repeats():
    library = make_library(make_item("Monkey Island"))
    cursor = library.initial_cursor()
    assert window_titles(library, cursor, 1, 3) == ["Monkey Island"] * 3


def test_window_centered_on_cursor():
    library = make_library(*(make_item(f"Game {n}") for n in range(1, 6)))
    cursor = library.jump_to_item(ItemId("game-3"))
    assert window_titles(library, cursor, 1, 3) == ["Game 2", "Game 3", "Game 4"]


def test_window_sign_of_magnitude_is_ignored():
    library = make_library(*(make_item(f"Game {n}") for n in range(1, 6)))
    cursor = library.jump_to_item(ItemId("game-3"))
    assert window_titles(library, cursor, -1, 3) == window_titles(library, cursor, 1, 3)


def test_window_wraps_across_sections():
    library = make_library(make_item("Alice"), make_item("Bubble"), make_item("Zak"))
    cursor = library.initial_cursor()
    assert window_titles(library, cursor, 2, 5) == ["Bubble", "Zak", "Alice", "Bubble", "Zak"]


def test_window_count_larger_than_library():
    library = make_library(make_item("Alice"), make_item("Bubble"))
    cursor = library.initial_cursor()
    result = library.window(cursor, 0, 5)
    assert len(result) == 5
    assert [i.title for i in result] == ["Alice", "Bubble", "Alice", "Bubble", "Alice"]


def test_window_non_positive_count_is_empty():
    library = make_library(make_item("Alice"))
    cursor = library.initial_cursor()
    assert library.window(cursor, 1, 0) == []
    assert library.window(cursor, 1, -2) == []
