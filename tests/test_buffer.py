import pytest

from markdown_engine.buffer import (
    MemorySurface,
    Selection,
    SelectionValidationError,
    byte_to_char_pos,
    char_to_byte_pos,
    find_safe_utf8_boundary,
    line_end_at,
    line_start_at,
)


def make_selection(text: str, start: int, end: int | None = None) -> Selection:
    return Selection(text, start, start if end is None else end)


def test_selection_parts_cover_full_text() -> None:
    selection = make_selection("Hello world", 6, 11)

    assert selection.selected_text == "world"
    assert selection.before == "Hello "
    assert selection.after == ""
    assert selection.before + selection.inner_text() + selection.after == "Hello world"


def test_caret_selection_is_empty() -> None:
    selection = Selection.caret("Hello", 5)

    assert selection.is_empty()
    assert selection.selected_text is None
    assert selection.inner_text() == ""


def test_matching_selects_first_occurrence() -> None:
    selection = Selection.matching("ab ab", "ab")

    assert (selection.start, selection.end) == (0, 2)


def test_matching_none_puts_caret_at_end() -> None:
    selection = Selection.matching("Äb", None)

    assert (selection.start, selection.end) == (3, 3)


def test_offsets_are_bytes() -> None:
    selection = Selection.matching("Ärger und Öl", "Öl")

    assert (selection.start, selection.end) == (11, 14)
    assert selection.before == "Ärger und "


def test_is_multiline() -> None:
    assert Selection.matching("one\ntwo", "one\ntwo").is_multiline()
    assert not Selection.matching("one\ntwo", "one").is_multiline()


def test_current_line() -> None:
    assert Selection.caret("first\nsecond", 6).current_line() == "second"


def test_line_bounds_end_of_buffer() -> None:
    selection = Selection.matching("first\nsecond", "second")

    assert selection.line_bounds() == (6, 12)


def test_line_bounds_extend_to_line_end() -> None:
    selection = Selection.matching("first line\nsecond", "first")

    assert selection.line_bounds() == (0, 10)


def test_selected_lines_keep_trailing_empty_line() -> None:
    selection = Selection("a\nb\n", 0, 4)

    assert selection.selected_lines() == ["a", "b", ""]


def test_replace_range() -> None:
    selection = Selection.matching("Hello world", "world")

    assert selection.replace_range(6, 11, "Markdown") == "Hello Markdown"


def test_line_index_of() -> None:
    assert Selection.caret("a\nb\n c", 0).line_index_of(3) == 1


def test_line_helpers() -> None:
    assert line_start_at("a\nb", 2) == 2
    assert line_end_at("a\nb", 0) == 1
    assert line_end_at("a\nb", 2) == 3


def test_selection_rejects_out_of_range() -> None:
    with pytest.raises(SelectionValidationError) as excinfo:
        Selection("abc", 1, 7)

    assert excinfo.value.start == 1
    assert excinfo.value.end == 7


def test_selection_rejects_reversed_range() -> None:
    with pytest.raises(SelectionValidationError):
        Selection("abc", 2, 1)


def test_selection_rejects_split_codepoint() -> None:
    with pytest.raises(SelectionValidationError):
        Selection("Ä", 1, 1)


def test_char_byte_conversion() -> None:
    assert char_to_byte_pos("Ä", 0) == 0
    assert char_to_byte_pos("Ä", 1) == 2
    assert char_to_byte_pos("Ä", 5) == 2
    assert byte_to_char_pos("Ä", 2) == 1
    assert byte_to_char_pos("Hello", 5) == 5
    assert byte_to_char_pos("Ä", 1) == 0


def test_find_safe_utf8_boundary() -> None:
    assert find_safe_utf8_boundary("Ä", 0) == 0
    assert find_safe_utf8_boundary("Ä", 1) == 0
    assert find_safe_utf8_boundary("Ä", 2) == 2
    assert find_safe_utf8_boundary("Ä", 9) == 2


def test_memory_surface_reads_char_offsets_as_bytes() -> None:
    surface = MemorySurface("Äpfel", 1, 3)

    selection = surface.read_selection()

    assert (selection.start, selection.end) == (2, 4)
    assert selection.selected_text == "pf"


def test_memory_surface_clamps_read() -> None:
    surface = MemorySurface("abc", 10, 12)

    selection = surface.read_selection()

    assert (selection.start, selection.end) == (3, 3)


def test_memory_surface_write_converts_back_and_focuses() -> None:
    surface = MemorySurface("")

    result = surface.write("Äpfel", 2, 4)

    assert result == "Äpfel"
    snapshot = surface.snapshot()
    assert (snapshot.start, snapshot.end) == (1, 3)
    assert snapshot.focused


def test_memory_surface_write_clamps_to_text() -> None:
    surface = MemorySurface("")

    surface.write("abc", 10, 20)

    assert (surface.selection_start, surface.selection_end) == (3, 3)


def test_memory_surface_write_rejects_split_codepoint() -> None:
    surface = MemorySurface("")

    with pytest.raises(SelectionValidationError):
        surface.write("Ä", 1, 1)
