import pytest

from arcadedemos.textinput import TEXT_FIELD_HEIGHT, TextField
from arcadedemos.ui import Rect


def advance(text):
    return 10.0 * len(text)


def single(text=""):
    field = TextField(Rect(0, 0, 300, TEXT_FIELD_HEIGHT), False, advance, 16)
    field.focus()
    if text:
        field.commit(text)
    return field


def multi(text=""):
    field = TextField(Rect(0, 0, 300, 200), True, advance, 16)
    field.focus()
    if text:
        field.commit(text)
    return field


def test_contains():
    field = single()
    assert field.contains(0, 0)
    assert not field.contains(300, 5)
    assert not field.contains(-1, 5)


def test_commit_inserts_and_moves_caret():
    field = single("hello")
    assert field.text == "hello"
    assert field.selection_start == field.selection_end == len("hello")


def test_commit_ignored_when_unfocused():
    field = single("abc")
    field.blur()
    field.commit("zzz")
    assert field.text == "abc"


def test_commit_replaces_selection():
    field = single("hello")
    field.selection_start, field.selection_end = 1, 4
    field.commit("EY")
    assert field.text == "hEYo"
    assert field.selection_start == field.selection_end == 3


def test_single_line_strips_newlines():
    field = single("a\nb")
    assert field.text == "ab"
    assert field.selection_start == field.selection_end == len("ab")


def test_enter_only_in_multiline():
    field = single("ab")
    field.press_enter()
    assert field.text == "ab"
    m = multi("ab")
    m.press_enter()
    assert m.text == "ab\n"
    assert m.selection_start == len("ab\n")


def test_backspace_and_arrows():
    field = single("abc")
    field.move_left()
    assert field.selection_start == field.selection_end == 2
    field.backspace()
    assert field.text == "ac"
    assert field.selection_start == field.selection_end == 1
    field.move_right()
    field.move_right()
    assert field.selection_start == field.selection_end == len("ac")


def test_backspace_at_start_does_nothing():
    field = single("abc")
    field.selection_start = field.selection_end = 0
    field.backspace()
    field.move_left()
    assert field.text == "abc"
    assert field.selection_start == 0


def test_click_outside_returns_none():
    field = single("abc")
    assert field.text_index_at(500, 5) is None
    assert field.set_selection_start_by_cursor_position(500, 5) is False
    assert field.selection_start == len("abc")


@pytest.mark.parametrize("index", range(6))
def test_click_at_caret_position_round_trips(index):
    field = single("abcdef")
    px, py = field.padding
    x = px + int(advance("abcdef"[:index]))
    assert field.set_selection_start_by_cursor_position(x, py) is True
    assert field.selection_start == field.selection_end == index


def test_click_past_end_gives_length():
    field = single("abc")
    assert field.text_index_at(299, 5) == len("abc")


def test_multiline_cursor_round_trip():
    field = multi("ab\ncde\nf")
    px, py = field.padding
    for index in range(len(field.text) + 1):
        field.selection_start = field.selection_end = index
        cx, cy = field.cursor_position()
        assert field.text_index_at(px + cx, py + cy) == index


def test_cursor_position_second_line():
    field = multi("ab\ncd")
    x, y = field.cursor_position()
    assert x == int(advance("cd"))
    assert y == field.line_height


def test_cursor_position_includes_composition():
    field = single("ab")
    field.composition = "xyz"
    field.composition_cursor = 2
    assert field.cursor_position() == (int(advance("abxy")), 0)
    field.blur()
    assert field.composition == ""