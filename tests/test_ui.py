import pytest

from arcadedemos.ui import (
    CHECKBOX_PADDING_LEFT,
    CHECKBOX_WIDTH,
    LINE_SPACING,
    TEXTBOX_PADDING_TOP,
    VSCROLLBAR_WIDTH,
    Button,
    CheckBox,
    ImageType,
    Rect,
    TextBox,
    VScrollBar,
    nine_patch_rects,
)


def test_rect_orders_corners_and_measures():
    r = Rect(10, 20, 0, 5)
    assert r == Rect(0, 5, 10, 20)
    assert (r.dx, r.dy) == (10, 15)


def test_rect_contains_is_half_open():
    r = Rect(0, 0, 4, 4)
    assert r.contains(0, 0)
    assert r.contains(3, 3)
    assert not r.contains(4, 0)
    assert not r.contains(0, 4)


def test_button_fires_on_release_inside():
    presses = []
    button = Button(Rect(16, 16, 144, 48), "Button 1", presses.append)
    button.update(True, 20, 20)
    assert button.mouse_down
    assert presses == []
    button.update(False, 20, 20)
    assert presses == [button]
    assert not button.mouse_down


def test_button_does_not_fire_after_leaving():
    presses = []
    button = Button(Rect(16, 16, 144, 48), "Button 1", presses.append)
    button.update(True, 20, 20)
    button.update(True, 500, 500)
    button.update(False, 500, 500)
    assert presses == []
    assert button.image is ImageType.BUTTON


def test_checkbox_toggles_and_notifies():
    seen = []
    box = CheckBox(16, 64, "Check Box!", lambda c: seen.append(c.checked), lambda s: 50)
    box.update(True, 20, 70)
    box.update(False, 20, 70)
    box.update(True, 20, 70)
    box.update(False, 20, 70)
    assert seen == [True, False]
    assert not box.checked


def test_checkbox_width_includes_label():
    box = CheckBox(16, 64, "label", advance=lambda s: 50)
    assert box.width == CHECKBOX_WIDTH + CHECKBOX_PADDING_LEFT + 50
    box.update(True, 16 + box.width, 70)
    assert not box.mouse_down
    box.update(True, 16 + box.width - 1, 70)
    assert box.mouse_down


def test_scrollbar_hidden_when_content_fits():
    bar = VScrollBar(x=0, y=0, height=100)
    bar.update(50, False, False, 0, 0)
    assert bar.thumb_rect().empty
    assert bar.content_offset == 0


def test_scrollbar_thumb_has_minimum_size():
    bar = VScrollBar(x=0, y=0, height=100)
    bar.update(1_000_000, False, False, 0, 0)
    assert bar.thumb_size() == VSCROLLBAR_WIDTH


def test_scrollbar_drag_moves_and_clamps():
    bar = VScrollBar(x=0, y=0, height=100)
    bar.update(200, True, True, 1, 1)
    assert bar.dragging
    bar.update(200, False, True, 1, 11)
    assert bar.thumb_offset == 10
    first = bar.content_offset
    bar.update(200, False, True, 1, 10_000)
    assert bar.thumb_offset == bar.height - bar.thumb_size()
    assert bar.content_offset > first
    bar.update(200, False, True, 1, -10_000)
    assert bar.thumb_offset == 0
    assert bar.content_offset == 0
    bar.update(200, False, False, 1, 1)
    assert not bar.dragging


def test_scrollbar_ignores_press_outside_thumb():
    bar = VScrollBar(x=0, y=0, height=100)
    bar.update(200, True, True, VSCROLLBAR_WIDTH + 5, 1)
    assert not bar.dragging


def test_textbox_append_line():
    box = TextBox(Rect(16, 96, 624, 464))
    box.append_line("Button 1 Pressed")
    box.append_line("Button 2 Pressed")
    assert box.text == "Button 1 Pressed\nButton 2 Pressed"


def test_textbox_content_height_grows_per_line():
    box = TextBox(Rect(16, 96, 624, 464))
    _, one = box.content_size()
    assert one == LINE_SPACING + TEXTBOX_PADDING_TOP
    box.append_line("a")
    box.append_line("b")
    _, two = box.content_size()
    assert two - one == LINE_SPACING


def test_textbox_update_places_scrollbar():
    rect = Rect(16, 96, 624, 464)
    box = TextBox(rect)
    box.update(False, False, 0, 0)
    bar = box.scroll_bar
    assert (bar.x, bar.y, bar.height) == (rect.max_x - VSCROLLBAR_WIDTH, rect.min_y, rect.dy)
    assert box.offset_y == 0


@pytest.mark.parametrize("dst", [Rect(16, 16, 144, 48), Rect(0, 0, 40, 40), Rect(5, 7, 100, 23)])
@pytest.mark.parametrize("kind", [ImageType.BUTTON, ImageType.VSCROLLBAR_BACK])
def test_nine_patches_tile_both_rects(dst, kind):
    src = kind.source
    pieces = nine_patch_rects(dst, src)
    assert len(pieces) == 9
    assert sum(s.dx * s.dy for s, _ in pieces) == src.dx * src.dy
    assert sum(d.dx * d.dy for _, d in pieces) == dst.dx * dst.dy
    assert all(src.contains(s.min_x, s.min_y) for s, _ in pieces)
    assert all(dst.contains(d.min_x, d.min_y) for _, d in pieces)
    top_left_src, top_left_dst = pieces[0]
    assert (top_left_dst.dx, top_left_dst.dy) == (top_left_src.dx, top_left_src.dy)
    assert (pieces[-1][1].max_x, pieces[-1][1].max_y) == (dst.max_x, dst.max_y)