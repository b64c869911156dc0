"""Simple immediate-mode widgets: buttons, a check box and a scrolling log text box."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
UI_FONT_SIZE = 12
LINE_SPACING = 16
VSCROLLBAR_WIDTH = 16
TEXTBOX_PADDING_LEFT = 8
TEXTBOX_PADDING_TOP = 4
CHECKBOX_WIDTH = 16
CHECKBOX_HEIGHT = 16
CHECKBOX_PADDING_LEFT = 8


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; ``max`` is exclusive. Corners are put in order."""

    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0

    def __post_init__(self) -> None:
        if self.min_x > self.max_x:
            x0, x1 = self.max_x, self.min_x
            object.__setattr__(self, "min_x", x0)
            object.__setattr__(self, "max_x", x1)
        if self.min_y > self.max_y:
            y0, y1 = self.max_y, self.min_y
            object.__setattr__(self, "min_y", y0)
            object.__setattr__(self, "max_y", y1)

    @property
    def dx(self) -> int:
        return self.max_x - self.min_x

    @property
    def dy(self) -> int:
        return self.max_y - self.min_y

    @property
    def empty(self) -> bool:
        return self.dx <= 0 or self.dy <= 0

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y


class ImageType(Enum):
    BUTTON = Rect(0, 0, 16, 16)
    BUTTON_PRESSED = Rect(16, 0, 32, 16)
    TEXT_BOX = Rect(0, 16, 16, 32)
    VSCROLLBAR_BACK = Rect(16, 16, 24, 32)
    VSCROLLBAR_FRONT = Rect(24, 16, 32, 32)
    CHECK_BOX = Rect(0, 32, 16, 48)
    CHECK_BOX_PRESSED = Rect(16, 32, 32, 48)
    CHECK_BOX_MARK = Rect(32, 32, 48, 48)

    @property
    def source(self) -> Rect:
        return self.value


def nine_patch_rects(dst_rect: Rect, src_rect: Rect) -> list[tuple[Rect, Rect]]:
    """Split a nine-patch image into (source, destination) pairs, row by row.

    The corners keep a quarter of the source size; the edges and the centre
    stretch to fill the destination.
    """
    src_x, src_y, src_w, src_h = src_rect.min_x, src_rect.min_y, src_rect.dx, src_rect.dy
    dst_x, dst_y, dst_w, dst_h = dst_rect.min_x, dst_rect.min_y, dst_rect.dx, dst_rect.dy

    pieces = []
    for j in range(3):
        for i in range(3):
            sx, sy = src_x, src_y
            sw, sh = src_w // 4, src_h // 4
            dx = dy = 0
            dw, dh = sw, sh
            if i == 1:
                sx = src_x + src_w // 4
                sw = src_w // 2
                dx = src_w // 4
                dw = dst_w - 2 * src_w // 4
            elif i == 2:
                sx = src_x + 3 * src_w // 4
                dx = dst_w - src_w // 4
            if j == 1:
                sy = src_y + src_h // 4
                sh = src_h // 2
                dy = src_h // 4
                dh = dst_h - 2 * src_h // 4
            elif j == 2:
                sy = src_y + 3 * src_h // 4
                dy = dst_h - src_h // 4
            source = Rect(sx, sy, sx + sw, sy + sh)
            left, top = dst_x + dx, dst_y + dy
            dest = Rect(left, top, left + max(dw, 0), top + max(dh, 0))
            pieces.append((source, dest))
    return pieces


@dataclass
class Button:
    """A push button that fires ``on_pressed`` when released over itself."""

    rect: Rect
    text: str
    on_pressed: Callable[[Button], None] | None = None
    mouse_down: bool = False

    def update(self, pressed: bool, x: int, y: int) -> None:
        """Track the left mouse button state and cursor position for one tick."""
        if pressed:
            self.mouse_down = self.rect.contains(x, y)
            return
        if self.mouse_down and self.on_pressed is not None:
            self.on_pressed(self)
        self.mouse_down = False

    @property
    def image(self) -> ImageType:
        return ImageType.BUTTON_PRESSED if self.mouse_down else ImageType.BUTTON


@dataclass
class VScrollBar:
    """A vertical scroll bar with a draggable thumb."""

    x: int = 0
    y: int = 0
    height: int = 0
    thumb_rate: float = 0.0
    thumb_offset: int = 0
    dragging: bool = False
    dragging_start_offset: int = 0
    dragging_start_y: int = 0
    content_offset: int = 0

    def thumb_size(self) -> int:
        rate = min(self.thumb_rate, 1)
        return max(int(self.height * rate), VSCROLLBAR_WIDTH)

    def thumb_rect(self) -> Rect:
        if self.thumb_rate >= 1:
            return Rect()
        size = self.thumb_size()
        top = self.y + self.thumb_offset
        return Rect(self.x, top, self.x + VSCROLLBAR_WIDTH, top + size)

    def max_thumb_offset(self) -> int:
        return self.height - self.thumb_size()

    def update(self, content_height: int, just_pressed: bool, pressed: bool, x: int, y: int) -> None:
        """Follow a drag of the thumb and work out the content offset."""
        if content_height:
            self.thumb_rate = self.height / content_height
        else:
            self.thumb_rate = math.inf

        if not self.dragging and just_pressed and self.thumb_rect().contains(x, y):
            self.dragging = True
            self.dragging_start_offset = self.thumb_offset
            self.dragging_start_y = y

        if self.dragging:
            if pressed:
                offset = self.dragging_start_offset + (y - self.dragging_start_y)
                self.thumb_offset = min(max(offset, 0), self.max_thumb_offset())
            else:
                self.dragging = False

        self.content_offset = 0
        if self.thumb_rate < 1:
            self.content_offset = int(content_height * self.thumb_offset / self.height)


@dataclass
class TextBox:
    """A multi-line read-only text area with a vertical scroll bar."""

    rect: Rect
    text: str = ""
    scroll_bar: VScrollBar = field(default_factory=VScrollBar)
    offset_x: int = 0
    offset_y: int = 0

    def append_line(self, line: str) -> None:
        self.text = line if not self.text else f"{self.text}\n{line}"

    def content_size(self) -> tuple[int, int]:
        height = len(self.text.split("\n")) * LINE_SPACING + TEXTBOX_PADDING_TOP
        return self.rect.dx, height

    def view_size(self) -> tuple[int, int]:
        return self.rect.dx - VSCROLLBAR_WIDTH - TEXTBOX_PADDING_LEFT, self.rect.dy

    def update(self, just_pressed: bool, pressed: bool, x: int, y: int) -> None:
        bar = self.scroll_bar
        bar.x = self.rect.max_x - VSCROLLBAR_WIDTH
        bar.y = self.rect.min_y
        bar.height = self.rect.dy
        _, height = self.content_size()
        bar.update(height, just_pressed, pressed, x, y)
        self.offset_x = 0
        self.offset_y = bar.content_offset


def _fixed_advance(text: str) -> float:
    return 6.0 * len(text)


@dataclass
class CheckBox:
    """A labelled check box that toggles when released over itself."""

    x: int
    y: int
    text: str
    on_check_changed: Callable[[CheckBox], None] | None = None
    advance: Callable[[str], float] = _fixed_advance
    checked: bool = False
    mouse_down: bool = False

    @property
    def width(self) -> int:
        return CHECKBOX_WIDTH + CHECKBOX_PADDING_LEFT + int(self.advance(self.text))

    def update(self, pressed: bool, x: int, y: int) -> None:
        if pressed:
            self.mouse_down = (
                self.x <= x < self.x + self.width and self.y <= y < self.y + CHECKBOX_HEIGHT
            )
            return
        if self.mouse_down:
            self.checked = not self.checked
            if self.on_check_changed is not None:
                self.on_check_changed(self)
        self.mouse_down = False

    @property
    def box(self) -> Rect:
        return Rect(self.x, self.y, self.x + CHECKBOX_WIDTH, self.y + CHECKBOX_HEIGHT)


def _check_message(box: CheckBox) -> str:
    state = "Checked" if box.checked else "Unchecked"
    return f"Check box check changed ({state})"


def _build_widgets(advance: Callable[[str], float]) -> tuple[Button, Button, CheckBox, TextBox]:
    log = TextBox(Rect(16, 96, 624, 464))
    button1 = Button(Rect(16, 16, 144, 48), "Button 1", lambda b: log.append_line("Button 1 Pressed"))
    button2 = Button(Rect(160, 16, 288, 48), "Button 2", lambda b: log.append_line("Button 2 Pressed"))
    check = CheckBox(16, 64, "Check Box!", lambda c: log.append_line(_check_message(c)), advance)
    return button1, button2, check, log


def _stand_in_sheet(pygame):
    sheet = pygame.Surface((48, 48), pygame.SRCALPHA)
    fills = {
        ImageType.BUTTON: (0xDD, 0xDD, 0xDD),
        ImageType.BUTTON_PRESSED: (0xAA, 0xAA, 0xAA),
        ImageType.TEXT_BOX: (0xFF, 0xFF, 0xFF),
        ImageType.VSCROLLBAR_BACK: (0xCC, 0xCC, 0xCC),
        ImageType.VSCROLLBAR_FRONT: (0x88, 0x88, 0x88),
        ImageType.CHECK_BOX: (0xFF, 0xFF, 0xFF),
        ImageType.CHECK_BOX_PRESSED: (0xCC, 0xCC, 0xCC),
    }
    for kind, colour in fills.items():
        r = kind.source
        sheet.fill(colour, (r.min_x, r.min_y, r.dx, r.dy))
        pygame.draw.rect(sheet, (0x60, 0x60, 0x60), (r.min_x, r.min_y, r.dx, r.dy), 1)
    mark = ImageType.CHECK_BOX_MARK.source
    sheet.fill((0x20, 0x20, 0x20), (mark.min_x + 4, mark.min_y + 4, 8, 8))
    return sheet


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ui", description="Show simple UI widgets.")
    parser.add_argument("--image", help="48x48 widget sheet image")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("UI")
        font = pygame.font.Font(None, 16)
        clock = pygame.time.Clock()
        sheet = pygame.image.load(args.image).convert_alpha() if args.image else _stand_in_sheet(pygame)
        button1, button2, check, log = _build_widgets(lambda s: font.size(s)[0])

        def draw_patches(dst: Rect, kind: ImageType) -> None:
            for source, dest in nine_patch_rects(dst, kind.source):
                if source.empty or dest.empty:
                    continue
                piece = sheet.subsurface((source.min_x, source.min_y, source.dx, source.dy))
                scaled = pygame.transform.scale(piece, (dest.dx, dest.dy))
                screen.blit(scaled, (dest.min_x, dest.min_y))

        while True:
            just_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    just_pressed = True
            pressed = pygame.mouse.get_pressed()[0]
            x, y = pygame.mouse.get_pos()
            button1.update(pressed, x, y)
            button2.update(pressed, x, y)
            check.update(pressed, x, y)
            log.update(just_pressed, pressed, x, y)

            screen.fill((0xEB, 0xEB, 0xEB))
            for button in (button1, button2):
                draw_patches(button.rect, button.image)
                label = font.render(button.text, True, (0, 0, 0))
                centre = ((button.rect.min_x + button.rect.max_x) // 2,
                          (button.rect.min_y + button.rect.max_y) // 2)
                screen.blit(label, label.get_rect(center=centre))

            box_kind = ImageType.CHECK_BOX_PRESSED if check.mouse_down else ImageType.CHECK_BOX
            draw_patches(check.box, box_kind)
            if check.checked:
                draw_patches(check.box, ImageType.CHECK_BOX_MARK)
            label = font.render(check.text, True, (0, 0, 0))
            label_x = check.x + CHECKBOX_WIDTH + CHECKBOX_PADDING_LEFT
            screen.blit(label, label.get_rect(midleft=(label_x, check.y + CHECKBOX_HEIGHT // 2)))

            draw_patches(log.rect, ImageType.TEXT_BOX)
            screen.set_clip((log.rect.min_x, log.rect.min_y, log.rect.dx, log.rect.dy))
            tx = log.rect.min_x + TEXTBOX_PADDING_LEFT - log.offset_x
            ty = log.rect.min_y + TEXTBOX_PADDING_TOP - log.offset_y
            for line in log.text.split("\n"):
                screen.blit(font.render(line, True, (0, 0, 0)), (tx, ty))
                ty += LINE_SPACING
            screen.set_clip(None)
            bar = log.scroll_bar
            draw_patches(Rect(bar.x, bar.y, bar.x + VSCROLLBAR_WIDTH, bar.y + bar.height),
                         ImageType.VSCROLLBAR_BACK)
            if bar.thumb_rate < 1:
                draw_patches(bar.thumb_rect(), ImageType.VSCROLLBAR_FRONT)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()