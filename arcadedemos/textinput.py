"""Editable text fields with a caret, click-to-place selection and IME composition."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from arcadedemos.ui import Rect

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TEXT_FIELD_HEIGHT = 24
PADDING_X = 4

_FAR_RIGHT = 2**31 - 1


def _default_advance(text: str) -> float:
    return 6.0 * len(text)


class TextField:
    """A single- or multi-line text field.

    ``advance`` gives the rendered width of a string and ``line_height`` the
    height of a line, both in pixels. Selection indices count characters.
    """

    def __init__(
        self,
        bounds: Rect,
        multiline: bool = False,
        advance: Callable[[str], float] = _default_advance,
        line_height: int = 16,
    ) -> None:
        self.bounds = bounds
        self.multiline = multiline
        self.advance = advance
        self.line_height = line_height
        self.text = ""
        self.selection_start = 0
        self.selection_end = 0
        self.focused = False
        self.composition = ""
        self.composition_cursor = 0

    @property
    def padding(self) -> tuple[int, int]:
        # Truncate towards zero, even for lines taller than the field.
        return PADDING_X, int((TEXT_FIELD_HEIGHT - self.line_height) / 2)

    def contains(self, x: int, y: int) -> bool:
        return self.bounds.contains(x, y)

    def set_selection_start_by_cursor_position(self, x: int, y: int) -> bool:
        """Put the caret at the clicked point; False when the point is outside."""
        index = self.text_index_at(x, y)
        if index is None:
            return False
        self.selection_start = index
        self.selection_end = index
        return True

    def text_index_at(self, x: int, y: int) -> int | None:
        """The character index nearest the point, or None outside the field."""
        if not self.contains(x, y):
            return None
        px, py = self.padding
        x = max(x - self.bounds.min_x - px, 0)
        y = max(y - self.bounds.min_y - py, 0)

        line = 0
        line_start = 0
        prev_advance = 0.0
        for i, ch in enumerate(self.text):
            current = self.advance(self.text[line_start:i])
            x0 = int((prev_advance + current) / 2) if line_start < i else 0
            if ch == "\n":
                x1 = _FAR_RIGHT
            else:
                following = self.advance(self.text[line_start:i + 1])
                x1 = int((current + following) / 2)
            top = line * self.line_height
            if x0 <= x < x1 and top <= y < top + self.line_height:
                return i
            prev_advance = current
            if ch == "\n":
                line += 1
                line_start = i + 1
                prev_advance = 0.0
        return len(self.text)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        """Lose focus, dropping any text still being composed."""
        self.focused = False
        self.composition = ""
        self.composition_cursor = 0

    def _replace_selection(self, text: str) -> None:
        self.text = self.text[: self.selection_start] + text + self.text[self.selection_end:]
        self.selection_start += len(text)
        self.selection_end = self.selection_start

    def _strip_newlines(self) -> None:
        if self.multiline or "\n" not in self.text:
            return
        self.selection_start -= self.text.count("\n", 0, self.selection_start)
        self.selection_end -= self.text.count("\n", 0, self.selection_end)
        self.text = self.text.replace("\n", "")

    def commit(self, text: str) -> None:
        """Insert committed input in place of the selection."""
        if not self.focused:
            return
        self._replace_selection(text)
        self.composition = ""
        self.composition_cursor = 0
        self._strip_newlines()

    def press_enter(self) -> None:
        if self.focused and self.multiline:
            self._replace_selection("\n")

    def backspace(self) -> None:
        if not self.focused:
            return
        if self.selection_start > 0:
            self.text = self.text[: self.selection_start - 1] + self.text[self.selection_end:]
            self.selection_start -= 1
        self.selection_end = self.selection_start

    def move_left(self) -> None:
        if not self.focused:
            return
        if self.selection_start > 0:
            self.selection_start -= 1
        self.selection_end = self.selection_start

    def move_right(self) -> None:
        if not self.focused:
            return
        if self.selection_end < len(self.text):
            self.selection_end += 1
        self.selection_start = self.selection_end

    def cursor_position(self) -> tuple[int, int]:
        """The caret offset from the text origin, including composed text before it."""
        before = self.text[: self.selection_start]
        lines = before.count("\n")
        line_text = before[before.rfind("\n") + 1:]
        if self.composition:
            line_text += self.composition[: self.composition_cursor]
        return int(self.advance(line_text)), lines * self.line_height

    def _shown_text(self) -> str:
        if self.focused and self.composition:
            return self.text[: self.selection_start] + self.composition + self.text[self.selection_end:]
        return self.text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="textinput", description="Edit text fields.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Text Input")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        line_height = font.get_linesize()

        def advance(s: str) -> float:
            return float(font.size(s)[0])

        fields = [
            TextField(Rect(16, 16, SCREEN_WIDTH - 16, 16 + TEXT_FIELD_HEIGHT), False, advance, line_height),
            TextField(Rect(16, 48, SCREEN_WIDTH - 16, 48 + TEXT_FIELD_HEIGHT), False, advance, line_height),
            TextField(Rect(16, 80, SCREEN_WIDTH - 16, SCREEN_HEIGHT - 16), True, advance, line_height),
        ]
        pygame.key.start_text_input()
        cursor_is_text = None
        while True:
            processed = False
            keys: list[int] = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    for field in fields:
                        if field.contains(*event.pos):
                            field.focus()
                            field.set_selection_start_by_cursor_position(*event.pos)
                        else:
                            field.blur()
                elif event.type == pygame.TEXTINPUT:
                    processed = True
                    for field in fields:
                        field.commit(event.text)
                elif event.type == pygame.TEXTEDITING:
                    processed = True
                    for field in fields:
                        if field.focused:
                            field.composition = event.text
                            field.composition_cursor = min(event.start, len(event.text))
                elif event.type == pygame.KEYDOWN:
                    keys.append(event.key)

            if not processed:
                for key in keys:
                    for field in fields:
                        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                            field.press_enter()
                        elif key == pygame.K_BACKSPACE:
                            field.backspace()
                        elif key == pygame.K_LEFT:
                            field.move_left()
                        elif key == pygame.K_RIGHT:
                            field.move_right()

            for field in fields:
                if field.focused:
                    cx, cy = field.cursor_position()
                    px, py = field.padding
                    pygame.key.set_text_input_rect(
                        (field.bounds.min_x + cx + px, field.bounds.min_y + cy + py, 1, line_height)
                    )

            mx, my = pygame.mouse.get_pos()
            in_field = any(field.contains(mx, my) for field in fields)
            if in_field != cursor_is_text:
                shape = pygame.SYSTEM_CURSOR_IBEAM if in_field else pygame.SYSTEM_CURSOR_ARROW
                pygame.mouse.set_cursor(shape)
                cursor_is_text = in_field

            screen.fill((0xCC, 0xCC, 0xCC))
            for field in fields:
                b = field.bounds
                area = (b.min_x, b.min_y, b.dx, b.dy)
                pygame.draw.rect(screen, (0xFF, 0xFF, 0xFF), area)
                border = (0, 0, 0xFF) if field.focused else (0, 0, 0)
                pygame.draw.rect(screen, border, area, 1)
                px, py = field.padding
                if field.focused:
                    cx, cy = field.cursor_position()
                    top = (b.min_x + px + cx, b.min_y + py + cy)
                    pygame.draw.line(screen, (0, 0, 0), top, (top[0], top[1] + line_height))
                y = b.min_y + py
                for line in field._shown_text().split("\n"):
                    screen.blit(font.render(line, True, (0, 0, 0)), (b.min_x + px, y))
                    y += line_height
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()