"""A typewriter: typed characters appear on screen, with key repeat and a blinking cursor."""

from __future__ import annotations

import argparse

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
MAX_LINES = 10
REPEAT_DELAY = 30
REPEAT_INTERVAL = 3
INITIAL_TEXT = "Type on the keyboard:\n"


def repeating_key_pressed(duration: int) -> bool:
    """Whether a key held for ``duration`` ticks fires this tick, with key repeat."""
    if duration == 1:
        return True
    return duration >= REPEAT_DELAY and (duration - REPEAT_DELAY) % REPEAT_INTERVAL == 0


class Typewriter:
    """The text typed so far and the cursor blink counter."""

    def __init__(self, text: str = INITIAL_TEXT) -> None:
        self.text = text
        self.counter = 0

    def update(self, chars: str = "", enter_duration: int = 0, backspace_duration: int = 0) -> None:
        """Advance one tick with the characters typed and how long Enter/Backspace are held."""
        self.text += chars
        lines = self.text.split("\n")
        if len(lines) > MAX_LINES:
            self.text = "\n".join(lines[-MAX_LINES:])

        if repeating_key_pressed(enter_duration):
            self.text += "\n"

        if repeating_key_pressed(backspace_duration) and self.text:
            self.text = self.text[:-1]

        self.counter += 1

    def display_text(self) -> str:
        """The text with the cursor shown during the first half of each second."""
        if self.counter % 60 < 30:
            return self.text + "_"
        return self.text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="typewriter", description="Type on the screen.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("TypeWriter")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        pygame.key.start_text_input()
        typewriter = Typewriter()
        held = {pygame.K_RETURN: 0, pygame.K_KP_ENTER: 0, pygame.K_BACKSPACE: 0}
        while True:
            chars = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.TEXTINPUT:
                    chars.append(event.text)
            pressed = pygame.key.get_pressed()
            for key in held:
                held[key] = held[key] + 1 if pressed[key] else 0

            enter = held[pygame.K_RETURN]
            if not repeating_key_pressed(enter):
                enter = held[pygame.K_KP_ENTER]
            typewriter.update("".join(chars), enter, held[pygame.K_BACKSPACE])

            screen.fill((0, 0, 0))
            y = 0
            for line in typewriter.display_text().split("\n"):
                screen.blit(font.render(line, True, (255, 255, 255)), (0, y))
                y += font.get_linesize()
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()