"""Ask for confirmation before closing the window."""

from __future__ import annotations

import argparse

IDLE_MESSAGE = "Try to close this window. This works only on desktops."
CONFIRM_MESSAGE = "Do you really want to close this window? [y/n]"


class ClosingPrompt:
    """Tracks whether a close request is waiting for a yes/no answer."""

    def __init__(self) -> None:
        self.handling = False

    def update(self, closing_requested: bool = False, yes: bool = False, no: bool = False) -> bool:
        """Advance one tick; True when the user confirmed closing."""
        if closing_requested:
            self.handling = True
        if self.handling:
            if yes:
                return True
            if no:
                self.handling = False
        return False

    def message(self) -> str:
        return CONFIRM_MESSAGE if self.handling else IDLE_MESSAGE


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="windowclosing", description="Confirm window closing.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((640, 480), pygame.RESIZABLE)
        pygame.display.set_caption("Window Closing")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        prompt = ClosingPrompt()
        while True:
            closing = yes = no = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    closing = True
                elif event.type == pygame.KEYDOWN:
                    yes = yes or event.key == pygame.K_y
                    no = no or event.key == pygame.K_n
            if prompt.update(closing, yes, no):
                return 0
            screen.fill((0, 0, 0))
            screen.blit(font.render(prompt.message(), True, (255, 255, 255)), (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()