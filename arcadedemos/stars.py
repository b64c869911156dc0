"""A star field that streams away from the mouse cursor."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
SCALE = 64
STARS_COUNT = 1024


@dataclass
class Star:
    """A star's last and current position in scaled coordinates, and its brightness."""

    from_x: float = 0.0
    from_y: float = 0.0
    to_x: float = 0.0
    to_y: float = 0.0
    brightness: float = 0.0

    def reset(self, rng: random.Random) -> None:
        """Place the star at a random point with a random brightness."""
        self.to_x = rng.random() * SCREEN_WIDTH * SCALE
        self.from_x = self.to_x
        self.to_y = rng.random() * SCREEN_HEIGHT * SCALE
        self.from_y = self.to_y
        self.brightness = rng.random() * 0xFF

    def update(self, x: float, y: float, rng: random.Random) -> None:
        """Move the star away from (x, y), respawning it once it leaves the screen."""
        self.from_x = self.to_x
        self.from_y = self.to_y
        self.to_x += (self.to_x - x) / 32
        self.to_y += (self.to_y - y) / 32
        self.brightness = min(self.brightness + 1, 0xFF)
        if (
            self.from_x < 0
            or SCREEN_WIDTH * SCALE < self.from_x
            or self.from_y < 0
            or SCREEN_HEIGHT * SCALE < self.from_y
        ):
            self.reset(rng)

    def color(self) -> tuple[int, int, int, int]:
        b = self.brightness
        return (int(0xBB * b / 0xFF), int(0xDD * b / 0xFF), int(0xFF * b / 0xFF), 0xFF)

    def segment(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """The trail to draw, in screen coordinates."""
        return (
            (self.from_x / SCALE, self.from_y / SCALE),
            (self.to_x / SCALE, self.to_y / SCALE),
        )


class StarField:
    """A collection of stars driven by the cursor position."""

    def __init__(self, count: int = STARS_COUNT, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.stars: list[Star] = []
        for _ in range(count):
            star = Star()
            star.reset(self._rng)
            self.stars.append(star)

    def update(self, cursor_x: int, cursor_y: int) -> None:
        x, y = cursor_x * SCALE, cursor_y * SCALE
        for star in self.stars:
            star.update(x, y, self._rng)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="stars", description="Show a star field.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Stars")
        clock = pygame.time.Clock()
        field = StarField()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
            field.update(*pygame.mouse.get_pos())
            screen.fill((0, 0, 0))
            for star in field.stars:
                start, end = star.segment()
                pygame.draw.aaline(screen, star.color(), start, end)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()