"""A grid-based snake game: steer the snake, eat apples, avoid walls and yourself."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
GRID_SIZE = 10
X_GRID_COUNT = SCREEN_WIDTH // GRID_SIZE
Y_GRID_COUNT = SCREEN_HEIGHT // GRID_SIZE

START_PROMPT = "Press up/down/left/right to start"


class Direction(Enum):
    """Moving direction of the snake's head, valued by its grid offset."""

    NONE = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.UP: Direction.DOWN,
}


@dataclass(frozen=True)
class Position:
    """A cell on the game grid."""

    x: int
    y: int

    def moved(self, direction: Direction) -> Position:
        return Position(self.x + direction.dx, self.y + direction.dy)


def _center() -> Position:
    return Position(X_GRID_COUNT // 2, Y_GRID_COUNT // 2)


class SnakeGame:
    """State and rules of one snake game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.direction = Direction.NONE
        self.body: list[Position] = [_center()]
        self.apple = Position(3 * GRID_SIZE, 3 * GRID_SIZE)
        self.timer = 0
        self.move_time = 4
        self.score = 0
        self.best_score = 0
        self.level = 0

    def reset(self) -> None:
        """Start over, keeping only the best score."""
        self.apple = Position(3 * GRID_SIZE, 3 * GRID_SIZE)
        self.move_time = 4
        self.body = [_center()]
        self.score = 0
        self.level = 1
        self.direction = Direction.NONE

    def collides_with_apple(self) -> bool:
        return self.body[0] == self.apple

    def collides_with_self(self) -> bool:
        head = self.body[0]
        return any(segment == head for segment in self.body[1:])

    def collides_with_wall(self) -> bool:
        head = self.body[0]
        return head.x < 0 or head.y < 0 or head.x >= X_GRID_COUNT or head.y >= Y_GRID_COUNT

    def needs_to_move(self) -> bool:
        return self.timer % self.move_time == 0

    def steer(self, direction: Direction) -> None:
        """Turn the snake, unless that would reverse it onto itself."""
        if direction is Direction.NONE:
            raise ValueError("cannot steer towards no direction")
        if self.direction is not _OPPOSITE[direction]:
            self.direction = direction

    def update(self, direction: Direction | None = None, escape: bool = False) -> None:
        """Advance one tick, given the key pressed during it, if any."""
        if direction is not None:
            self.steer(direction)
        elif escape:
            self.reset()

        if self.needs_to_move():
            if self.collides_with_wall() or self.collides_with_self():
                self.reset()

            if self.collides_with_apple():
                self._eat_apple()

            self.body[1:] = self.body[:-1]
            self.body[0] = self.body[0].moved(self.direction)

        self.timer += 1

    def _eat_apple(self) -> None:
        self.apple = Position(
            self._rng.randrange(X_GRID_COUNT - 1),
            self._rng.randrange(Y_GRID_COUNT - 1),
        )
        self.body.append(self.body[-1])
        length = len(self.body)
        if 10 < length < 20:
            self.level = 2
            self.move_time = 3
        elif length > 20:
            self.level = 3
            self.move_time = 2
        else:
            self.level = 1
        self.score += 1
        self.best_score = max(self.best_score, self.score)

    def status_text(self, fps: float) -> str:
        if self.direction is Direction.NONE:
            return START_PROMPT
        return (
            f"FPS: {fps:0.2f} Level: {self.level} "
            f"Score: {self.score} Best Score: {self.best_score}"
        )


def _blit_text(surface, font, text: str, x: int = 0, y: int = 0) -> None:
    for line in text.split("\n"):
        surface.blit(font.render(line, True, (255, 255, 255)), (x, y))
        y += font.get_linesize()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snake", description="Play snake.")
    parser.parse_args(argv)

    import pygame

    keys = {
        Direction.LEFT: (pygame.K_LEFT, pygame.K_a),
        Direction.RIGHT: (pygame.K_RIGHT, pygame.K_d),
        Direction.DOWN: (pygame.K_DOWN, pygame.K_s),
        Direction.UP: (pygame.K_UP, pygame.K_w),
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Snake")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        game = SnakeGame()
        while True:
            pressed: set[int] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    pressed.add(event.key)
            direction = next(
                (d for d, codes in keys.items() if pressed.intersection(codes)), None
            )
            game.update(direction, pygame.K_ESCAPE in pressed)

            screen.fill((0, 0, 0))
            for segment in game.body:
                rect = (segment.x * GRID_SIZE, segment.y * GRID_SIZE, GRID_SIZE, GRID_SIZE)
                pygame.draw.rect(screen, (0x80, 0xA0, 0xC0), rect)
            apple = (game.apple.x * GRID_SIZE, game.apple.y * GRID_SIZE, GRID_SIZE, GRID_SIZE)
            pygame.draw.rect(screen, (0xFF, 0x00, 0x00), apple)
            _blit_text(screen, font, game.status_text(clock.get_fps()))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()