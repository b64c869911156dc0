"""Squirals: space-filling spirals that crawl over a canvas until they get stuck."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

WIDTH = 800
HEIGHT = 600
NUM_OF_SQUIRALS = WIDTH // 32
TPS = 250

Color = tuple[int, int, int, int]

BLACK: Color = (0x00, 0x00, 0x00, 0xFF)
WHITE: Color = (0xFF, 0xFF, 0xFF, 0xFF)
# An arbitrary colour used to keep the squirals from leaving the canvas.
BLOCKER: Color = (0x00, 0x00, 0x00, 0xFE)


@dataclass(frozen=True)
class Palette:
    """A named set of colours the squirals cycle through."""

    name: str
    colors: tuple[Color, ...]


PALETTES: tuple[Palette, ...] = (
    Palette(
        "sand dunes",
        (
            (0xF2, 0x74, 0x05, 0xFF),
            (0xD9, 0x52, 0x04, 0xFF),
            (0x40, 0x18, 0x01, 0xFF),
            (0xA6, 0x2F, 0x03, 0xFF),
            (0x73, 0x2A, 0x19, 0xFF),
        ),
    ),
    Palette(
        "mono desert sand",
        (
            (0x7F, 0x6C, 0x52, 0xFF),
            (0xFF, 0xBA, 0x58, 0xFF),
            (0xFF, 0xD9, 0xA5, 0xFF),
            (0x7F, 0x50, 0x0F, 0xFF),
            (0xCC, 0xAE, 0x84, 0xFF),
        ),
    ),
    Palette(
        "land sea gradient",
        (
            (0x00, 0xA2, 0xE8, 0xFF),
            (0x67, 0xA3, 0xF5, 0xFF),
            (0xFF, 0xFF, 0xD5, 0xFF),
            (0xDD, 0xE8, 0x0C, 0xFF),
            (0x74, 0x9A, 0x0D, 0xFF),
        ),
    ),
)

# Direction offsets tried in order: clockwise turns right, straight, left;
# counter-clockwise turns left, straight, right.
DIR_CYCLES = ((1, 0, 3), (3, 0, 1))

# East, south, west, north.
DIRS = ((1, 0), (0, 1), (-1, 0), (0, -1))

# Cells beside the path: index 0 when moving horizontally, 1 when vertically.
NEIGHBORS = (((0, 1), (0, -1)), ((1, 0), (-1, 0)))


@dataclass
class Squiral:
    """One crawling spiral."""

    speed: int = 0
    x: int = 0
    y: int = 0
    direction: int = 0
    rot: int = 0
    color: Color | None = None
    dead: bool = False

    def spawn(self, automaton: Automaton) -> None:
        """Place the squiral at a random free spot, or mark it dead if that spot is taken."""
        self.dead = False
        rng = automaton.rng
        rx = rng.randrange(automaton.width - 4) + 2
        ry = rng.randrange(automaton.height - 4) + 2

        grid = automaton.color_map
        for dx in range(-2, 3):
            for dy in range(-2, 3):
                if grid[rx + dx][ry + dy] != automaton.background:
                    self.dead = True
                    return

        self.speed = rng.randrange(5) + 1
        self.x = rx
        self.y = ry
        self.direction = rng.randrange(4)

        colors = automaton.palette.colors
        automaton.color_cycle = (automaton.color_cycle + 1) % len(colors)
        self.color = colors[automaton.color_cycle]

        self.rot = rng.randrange(2)

    def _blocked(self, grid: list[list[Color]], direction: int, target: tuple[int, int],
                 beyond: tuple[int, int]) -> bool:
        for ox, oy in NEIGHBORS[direction % 2]:
            for cx, cy in (target, beyond):
                if grid[cx + ox][cy + oy] == self.color:
                    return True
        return False

    def step(self, automaton: Automaton) -> None:
        """Advance one cell in the rotation direction, or die when no way is open."""
        if self.dead:
            return

        if automaton.rng.randrange(1000) < 2:
            # Now and then, switch the rotation direction.
            self.rot = (self.rot + 1) % 2

        grid = automaton.color_map
        for turn in DIR_CYCLES[self.rot]:
            direction = (self.direction + turn) % 4
            dx, dy = DIRS[direction]
            target = (self.x + dx, self.y + dy)
            if grid[target[0]][target[1]] != automaton.background:
                continue
            beyond = (target[0] + dx, target[1] + dy)
            # Avoid running into a cell of the same colour to prevent solid blocks.
            if grid[beyond[0]][beyond[1]] == self.color:
                continue
            if self._blocked(grid, direction, target, beyond):
                continue

            self.x, self.y = target
            self.direction = direction
            automaton.set_pixel(self.x, self.y, self.color)
            return

        self.dead = True


class Automaton:
    """The canvas state and the squirals that paint it."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, count: int | None = None,
                 rng: random.Random | None = None) -> None:
        if width < 5 or height < 5:
            raise ValueError("the canvas must be at least 5x5 cells")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.background: Color = BLACK
        self.selected_palette = 0
        self.color_cycle = 0
        self.color_map: list[list[Color]] = []
        self.changes: list[tuple[int, int, Color]] = []
        self.squirals = [Squiral() for _ in range(width // 32 if count is None else count)]
        self.reset()

    @property
    def palette(self) -> Palette:
        return PALETTES[self.selected_palette]

    def reset(self) -> None:
        """Clear the canvas, wall it in with the blocker colour, and respawn every squiral."""
        last_x, last_y = self.width - 1, self.height - 1
        self.color_map = [
            [
                BLOCKER if x in (0, last_x) or y in (0, last_y) else self.background
                for y in range(self.height)
            ]
            for x in range(self.width)
        ]
        self.changes = []
        for squiral in self.squirals:
            squiral.spawn(self)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self.color_map[x][y] = color
        self.changes.append((x, y, color))

    def step(self) -> None:
        """Let every squiral move as many times as its speed, respawning the dead ones."""
        for squiral in self.squirals:
            moves = 0
            while moves < squiral.speed:
                squiral.step(self)
                if squiral.dead:
                    squiral.spawn(self)
                moves += 1

    def toggle_background(self) -> None:
        self.background = BLACK if self.background == WHITE else WHITE
        self.reset()

    def cycle_palette(self) -> None:
        self.selected_palette = (self.selected_palette + 1) % len(PALETTES)
        self.reset()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="squiral", description="Watch squirals fill the screen.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Squirals")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        automaton = Automaton()
        canvas = pygame.Surface((WIDTH, HEIGHT))
        canvas.fill(automaton.background)
        while True:
            reset = None
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and reset is None:
                    if event.key == pygame.K_b:
                        reset = automaton.toggle_background
                    elif event.key == pygame.K_t:
                        reset = automaton.cycle_palette
                    elif event.key == pygame.K_r:
                        reset = automaton.reset
            if reset is not None:
                reset()
                canvas.fill(automaton.background)

            automaton.step()
            for x, y, color in automaton.changes:
                canvas.set_at((x, y), color)
            automaton.changes.clear()

            screen.blit(canvas, (0, 0))
            fps = clock.get_fps()
            lines = (
                f"TPS: {fps:0.2f}, FPS: {fps:0.2f}",
                "[r]: respawn",
                "[b]: toggle background (white/black)",
                f"[t]: cycle theme (current: {automaton.palette.name})",
            )
            for row, line in enumerate(lines):
                text = font.render(line, True, (0x80, 0x80, 0x80))
                screen.blit(text, (1, 16 * row))
            pygame.display.flip()
            clock.tick(TPS)
    finally:
        pygame.quit()