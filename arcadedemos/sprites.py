"""Many bouncing, rotating sprites whose number can be changed at run time."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass
from itertools import islice

SCREEN_WIDTH = 320
SCREEN_HEIGHT = 240
HD_SCREEN_WIDTH = 1920
HD_SCREEN_HEIGHT = 1080
MAX_ANGLE = 256
MIN_SPRITES = 0
MAX_SPRITES = 50000
INITIAL_SPRITES = 500
SPRITE_STEP = 20

_IMAGE_SIZE = 32


@dataclass(slots=True)
class Sprite:
    """A sprite's size, top-left position, velocity and rotation step."""

    image_width: int
    image_height: int
    x: int
    y: int
    vx: int
    vy: int
    angle: int = 0

    def update(self, screen_width: int = SCREEN_WIDTH, screen_height: int = SCREEN_HEIGHT) -> None:
        """Move one step, bouncing off the screen edges, and turn a little."""
        self.x += self.vx
        self.y += self.vy
        max_x = screen_width - self.image_width
        if self.x < 0:
            self.x = -self.x
            self.vx = -self.vx
        elif max_x <= self.x:
            self.x = 2 * max_x - self.x
            self.vx = -self.vx
        max_y = screen_height - self.image_height
        if self.y < 0:
            self.y = -self.y
            self.vy = -self.vy
        elif max_y <= self.y:
            self.y = 2 * max_y - self.y
            self.vy = -self.vy
        self.angle = (self.angle + 1) % MAX_ANGLE

    @property
    def rotation(self) -> float:
        """The rotation in radians."""
        return 2 * math.pi * self.angle / MAX_ANGLE


class SpriteSet:
    """A fixed pool of sprites of which the first ``num`` are shown."""

    def __init__(
        self,
        image_width: int,
        image_height: int,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        rng: random.Random | None = None,
        update_all: bool = False,
    ) -> None:
        if rng is None:
            rng = random.Random()
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.update_all = update_all
        self.num = INITIAL_SPRITES
        self.sprites = [
            Sprite(
                image_width,
                image_height,
                rng.randrange(screen_width - image_width),
                rng.randrange(screen_height - image_height),
                2 * rng.randrange(2) - 1,
                2 * rng.randrange(2) - 1,
                rng.randrange(MAX_ANGLE),
            )
            for _ in range(MAX_SPRITES)
        ]

    def adjust(self, delta: int) -> int:
        """Change the number of shown sprites, kept within the allowed range."""
        self.num = max(MIN_SPRITES, min(MAX_SPRITES, self.num + delta))
        return self.num

    def update(self) -> None:
        """Advance the shown sprites, or every sprite when ``update_all`` is set."""
        targets = self.sprites if self.update_all else islice(self.sprites, self.num)
        for sprite in targets:
            sprite.update(self.screen_width, self.screen_height)

    def visible(self) -> list[Sprite]:
        return self.sprites[: self.num]


def status_text(fps: float, tps: float, count: int, hd: bool = False) -> str:
    lines = [
        f"TPS: {tps:0.2f}",
        f"FPS: {fps:0.2f}",
        f"Num of sprites: {count}",
        "Press <- or -> to change the number of sprites",
    ]
    if hd:
        lines.append("Press Q to quit")
    return "\n".join(lines)


def _load_image(pygame, path: str | None):
    if path is not None:
        image = pygame.image.load(path).convert_alpha()
    else:
        image = pygame.Surface((_IMAGE_SIZE, _IMAGE_SIZE), pygame.SRCALPHA)
        image.fill((0xDB, 0x56, 0x20, 0xFF))
        pygame.draw.rect(image, (0xFF, 0xFF, 0xFF, 0xFF), image.get_rect(), 2)
    faded = pygame.Surface(image.get_size(), pygame.SRCALPHA)
    faded.blit(image, (0, 0))
    faded.fill((255, 255, 255, 128), special_flags=pygame.BLEND_RGBA_MULT)
    return faded


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sprites", description="Draw many sprites.")
    parser.add_argument("--hd", action="store_true", help="full-HD fullscreen variant")
    parser.add_argument("--image", help="image file to use for the sprites")
    args = parser.parse_args(argv)

    import pygame

    width, height = (HD_SCREEN_WIDTH, HD_SCREEN_HEIGHT) if args.hd else (SCREEN_WIDTH, SCREEN_HEIGHT)

    pygame.init()
    try:
        if args.hd:
            screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN | pygame.SCALED)
            pygame.display.set_caption("Sprites HD")
        else:
            screen = pygame.display.set_mode((width, height), pygame.RESIZABLE | pygame.SCALED)
            pygame.display.set_caption("Sprites")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        image = _load_image(pygame, args.image)
        w, h = image.get_size()
        rotated = {
            a: pygame.transform.rotate(image, -360 * a / MAX_ANGLE) for a in range(MAX_ANGLE)
        }
        sprites: SpriteSet | None = None
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if args.hd and event.type == pygame.KEYDOWN and event.key == pygame.K_q:
                    return 0
            if sprites is None:
                sprites = SpriteSet(w, h, width, height, update_all=args.hd)

            keys = pygame.key.get_pressed()
            left_touch = right_touch = False
            if not args.hd and pygame.mouse.get_pressed()[0]:
                mx, _ = pygame.mouse.get_pos()
                left_touch = mx < width // 2
                right_touch = not left_touch
            if keys[pygame.K_LEFT] or left_touch:
                sprites.adjust(-SPRITE_STEP)
            if keys[pygame.K_RIGHT] or right_touch:
                sprites.adjust(SPRITE_STEP)
            sprites.update()

            screen.fill((0, 0, 0))
            for sprite in sprites.visible():
                surface = rotated[sprite.angle]
                rect = surface.get_rect(center=(sprite.x + w / 2, sprite.y + h / 2))
                screen.blit(surface, rect)
            fps = clock.get_fps()
            y = 0
            for line in status_text(fps, fps, sprites.num, args.hd).split("\n"):
                screen.blit(font.render(line, True, (255, 255, 255)), (0, y))
                y += font.get_linesize()
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()