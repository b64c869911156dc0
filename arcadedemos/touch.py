"""Touch gestures: a two-finger pinch zooms, a one-finger swipe pans, a tap resets."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Hashable

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
TAP_MAX_DURATION = 30
TAP_MAX_DISTANCE = 2
PINCH_THRESHOLD = 3
PAN_THRESHOLD = 1
MIN_ZOOM = 0.25
MAX_ZOOM = 10.0

HELP_TEXT = (
    "Use a two finger pinch to zoom, swipe with one finger to pan, "
    "or tap to reset the view"
)


def distance(xa: float, ya: float, xb: float, yb: float) -> float:
    """Euclidean distance between points a and b."""
    return math.hypot(xa - xb, ya - yb)


@dataclass
class _Touch:
    origin_x: int
    origin_y: int
    curr_x: int
    curr_y: int
    duration: int = 0
    was_pinch: bool = False
    is_pan: bool = False


@dataclass
class Pinch:
    id1: Hashable
    id2: Hashable
    origin_h: float
    prev_h: float


@dataclass
class Pan:
    id: Hashable
    prev_x: int
    prev_y: int
    origin_x: int
    origin_y: int


@dataclass(frozen=True)
class Tap:
    x: int
    y: int


def _position(active: Mapping, touch_id: Hashable) -> tuple[int, int]:
    x, y, _ = active.get(touch_id, (0, 0, 0))
    return x, y


class TouchTracker:
    """Turns raw touch points into pan, zoom and tap gestures on a view."""

    def __init__(self, screen_width: int = SCREEN_WIDTH, screen_height: int = SCREEN_HEIGHT) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.x = screen_width / 2
        self.y = screen_height / 2
        self.zoom = 1.0
        self.touches: dict[Hashable, _Touch] = {}
        self.pinch: Pinch | None = None
        self.pan: Pan | None = None
        self.taps: list[Tap] = []

    def update(
        self,
        released: Iterable[Hashable] = (),
        pressed: Mapping[Hashable, tuple[int, int]] | None = None,
        active: Mapping[Hashable, tuple[int, int, int]] | None = None,
    ) -> list[Tap]:
        """Advance one frame.

        ``released`` are the touches that ended this frame, ``pressed`` maps the
        touches that began to their position, and ``active`` maps every touch
        currently down, in order, to ``(x, y, press_duration)``. Returns the taps.
        """
        pressed = pressed or {}
        active = active or {}
        self.taps = []

        for touch_id in released:
            touch = self.touches.pop(touch_id, None)
            if touch is None:
                continue
            if self.pinch is not None and touch_id in (self.pinch.id1, self.pinch.id2):
                self.pinch = None
            if self.pan is not None and touch_id == self.pan.id:
                self.pan = None
            moved = distance(touch.origin_x, touch.origin_y, touch.curr_x, touch.curr_y)
            if not touch.was_pinch and not touch.is_pan and (
                touch.duration <= TAP_MAX_DURATION or moved < TAP_MAX_DISTANCE
            ):
                self.taps.append(Tap(touch.curr_x, touch.curr_y))

        for touch_id, (x, y) in pressed.items():
            self.touches[touch_id] = _Touch(x, y, x, y)

        ids = list(active)
        for touch_id in ids:
            touch = self.touches[touch_id]
            touch.curr_x, touch.curr_y, touch.duration = active[touch_id]

        if len(self.touches) == 2:
            self._detect_pinch(ids[0], ids[1])
        elif len(self.touches) == 1:
            self._detect_pan(ids[0])

        if self.pinch is not None:
            x1, y1 = _position(active, self.pinch.id1)
            x2, y2 = _position(active, self.pinch.id2)
            current = distance(x1, y1, x2, y2)
            delta = current - self.pinch.prev_h
            self.pinch.prev_h = current
            self.zoom += (delta / 100) * self.zoom
            self.zoom = min(MAX_ZOOM, max(MIN_ZOOM, self.zoom))

        if self.pan is not None:
            curr_x, curr_y = _position(active, self.pan.id)
            delta_x, delta_y = curr_x - self.pan.prev_x, curr_y - self.pan.prev_y
            self.pan.prev_x, self.pan.prev_y = curr_x, curr_y
            self.x += delta_x
            self.y += delta_y

        if self.taps:
            self.x = self.screen_width / 2
            self.y = self.screen_height / 2
            self.zoom = 1.0

        return list(self.taps)

    def _detect_pinch(self, id1: Hashable, id2: Hashable) -> None:
        t1, t2 = self.touches[id1], self.touches[id2]
        origin_diff = distance(t1.origin_x, t1.origin_y, t2.origin_x, t2.origin_y)
        curr_diff = distance(t1.curr_x, t1.curr_y, t2.curr_x, t2.curr_y)
        if self.pinch is None and self.pan is None and abs(origin_diff - curr_diff) > PINCH_THRESHOLD:
            t1.was_pinch = True
            t2.was_pinch = True
            self.pinch = Pinch(id1, id2, origin_diff, origin_diff)

    def _detect_pan(self, touch_id: Hashable) -> None:
        touch = self.touches[touch_id]
        if touch.was_pinch or self.pan is not None or self.pinch is not None:
            return
        if distance(touch.origin_x, touch.origin_y, touch.curr_x, touch.curr_y) > PAN_THRESHOLD:
            touch.is_pan = True
            self.pan = Pan(
                touch_id,
                prev_x=touch.origin_x,
                prev_y=touch.origin_y,
                origin_x=touch.origin_x,
                origin_y=touch.origin_y,
            )


def _stand_in_image(pygame):
    image = pygame.Surface((200, 150))
    image.fill((0x40, 0x80, 0xC0))
    pygame.draw.circle(image, (0xFF, 0xFF, 0xFF), (100, 75), 50, 4)
    return image


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="touch", description="Pan and zoom with touches.")
    parser.add_argument("--image", help="image file to show")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Touch")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        image = pygame.image.load(args.image).convert() if args.image else _stand_in_image(pygame)
        w, h = image.get_size()
        tracker = TouchTracker()
        down: dict[Hashable, list[int]] = {}
        while True:
            released: list[Hashable] = []
            pressed: dict[Hashable, tuple[int, int]] = {}
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
                    key = (event.touch_id, event.finger_id)
                    pos = [int(event.x * SCREEN_WIDTH), int(event.y * SCREEN_HEIGHT), 0]
                elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
                    if getattr(event, "touch", False):
                        continue
                    if event.type != pygame.MOUSEMOTION and event.button != 1:
                        continue
                    key = "mouse"
                    pos = [event.pos[0], event.pos[1], 0]
                else:
                    continue
                if event.type in (pygame.FINGERDOWN, pygame.MOUSEBUTTONDOWN):
                    down[key] = pos
                    pressed[key] = (pos[0], pos[1])
                elif event.type in (pygame.FINGERUP, pygame.MOUSEBUTTONUP):
                    if down.pop(key, None) is not None:
                        released.append(key)
                elif key in down:
                    pos[2] = down[key][2]
                    down[key] = pos
            for state in down.values():
                state[2] += 1
            active = {key: (s[0], s[1], s[2]) for key, s in down.items()}
            tracker.update(released, pressed, active)

            screen.fill((0, 0, 0))
            size = (max(1, int(w * tracker.zoom)), max(1, int(h * tracker.zoom)))
            scaled = pygame.transform.smoothscale(image, size)
            screen.blit(scaled, (tracker.x - w / 2 * tracker.zoom, tracker.y - h / 2 * tracker.zoom))
            screen.blit(font.render(HELP_TEXT, True, (255, 255, 255)), (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()