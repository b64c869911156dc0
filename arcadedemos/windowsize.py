"""A playground for window settings: size, position, fullscreen, cursor, vsync and more."""

from __future__ import annotations

import argparse
import math
import os
import random
import re
from dataclasses import dataclass
from enum import Enum

INIT_SCREEN_WIDTH = 480
INIT_SCREEN_HEIGHT = 480
INIT_SCREEN_SCALE = 1
ICON_SIZE = 32
SIZE_STEP = 16
SYNC_WITH_FPS = -1

_POSITION_PART = re.compile(r"[+-]?[0-9]+")
_SIZE = re.compile(r"([0-9]+)x([0-9]+)")

_GRAPHICS_LIBRARIES = {
    "": None,
    "opengl": "opengl",
    "directx": "direct3d",
    "metal": "metal",
}


class CursorMode(Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    CAPTURED = "captured"


class ResizingMode(Enum):
    DISABLED = "disabled"
    ONLY_FULLSCREEN_ENABLED = "only fullscreen enabled"
    ENABLED = "enabled"


_NEXT_CURSOR_MODE = {
    CursorMode.VISIBLE: CursorMode.HIDDEN,
    CursorMode.HIDDEN: CursorMode.CAPTURED,
    CursorMode.CAPTURED: CursorMode.VISIBLE,
}

_NEXT_RESIZING_MODE = {
    ResizingMode.DISABLED: ResizingMode.ONLY_FULLSCREEN_ENABLED,
    ResizingMode.ONLY_FULLSCREEN_ENABLED: ResizingMode.ENABLED,
    ResizingMode.ENABLED: ResizingMode.DISABLED,
}

_NEXT_TPS = {SYNC_WITH_FPS: 30, 30: 60, 60: 120, 120: SYNC_WITH_FPS}


def parse_window_position(value: str) -> tuple[int, int] | None:
    """Parse ``"x,y"`` into a position, or None when the value is empty or malformed."""
    if not value:
        return None
    tokens = value.split(",")
    if len(tokens) != 2 or not all(_POSITION_PART.fullmatch(t) for t in tokens):
        return None
    return int(tokens[0]), int(tokens[1])


def parse_window_size(value: str) -> tuple[int, int] | None:
    """Parse ``"WIDTHxHEIGHT"`` into a size, or None when it does not match."""
    match = _SIZE.fullmatch(value or "")
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def next_screen_scale(scale: float) -> float:
    """The next window scale in the cycle 1, 1.5, 2, 0.75."""
    if scale < 1:
        return 1.0
    if scale < 1.5:
        return 1.5
    if scale < 2:
        return 2.0
    return 0.75


def next_tps(tps: int) -> int:
    """The next ticks-per-second setting: sync with FPS, 30, 60, 120, then around."""
    try:
        return _NEXT_TPS[tps]
    except KeyError:
        raise ValueError(f"unexpected TPS: {tps}") from None


def next_cursor_mode(mode: CursorMode) -> CursorMode:
    return _NEXT_CURSOR_MODE[mode]


def next_resizing_mode(mode: ResizingMode) -> ResizingMode:
    return _NEXT_RESIZING_MODE[mode]


def random_icon_pixels(size: int = ICON_SIZE, rng: random.Random | None = None) -> bytes:
    """RGBA pixels, row by row, of a square icon fading diagonally in a random colour."""
    if rng is None:
        rng = random.Random()
    rf = float(rng.randrange(0x100))
    gf = float(rng.randrange(0x100))
    bf = float(rng.randrange(0x100))
    pixels = bytearray(4 * size * size)
    for j in range(size):
        for i in range(size):
            af = (i + j) / (2 * size)
            if af > 0:
                offset = 4 * (j * size + i)
                pixels[offset:offset + 4] = bytes(
                    (int(rf * af), int(gf * af), int(bf * af), int(af * 0xFF))
                )
    return bytes(pixels)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="windowsize", description="Play with window settings.")
    flag = argparse.BooleanOptionalAction
    parser.add_argument("--fullscreen", action=flag, default=False, help="fullscreen")
    parser.add_argument("--resizable", action=flag, default=False, help="make the window resizable")
    parser.add_argument("--windowposition", default="", help="window position (e.g., 100,200)")
    parser.add_argument("--transparent", action=flag, default=False, help="screen transparent")
    parser.add_argument("--autoadjusting", action=flag, default=False,
                        help="make the game screen auto-adjusting")
    parser.add_argument("--floating", action=flag, default=False, help="make the window floating")
    parser.add_argument("--maximize", action=flag, default=False, help="maximize the window")
    parser.add_argument("--vsync", action=flag, default=True, help="enable vsync")
    parser.add_argument("--autorestore", action=flag, default=False,
                        help="restore the window automatically")
    parser.add_argument("--initfocused", action=flag, default=True,
                        help="whether the window is focused on start")
    parser.add_argument("--minwindowsize", default="", help="minimum window size (e.g., 100x200)")
    parser.add_argument("--maxwindowsize", default="", help="maximum window size (e.g., 1920x1080)")
    parser.add_argument("--graphicslibrary", default="", choices=list(_GRAPHICS_LIBRARIES),
                        help="graphics library (e.g. opengl)")
    parser.add_argument("--runnableonunfocused", action=flag, default=True,
                        help="whether the app is runnable even on unfocused")
    parser.add_argument("--image", help="image file to show")
    return parser


@dataclass
class _WindowState:
    width: float
    height: float
    scale: float = INIT_SCREEN_SCALE
    fullscreen: bool = False
    runnable_on_unfocused: bool = True
    cursor_mode: CursorMode = CursorMode.VISIBLE
    vsync: bool = True
    tps: int = 60
    decorated: bool = True
    floating: bool = False
    resizing_mode: ResizingMode = ResizingMode.DISABLED
    screen_cleared: bool = True
    mouse_passthrough: bool = False
    position: tuple[int, int] | None = None
    maximized: bool = False
    minimized: bool = False
    min_size: tuple[int, int] = (-1, -1)
    max_size: tuple[int, int] = (-1, -1)

    def window_size(self) -> tuple[int, int]:
        return int(self.width * self.scale), int(self.height * self.scale)

    def clamp_size(self, w: int, h: int) -> tuple[int, int]:
        (minw, minh), (maxw, maxh) = self.min_size, self.max_size
        if minw >= 0:
            w = max(w, minw)
        if minh >= 0:
            h = max(h, minh)
        if maxw >= 0:
            w = min(w, maxw)
        if maxh >= 0:
            h = min(h, maxh)
        return w, h


def _sdl_window(pygame):
    try:
        from pygame._sdl2.video import Window

        return Window.from_display_module()
    except (ImportError, AttributeError, pygame.error):
        return None


def _open_window(pygame, state: _WindowState):
    flags = 0
    if state.fullscreen:
        flags |= pygame.FULLSCREEN
    if not state.decorated:
        flags |= pygame.NOFRAME
    if state.resizing_mode is ResizingMode.ENABLED:
        flags |= pygame.RESIZABLE
    size = state.clamp_size(*state.window_size())
    if state.position is not None and not state.fullscreen:
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{state.position[0]},{state.position[1]}"
    try:
        return pygame.display.set_mode(size, flags, vsync=1 if state.vsync else 0)
    except pygame.error:
        return pygame.display.set_mode(size, flags)


def _apply_cursor(pygame, mode: CursorMode) -> None:
    pygame.mouse.set_visible(mode is CursorMode.VISIBLE)
    pygame.event.set_grab(mode is CursorMode.CAPTURED)


def _stand_in_image(pygame):
    image = pygame.Surface((160, 120))
    image.fill((0x30, 0x90, 0x60))
    pygame.draw.circle(image, (0xFF, 0xFF, 0xFF), (80, 60), 40, 4)
    return image


def _icon_surface(pygame, rng: random.Random):
    return pygame.image.frombuffer(random_icon_pixels(ICON_SIZE, rng), (ICON_SIZE, ICON_SIZE), "RGBA")


def _help_text(pygame, state: _WindowState, fps: float, focused: bool) -> str:
    lines = []
    if not state.maximized and state.resizing_mode is ResizingMode.ENABLED:
        lines.append("[M] Maximize the window (only for desktops)")
    if not state.minimized:
        lines.append("[N] Minimize the window (only for desktops)")
    if state.maximized or state.minimized:
        lines.append("[E] Restore the window from maximized/minimized state (only for desktops)")
    ww, wh = pygame.display.get_surface().get_size()
    wx, wy = state.position if state.position is not None else (0, 0)
    cx, cy = pygame.mouse.get_pos()
    (minw, minh), (maxw, maxh) = state.min_size, state.max_size
    tps = "Sync with FPS" if state.tps == SYNC_WITH_FPS else str(state.tps)
    return "\n".join([
        "[Arrow keys] Move the window",
        "[Shift + Arrow keys] Change the window size",
        *lines,
        "[F] Switch the fullscreen state",
        "[U] Switch the runnable-on-unfocused state",
        "[C] Switch the cursor mode (visible, hidden, or captured)",
        "[I] Change the window icon (only for desktops)",
        "[J] Reset the window icon (only for desktops)",
        "[V] Switch the vsync",
        "[T] Switch TPS (ticks per second)",
        "[D] Switch the window decoration (only for desktops)",
        "[L] Switch the window floating state (only for desktops)",
        "[W] Switch whether to skip clearing the screen",
        "[P] Switch whether a mouse cursor passthroughs the window (only for desktops)",
        "[R] Switch the window resizing mode (only for desktops)",
        "",
        f"IsFocused?: {'Yes' if focused else 'No'}",
        f"Window Position: ({wx}, {wy})",
        f"Window Size: ({ww}, {wh})",
        f"Window size limitation: ({minw}, {minh}) - ({maxw}, {maxh})",
        f"Cursor: ({cx}, {cy})",
        f"TPS: Current: {fps:0.2f} / Max: {tps}",
        f"FPS: {fps:0.2f}",
        f"Cursor mode: {state.cursor_mode.value}, Resizing mode: {state.resizing_mode.value}",
        f"Floating: {state.floating}, Mouse passthrough: {state.mouse_passthrough}",
    ])


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    driver = _GRAPHICS_LIBRARIES[args.graphicslibrary]
    if driver is not None:
        os.environ["SDL_RENDER_DRIVER"] = driver

    import pygame

    rng = random.Random()
    state = _WindowState(INIT_SCREEN_WIDTH, INIT_SCREEN_HEIGHT)
    state.position = parse_window_position(args.windowposition)
    state.fullscreen = args.fullscreen
    state.floating = args.floating
    state.vsync = args.vsync
    state.runnable_on_unfocused = args.runnableonunfocused
    if args.resizable or args.maximize or args.autoadjusting:
        state.resizing_mode = ResizingMode.ENABLED
    min_size = parse_window_size(args.minwindowsize)
    max_size = parse_window_size(args.maxwindowsize)
    if min_size is not None:
        state.min_size = min_size
    if max_size is not None:
        state.max_size = max_size
    if min_size is not None or max_size is not None:
        state.resizing_mode = ResizingMode.ENABLED

    pygame.init()
    try:
        info = pygame.display.Info()
        print(f"Screen size in fullscreen: {info.current_w}, {info.current_h}")
        pygame.display.set_icon(_icon_surface(pygame, rng))
        screen = _open_window(pygame, state)
        pygame.display.set_caption("Window Size")
        print(f"Graphics library: {pygame.display.get_driver()}")
        if args.maximize:
            window = _sdl_window(pygame)
            if window is not None:
                window.maximize()
        font = pygame.font.Font(None, 16)
        clock = pygame.time.Clock()
        image = pygame.image.load(args.image).convert() if args.image else _stand_in_image(pygame)
        count = 0
        while True:
            pressed: set[int] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    pressed.add(event.key)
                elif event.type == pygame.VIDEORESIZE:
                    w, h = state.clamp_size(event.w, event.h)
                    if (w, h) != (event.w, event.h):
                        screen = pygame.display.set_mode((w, h), screen.get_flags())
                    if args.autoadjusting:
                        state.width, state.height = w, h
                        state.scale = 1.0
                elif event.type == pygame.WINDOWMAXIMIZED:
                    state.maximized, state.minimized = True, False
                elif event.type == pygame.WINDOWMINIMIZED:
                    state.minimized = True
                elif event.type == pygame.WINDOWRESTORED:
                    state.maximized = state.minimized = False
                elif event.type == pygame.WINDOWMOVED:
                    state.position = (event.x, event.y)

            focused = pygame.key.get_focused()
            if not focused and not state.runnable_on_unfocused:
                clock.tick(10)
                continue

            reopen = False
            mods = pygame.key.get_mods()
            if mods & pygame.KMOD_SHIFT:
                if pygame.K_DOWN in pressed:
                    state.height += SIZE_STEP
                    reopen = True
                if pygame.K_UP in pressed and state.height > SIZE_STEP:
                    state.height -= SIZE_STEP
                    reopen = True
                if pygame.K_LEFT in pressed and state.width > SIZE_STEP:
                    state.width -= SIZE_STEP
                    reopen = True
                if pygame.K_RIGHT in pressed:
                    state.width += SIZE_STEP
                    reopen = True
            else:
                moves = {pygame.K_UP: (0, -SIZE_STEP), pygame.K_DOWN: (0, SIZE_STEP),
                         pygame.K_LEFT: (-SIZE_STEP, 0), pygame.K_RIGHT: (SIZE_STEP, 0)}
                shift = [moves[k] for k in moves if k in pressed]
                if shift:
                    px, py = state.position if state.position is not None else (0, 0)
                    state.position = (px + sum(d[0] for d in shift), py + sum(d[1] for d in shift))
                    window = _sdl_window(pygame)
                    if window is not None:
                        window.position = state.position
                    else:
                        reopen = True
            if pygame.K_s in pressed and not args.autoadjusting:
                ww, wh = screen.get_size()
                current = min(ww / state.width, wh / state.height) if ww and wh else 1.0
                state.scale = next_screen_scale(current)
                reopen = True
            if pygame.K_f in pressed:
                state.fullscreen = not state.fullscreen
                reopen = True
            if pygame.K_u in pressed:
                state.runnable_on_unfocused = not state.runnable_on_unfocused
            if pygame.K_c in pressed:
                state.cursor_mode = next_cursor_mode(state.cursor_mode)
            if pygame.K_v in pressed:
                state.vsync = not state.vsync
                reopen = True
            if pygame.K_t in pressed:
                state.tps = next_tps(state.tps)
            if pygame.K_d in pressed:
                state.decorated = not state.decorated
                reopen = True
            if pygame.K_l in pressed:
                state.floating = not state.floating
            if pygame.K_r in pressed:
                state.resizing_mode = next_resizing_mode(state.resizing_mode)
                reopen = True
            if pygame.K_w in pressed:
                state.screen_cleared = not state.screen_cleared
            if pygame.K_p in pressed:
                state.mouse_passthrough = not state.mouse_passthrough

            restore = False
            if state.maximized or state.minimized:
                if args.autorestore:
                    restore = count % state.tps == 0
                else:
                    restore = pygame.K_e in pressed

            if reopen:
                screen = _open_window(pygame, state)
            _apply_cursor(pygame, state.cursor_mode)
            if pygame.K_m in pressed and state.resizing_mode is ResizingMode.ENABLED:
                window = _sdl_window(pygame)
                if window is not None:
                    window.maximize()
            if pygame.K_n in pressed:
                pygame.display.iconify()
            if restore:
                window = _sdl_window(pygame)
                if window is not None:
                    window.restore()
            if pygame.K_i in pressed:
                pygame.display.set_icon(_icon_surface(pygame, rng))
            if pygame.K_j in pressed:
                pygame.display.set_icon(pygame.Surface((ICON_SIZE, ICON_SIZE), pygame.SRCALPHA))

            count += 1

            if state.screen_cleared:
                screen.fill((0, 0, 0))
            w, h = image.get_size()
            sw, sh = screen.get_size()
            dx = math.cos(2 * math.pi * count / 360) * 20
            dy = math.sin(2 * math.pi * count / 360) * 20
            screen.blit(image, ((sw - w) / 2 + dx, (sh - h) / 2 + dy))
            y = 0
            for line in _help_text(pygame, state, clock.get_fps(), focused).split("\n"):
                screen.blit(font.render(line, True, (255, 255, 255)), (0, y))
                y += font.get_linesize()
            pygame.display.flip()
            clock.tick(0 if state.tps == SYNC_WITH_FPS else state.tps)
    finally:
        pygame.quit()