"""An endless 16-bit stereo sine-wave stream, played through the mixer."""

from __future__ import annotations

import argparse
import math
import struct

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
SAMPLE_RATE = 48000
FREQUENCY = 440

_AMPLITUDE = 32767
_FRAME_BYTES = 4


class SineStream:
    """An infinite stream of little-endian 16-bit stereo frames of a sine wave."""

    def __init__(self, sample_rate: int = SAMPLE_RATE, frequency: int = FREQUENCY) -> None:
        self.period = sample_rate // frequency
        if self.period <= 0:
            raise ValueError("frequency must not exceed the sample rate")
        self.closed = False
        self._position = 0
        self._remaining = b""

    def __enter__(self) -> SineStream:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def read(self, size: int) -> bytes:
        """Return at most ``size`` bytes; leftovers of a partial frame come first."""
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        if size < 0:
            raise ValueError("size must not be negative")

        if self._remaining:
            chunk, self._remaining = self._remaining[:size], self._remaining[size:]
            return chunk

        padded = size + (-size) % _FRAME_BYTES
        start = self._position // _FRAME_BYTES
        samples = []
        for p in range(start, start + padded // _FRAME_BYTES):
            sample = int(math.sin(2 * math.pi * p / self.period) * _AMPLITUDE)
            samples += (sample, sample)
        data = struct.pack(f"<{len(samples)}h", *samples)

        self._position = (self._position + padded) % (self.period * _FRAME_BYTES)
        self._remaining = data[size:]
        return data[:size]

    def close(self) -> None:
        self.closed = True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sinewave", description="Play a 440 Hz tone.")
    parser.parse_args(argv)

    import pygame

    pygame.mixer.pre_init(SAMPLE_RATE, -16, 2)
    pygame.init()
    chunk = SAMPLE_RATE // 10 * _FRAME_BYTES
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Sine Wave")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        channel = None
        with SineStream() as stream:
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return 0
                if channel is None:
                    channel = pygame.mixer.Sound(buffer=stream.read(chunk)).play()
                elif channel.get_queue() is None:
                    channel.queue(pygame.mixer.Sound(buffer=stream.read(chunk)))

                screen.fill((0, 0, 0))
                lines = (
                    f"TPS: {clock.get_fps():0.2f}",
                    "This is an example using infinite audio stream.",
                )
                y = 0
                for line in lines:
                    screen.blit(font.render(line, True, (255, 255, 255)), (0, y))
                    y += font.get_linesize()
                pygame.display.flip()
                clock.tick(60)
    finally:
        pygame.quit()