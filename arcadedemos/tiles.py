"""A tile map: two layers of tiles cut out of a tile sheet and drawn on a grid."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Mapping, Sequence

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 240
TILE_SIZE = 16
X_COUNT = SCREEN_WIDTH // TILE_SIZE
Y_COUNT = SCREEN_HEIGHT // TILE_SIZE

_STAND_IN_TILES_PER_ROW = 25
_STAND_IN_ROWS = 13


def _layer(fill: int, cells: Mapping[tuple[int, int], int]) -> tuple[int, ...]:
    """A full layer of ``fill`` tiles with the (column, row) cells overridden."""
    tiles = [fill] * (X_COUNT * Y_COUNT)
    for (column, row), tile in cells.items():
        tiles[row * X_COUNT + column] = tile
    return tuple(tiles)


_GROUND_DETAILS = {
    (1, 3): 218, (11, 3): 218, (13, 3): 244,
    (2, 7): 244,
    (9, 8): 219, (13, 8): 219,
    (1, 13): 218, (11, 13): 244,
}

_TREE_CELLS: dict[tuple[int, int], int] = {
    (column, row): 25 * row + 1 + (column - 5)
    for row in range(1, 6)
    for column in range(5, 11)
}
_TREE_CELLS.update(
    {(column, 6): tile for column, tile in zip(range(5, 11), (303, 303, 245, 242, 303, 303))}
)
for _row in range(7, Y_COUNT):
    _TREE_CELLS[(7, _row)] = 245
    _TREE_CELLS[(8, _row)] = 242

LAYERS: tuple[tuple[int, ...], ...] = (
    _layer(243, _GROUND_DETAILS),
    _layer(0, _TREE_CELLS),
)

Rect = tuple[int, int, int, int]


def tile_source_rect(tile: int, tiles_per_row: int) -> Rect:
    """The (x, y, width, height) of a tile in a sheet holding ``tiles_per_row`` per row."""
    if tiles_per_row <= 0:
        raise ValueError("the tile sheet must hold at least one tile per row")
    row, column = divmod(tile, tiles_per_row)
    return (column * TILE_SIZE, row * TILE_SIZE, TILE_SIZE, TILE_SIZE)


def tile_dest_position(index: int) -> tuple[int, int]:
    """The screen position of the ``index``-th cell of a layer."""
    row, column = divmod(index, X_COUNT)
    return (column * TILE_SIZE, row * TILE_SIZE)


def iter_draws(
    layers: Sequence[Sequence[int]] = LAYERS, tiles_per_row: int = _STAND_IN_TILES_PER_ROW
) -> Iterator[tuple[Rect, tuple[int, int]]]:
    """Yield (source rect, destination) for every tile, layer after layer."""
    for layer in layers:
        for index, tile in enumerate(layer):
            yield tile_source_rect(tile, tiles_per_row), tile_dest_position(index)


def _stand_in_sheet(pygame):
    sheet = pygame.Surface((_STAND_IN_TILES_PER_ROW * TILE_SIZE, _STAND_IN_ROWS * TILE_SIZE))
    for tile in range(_STAND_IN_TILES_PER_ROW * _STAND_IN_ROWS):
        x, y, w, h = tile_source_rect(tile, _STAND_IN_TILES_PER_ROW)
        shade = (tile * 37 % 200 + 40, tile * 91 % 200 + 40, tile * 53 % 200 + 40)
        sheet.fill(shade, (x, y, w, h))
    return sheet


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tiles", description="Draw a tile map.")
    parser.add_argument("--image", help="tile sheet image made of 16x16 tiles")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SCALED)
        pygame.display.set_caption("Tiles")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        sheet = pygame.image.load(args.image).convert_alpha() if args.image else _stand_in_sheet(pygame)
        tiles_per_row = sheet.get_width() // TILE_SIZE
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
            screen.fill((0, 0, 0))
            for source, dest in iter_draws(LAYERS, tiles_per_row):
                screen.blit(sheet, dest, source)
            screen.blit(font.render(f"TPS: {clock.get_fps():0.2f}", True, (255, 255, 255)), (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()