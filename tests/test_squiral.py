import random

import pytest

from arcadedemos.squiral import (
    BLACK,
    BLOCKER,
    PALETTES,
    WHITE,
    Automaton,
    Palette,
    Squiral,
)


def make(width=40, height=30, count=3, seed=7):
    return Automaton(width, height, count, random.Random(seed))


def test_reset_walls_in_the_canvas():
    auto = make()
    for x in range(auto.width):
        assert auto.color_map[x][0] == BLOCKER
        assert auto.color_map[x][auto.height - 1] == BLOCKER
    for y in range(auto.height):
        assert auto.color_map[0][y] == BLOCKER
        assert auto.color_map[auto.width - 1][y] == BLOCKER
    assert auto.color_map[5][5] == BLACK
    assert len(auto.squirals) == 3


def test_default_count_follows_width():
    auto = Automaton(64, 10, rng=random.Random(1))
    assert len(auto.squirals) == 64 // 32


def test_too_small_canvas_rejected():
    with pytest.raises(ValueError):
        Automaton(4, 10, 1, random.Random(1))


def test_set_pixel_records_change():
    auto = make()
    color = PALETTES[0].colors[2]
    auto.set_pixel(3, 4, color)
    assert auto.color_map[3][4] == color
    assert auto.changes == [(3, 4, color)]


def test_spawn_on_free_canvas():
    auto = make(count=0)
    squiral = Squiral()
    squiral.spawn(auto)
    assert squiral.dead is False
    assert 2 <= squiral.x <= auto.width - 3
    assert 2 <= squiral.y <= auto.height - 3
    assert 1 <= squiral.speed <= 5
    assert squiral.color in auto.palette.colors
    assert squiral.color == auto.palette.colors[auto.color_cycle]


def test_spawn_on_full_canvas_dies():
    auto = make(count=0)
    color = PALETTES[1].colors[0]
    for x in range(1, auto.width - 1):
        for y in range(1, auto.height - 1):
            auto.set_pixel(x, y, color)
    squiral = Squiral()
    squiral.spawn(auto)
    assert squiral.dead is True


def test_step_moves_to_adjacent_cell():
    auto = make(count=0)
    color = PALETTES[0].colors[0]
    squiral = Squiral(speed=1, x=20, y=15, direction=0, rot=0, color=color)
    squiral.step(auto)
    assert squiral.dead is False
    assert abs(squiral.x - 20) + abs(squiral.y - 15) == 1
    assert auto.color_map[squiral.x][squiral.y] == color
    assert auto.changes == [(squiral.x, squiral.y, color)]


def test_enclosed_squiral_dies():
    auto = make(count=0)
    wall = PALETTES[2].colors[0]
    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        auto.set_pixel(10 + dx, 10 + dy, wall)
    auto.changes.clear()
    squiral = Squiral(speed=1, x=10, y=10, color=PALETTES[0].colors[0])
    squiral.step(auto)
    assert squiral.dead is True
    assert auto.changes == []


def test_dead_squiral_does_not_move():
    auto = make(count=0)
    squiral = Squiral(speed=1, x=10, y=10, color=PALETTES[0].colors[0], dead=True)
    squiral.step(auto)
    assert (squiral.x, squiral.y) == (10, 10)
    assert auto.changes == []


def test_many_steps_keep_invariants():
    auto = make(width=50, height=40, count=4, seed=11)
    for _ in range(200):
        auto.step()
    allowed = set(auto.palette.colors) | {auto.background}
    for x in range(1, auto.width - 1):
        for y in range(1, auto.height - 1):
            assert auto.color_map[x][y] in allowed
    for x in range(auto.width):
        assert auto.color_map[x][0] == BLOCKER
    cells = [(x, y) for x, y, _ in auto.changes]
    assert len(cells) == len(set(cells))
    for x, y, color in auto.changes:
        assert auto.color_map[x][y] == color
    assert auto.changes


def test_toggle_background():
    auto = make()
    auto.toggle_background()
    assert auto.background == WHITE
    assert auto.color_map[5][5] == WHITE
    assert auto.color_map[0][0] == BLOCKER
    auto.toggle_background()
    assert auto.background == BLACK
    assert auto.color_map[5][5] == BLACK


def test_cycle_palette_wraps():
    auto = make()
    auto.cycle_palette()
    assert auto.selected_palette == 1
    assert auto.palette is PALETTES[1]
    for _ in range(len(PALETTES) - 1):
        auto.cycle_palette()
    assert auto.selected_palette == 0


def test_palettes_hold_five_colors():
    auto = make()
    names = []
    for _ in range(len(PALETTES)):
        palette = auto.palette
        assert isinstance(palette, Palette)
        assert len(palette.colors) == 5
        names.append(palette.name)
        auto.cycle_palette()
    assert names[0] == "sand dunes"
    assert len(set(names)) == 3
    assert auto.palette.name == "sand dunes"