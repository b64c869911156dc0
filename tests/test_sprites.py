import random

import pytest

from arcadedemos.sprites import (
    INITIAL_SPRITES,
    MAX_ANGLE,
    MAX_SPRITES,
    MIN_SPRITES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPRITE_STEP,
    Sprite,
    SpriteSet,
    status_text,
)


def make_sprite(**overrides):
    values = dict(image_width=16, image_height=16, x=50, y=60, vx=1, vy=-1, angle=3)
    values.update(overrides)
    return Sprite(**values)


def test_sprite_moves_by_velocity():
    sprite = make_sprite()
    sprite.update(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert (sprite.x, sprite.y) == (50 + 1, 60 - 1)
    assert sprite.angle == 3 + 1


def test_sprite_bounces_off_left_edge():
    sprite = make_sprite(x=0, vx=-1)
    sprite.update(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert sprite.x == 1
    assert sprite.vx == 1


def test_sprite_bounces_off_right_edge():
    max_x = SCREEN_WIDTH - 16
    sprite = make_sprite(x=max_x - 1, vx=1)
    sprite.update(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert sprite.x == max_x
    assert sprite.vx == -1
    sprite.update(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert sprite.x == max_x - 1


def test_sprite_bounces_off_top_and_bottom():
    top = make_sprite(y=0, vy=-1)
    top.update(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert top.vy == 1
    bottom = make_sprite(y=SCREEN_HEIGHT - 16, vy=1)
    bottom.update(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert bottom.vy == -1
    assert bottom.y < SCREEN_HEIGHT - 16


def test_sprite_angle_wraps():
    sprite = make_sprite(angle=MAX_ANGLE - 1)
    sprite.update(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert sprite.angle == 0


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_sprite_stays_on_screen(seed):
    rng = random.Random(seed)
    sprite = make_sprite(
        x=rng.randrange(SCREEN_WIDTH - 16),
        y=rng.randrange(SCREEN_HEIGHT - 16),
        vx=rng.choice([-1, 1]),
        vy=rng.choice([-1, 1]),
    )
    for _ in range(2000):
        sprite.update(SCREEN_WIDTH, SCREEN_HEIGHT)
        assert 0 <= sprite.x <= SCREEN_WIDTH - 16
        assert 0 <= sprite.y <= SCREEN_HEIGHT - 16
        assert 0 <= sprite.angle < MAX_ANGLE


def test_sprite_set_initial_state():
    sprites = SpriteSet(16, 16, SCREEN_WIDTH, SCREEN_HEIGHT, random.Random(7), False)
    assert sprites.num == INITIAL_SPRITES
    assert len(sprites.sprites) == MAX_SPRITES
    assert len(sprites.visible()) == INITIAL_SPRITES
    for sprite in sprites.sprites[:1000]:
        assert 0 <= sprite.x < SCREEN_WIDTH - 16
        assert 0 <= sprite.y < SCREEN_HEIGHT - 16
        assert sprite.vx in (-1, 1)
        assert sprite.vy in (-1, 1)
        assert 0 <= sprite.angle < MAX_ANGLE


def test_sprite_set_is_deterministic_for_a_seed():
    a = SpriteSet(16, 16, SCREEN_WIDTH, SCREEN_HEIGHT, random.Random(5), False)
    b = SpriteSet(16, 16, SCREEN_WIDTH, SCREEN_HEIGHT, random.Random(5), False)
    assert a.sprites[:100] == b.sprites[:100]


def test_adjust_clamps_to_limits():
    sprites = SpriteSet(16, 16, SCREEN_WIDTH, SCREEN_HEIGHT, random.Random(1), False)
    assert sprites.adjust(SPRITE_STEP) == INITIAL_SPRITES + SPRITE_STEP
    assert sprites.adjust(-10**6) == MIN_SPRITES
    assert sprites.adjust(10**6) == MAX_SPRITES
    assert len(sprites.visible()) == MAX_SPRITES


def test_update_only_moves_visible_sprites():
    sprites = SpriteSet(16, 16, SCREEN_WIDTH, SCREEN_HEIGHT, random.Random(2), False)
    hidden_before = [(s.x, s.y, s.angle) for s in sprites.sprites[INITIAL_SPRITES:]]
    visible_before = [s.angle for s in sprites.visible()]
    sprites.update()
    assert [(s.x, s.y, s.angle) for s in sprites.sprites[INITIAL_SPRITES:]] == hidden_before
    assert [s.angle for s in sprites.visible()] == [(a + 1) % MAX_ANGLE for a in visible_before]


def test_update_all_moves_every_sprite():
    sprites = SpriteSet(16, 16, SCREEN_WIDTH, SCREEN_HEIGHT, random.Random(3), True)
    before = [s.angle for s in sprites.sprites]
    sprites.update()
    assert [s.angle for s in sprites.sprites] == [(a + 1) % MAX_ANGLE for a in before]


def test_status_text_mentions_count_and_quit():
    assert "Num of sprites: 500" in status_text(60.0, 60.0, 500)
    assert "Press Q to quit" not in status_text(60.0, 60.0, 500)
    assert status_text(60.0, 60.0, 500, hd=True).endswith("Press Q to quit")