# arcadedemos

A collection of small interactive demos built on pygame. Each demo keeps
its logic in plain Python classes and functions that can be driven and
tested without a window, and has a command that opens it in a window.

## Demos

| Command | What it shows |
| --- | --- |
| `arcadedemos-snake` | Snake: arrow keys or WASD to steer, Escape to restart. The snake moves faster once it grows past 10 and past 20 segments. |
| `arcadedemos-stars` | A star field streaming away from the mouse cursor. |
| `arcadedemos-sinewave` | An endless 440 Hz tone generated as 16-bit stereo PCM at 48 kHz. |
| `arcadedemos-typewriter` | Type on the keyboard; Enter and Backspace repeat when held; at most ten lines are kept; the cursor blinks. |
| `arcadedemos-sprites` | 500 bouncing, rotating sprites to start with; Left/Right (or holding the mouse on the left/right half) change how many are shown, in steps of 20 up to 50000. `--hd` runs a 1920x1080 fullscreen variant that quits on `q`. |
| `arcadedemos-touch` | Pinch to zoom, drag to pan, tap to reset the view. The left mouse button acts as a single touch. |
| `arcadedemos-squiral` | Squiral automaton: `r` respawns, `b` toggles the background between black and white, `t` cycles the colour theme. |
| `arcadedemos-tiles` | A 15x15 map drawn from two layers of 16x16 tile indices. |
| `arcadedemos-ui` | Two buttons, a check box and a scrolling log text box that records what was clicked. |
| `arcadedemos-textinput` | Two single-line text fields and one multi-line field, with caret placement by mouse and IME composition. |
| `arcadedemos-windowclosing` | Asks for confirmation (`y`/`n`) before the window closes. |
| `arcadedemos-windowsize` | Live control of window size, position, fullscreen, cursor mode, vsync, TPS, decoration, resizing mode and icon. |

Run any of them by name, for example:

    arcadedemos-snake

`arcadedemos-sprites`, `arcadedemos-touch`, `arcadedemos-tiles` and
`arcadedemos-ui` accept `--image PATH` to use your own picture, tile sheet
(16x16 tiles) or 48x48 widget sheet. `arcadedemos-windowsize` takes
options for its start-up state (`--fullscreen`, `--resizable`,
`--windowposition 100,200`, `--minwindowsize 100x200`,
`--maxwindowsize 1920x1080`, `--graphicslibrary opengl`, and more);
`arcadedemos-windowsize --help` lists them all.

## Using the logic directly

The game state lives in ordinary classes, so it can be stepped without a
display:

```python
import random

from arcadedemos.snake import SnakeGame, Direction
from arcadedemos.sinewave import SineStream
from arcadedemos.windowsize import parse_window_position

game = SnakeGame(random.Random(1))
game.update(Direction.RIGHT, False)
print(game.status_text(60.0))

with SineStream(48000, 440) as stream:
    pcm = stream.read(1024)

print(parse_window_position("100,200"))  # (100, 200)
```

Other building blocks:

- `arcadedemos.stars`: `Star`, `StarField`
- `arcadedemos.typewriter`: `Typewriter`, `repeating_key_pressed`
- `arcadedemos.sprites`: `Sprite`, `SpriteSet`
- `arcadedemos.touch`: `TouchTracker`, `distance`
- `arcadedemos.squiral`: `Automaton`, `Squiral`, `Palette`
- `arcadedemos.tiles`: `iter_draws`, `tile_source_rect`, `tile_dest_position`
- `arcadedemos.ui`: `Rect`, `Button`, `CheckBox`, `TextBox`, `VScrollBar`, `nine_patch_rects`
- `arcadedemos.textinput`: `TextField`
- `arcadedemos.windowclosing`: `ClosingPrompt`
- `arcadedemos.windowsize`: `parse_window_size`, `next_screen_scale`,
  `next_tps`, `next_cursor_mode`, `next_resizing_mode`, `random_icon_pixels`,
  `build_parser`

## What it does not do

- No artwork or fonts are bundled. Without `--image`, the sprite, touch,
  tile and UI demos draw simple stand-in images, and text uses pygame's
  default font.
- In `arcadedemos-windowsize`, `--transparent` is accepted but has no
  effect, and the floating and mouse-passthrough toggles (`l`, `p`) are
  only shown in the on-screen status, not applied to the window.

## Tests

The test suite uses pytest and is installed with the `test` extra:

    pip install .[test]
    pytest