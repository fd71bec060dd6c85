# pancake_run

An endless side-scrolling runner built on pygame. A pancake runs across a
track of tiles that scrolls to the left. New tiles are added at the right
edge as the track moves; now and then a gap of 150 to 300 pixels is left
before the next tile. Four background layers scroll at different speeds
for a parallax effect.

## Installing

```
pip install .
```

This installs `pygame`, which provides the window, drawing and input.

## Playing

```
pancake-run
pancake-run --resources path/to/Resources
```

`--resources` names the directory that holds the `Images` folder. It
defaults to `Resources` in the current directory. The game expects these
bitmaps:

```
Resources/Images/BackGround/BackGround.bmp
Resources/Images/BackGround/BackGroundObject1.bmp
Resources/Images/BackGround/BackGroundObject2.bmp
Resources/Images/BackGround/BackGroundObject3.bmp
Resources/Images/Object/PanCakeRun.bmp
Resources/Images/Object/PanCakeSlide.bmp
Resources/Images/Object/PanCakeJump.bmp
Resources/Images/Object/PanCakeDoubleJump.bmp
Resources/Images/Object/PanCakeLanding.bmp
Resources/Images/Object/tile.bmp
```

If a file is missing or cannot be read, `pancake_run.image.ImageLoadError`
is raised when the game starts. Each image is scaled to the size the game
uses for it. Magenta (255, 0, 255) is the transparent colour for the
sprites, the tiles and the three foreground layers.

### Controls

| Key                  | Action                                           |
|----------------------|--------------------------------------------------|
| Space                | Jump; press again in the air for a double jump   |
| Shift (left or right)| Hold while on the ground to slide                |
| Escape               | Quit (closing the window also quits)             |

The hitboxes of the player and the tiles are drawn as red outlines over the
scene.

## What it does not do

- No bitmaps come with the package. You have to supply the resource
  directory shown above.
- There is no score, no lives and no game-over screen. A pancake that
  misses a tile falls through the gap and keeps falling. The track goes on
  scrolling until you quit.

## Using the pieces

The building blocks can be used on their own:

- `pancake_run.geometry`: `point_make`, `rect_make`, `rect_make_center`
  (centred rectangle; odd sizes lose a pixel) and `intersect_rect` (the
  overlap as a `pygame.Rect`, or `None`). It also has the drawing helpers
  `draw_line`, `draw_rect`, `rectangle_make`, `ellipse_make` and
  `ellipse_make_center`, which fill with white and outline in black.
- `pancake_run.rng.RandomFunction`: integer and float ranges from a seeded
  generator (`get_int`, `get_from_int_to`, `get_float`,
  `get_from_float_to`). Without a seed it is seeded from the clock.
  Empty integer ranges raise `ValueError`.
- `pancake_run.keys.KeyManager`: `is_once_key_down` and `is_once_key_up`
  fire once per press or release. `is_stay_key_down` and `is_toggle_key`
  report the current state. It takes any "is pressed" and "is toggled"
  functions and falls back to pygame's keyboard state. The pygame toggle
  fallback knows Caps Lock and Num Lock.
- `pancake_run.image.GImage`: a bitmap loaded with `load` or
  `load_frames` (sprite sheet), or created blank with `init_empty`. It has
  colour-key transparency (`set_trans_color`), region drawing (`render`),
  frame drawing (`frame_render`) and wrap-around tiling over an area
  (`loop_render`). `LoadKind` and `ImageInfo` describe a loaded image.
- `pancake_run.image_manager.ImageManager`: loads images once and looks
  them up by key (`add_image`, `add_frame_image`, `find_image`). It can
  release them all (`delete_all`, `release`), and `frame_render` and
  `loop_render` draw by key.
- `pancake_run.game_node.GameNode`: the base game object. It holds the
  back buffer, the 10 ms frame timer and event handling (`handle_event`,
  with `running` and `needs_redraw` flags). It also has the window
  constants `WINSIZE_X` and `WINSIZE_Y`, 1067 by 600.
- `pancake_run.main_game.MainGame`: the game itself. Call `update` once
  per tick and `render(surface)` to draw. `PlayerState` lists the player's
  states: running, sliding, jumping, double jumping and landing.
  `main(argv=None)` is the entry point behind `pancake-run`.

## Running the tests

```
pip install .[test]
pytest
```