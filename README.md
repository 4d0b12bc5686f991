# bundlebash

Bix's Bundle Bash is a small arcade game. Bix runs around a field scattered with
spinning, bouncing apples and bananas. Hold the left mouse button to send Bix
towards the pointer. When Bix comes within reach of a fruit, Bix eats it and it
bursts into a shower of coloured particles that fall under gravity and fade away.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
bundlebash
```

This opens a resizable 1280×720 window and starts the game. Close the window to
quit. Options:

- `--width N`, `--height N`: window size in pixels (positive integers).
- `--frames N`: stop after drawing this many frames.

The window shows the field from directly above and is centred on Bix. Bix, the
fruit and the particles are drawn as flat shapes: circles for Bix and the fruit,
small squares for the particles, and round shadows on the ground.

## What it does not do

There are no 3D models, textures, shaders or lighting, and no model animation
playback. The game keeps animation clocks (`Idle`, `Run`, `Eat`) and camera
position values in its state, but the window only draws the flat top-down view
described above. There is no sound, scoring or saving.

## How it is put together

The game runs on a small entity-component-system in `bundlebash.ecs`:

- `Registry` holds entities and their components. Use `spawn`, `set`, `get`,
  `has`, `alive`, `destroy` and `query` to work with them, `defer` and `flush`
  to queue work until later, and `set_singleton` / `singleton` for world-wide
  values such as the camera or the pointer.
- `World` runs systems in two phases (`Phase.FIXED` and `Phase.RENDER`), added
  with `add_system`. `World.update(frame_time)` runs fixed-phase systems in
  steps of 1/60 s however long the frame was, then runs the render phase once
  with the interpolation factor between the last two fixed steps, and returns
  that factor.

`bundlebash.world.create_world()` builds a `World` with every system already
registered:

- `bundlebash.interpolation`: keeps the previous transform and works out
  smooth render positions and rotations.
- `bundlebash.gameplay`: moving towards the held pointer, spinning, bouncing
  and eating.
- `bundlebash.particles`: turns an `Explosion` into particles and moves them
  under gravity until they expire.
- `bundlebash.render`: camera follow, camera placement and animation timing.
  `compute_shadows(world)` projects shadow casters onto the ground, nearest to
  the camera target first, at most 64 of them.

`bundlebash.game.populate(world, fruit_count)` fills a world with the camera,
the ground, Bix and the fruit, and returns Bix's entity.
`bundlebash.game.TopDownView` draws a world onto a pygame surface and maps
screen pixels to ground positions with `screen_to_ground`.
`bundlebash.game.run_game(width, height, title, max_frames)` opens the window
and runs the loop, returning the number of frames drawn.

Components such as `WorldTransform`, `MoveTo`, `Bounce`, `Pointer` and
`Particle`, and the `Vector3` and `Quaternion` math types, are in
`bundlebash.components`. `bundlebash.util.seed(value)` makes the random fruit
placement and particle sprays reproducible.

A headless session with no window, steering Bix with a pointer held above the
ground and pointing straight down:

```python
from bundlebash import util
from bundlebash.components import Pointer, Vector3
from bundlebash.game import populate
from bundlebash.world import create_world

util.seed(1)
world = create_world()
populate(world, 200)
world.set_singleton(
    Pointer(down=True, position=Vector3(3.0, 1.0, 4.0), direction=Vector3(0.0, -1.0, 0.0))
)
for _ in range(120):
    world.update(1 / 60)
```