# dolyeyes

Draws cartoon robot eyes into 24-bit RGB frames sized for 240×240 screens
and produces expression animations for a pair of eyes: happy, idle, sad and
angry. Everything is plain Python with no dependencies.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Drawing a single eye

```python
from dolyeyes.eye import new_eye_canvas, draw_cartoon_eye
from dolyeyes.canvas import Color

canvas = new_eye_canvas()
draw_cartoon_eye(canvas, 0, 12, Color(0, 150, 200), True, False)
frame = canvas.to_bytes()   # 240 * 240 * 3 bytes, RGB, row by row
```

## Animations

Each expression is a generator of `Frame` objects. A frame holds a `left`
and a `right` `Canvas` and the time to show them, as `delay_ms` and, in
seconds, `delay`.

```python
import random
from dolyeyes.animations import Style, happy_frames, angry_frames

for frame in happy_frames(Style.ENHANCED):
    left_rgb = frame.left.to_bytes()
    right_rgb = frame.right.to_bytes()
    ...  # show them for frame.delay seconds

frames = list(angry_frames(Style.ENHANCED, random.Random(0)))
```

`Style` selects the artwork:

- `Style.CLASSIC`: round eye with a yellow lid lowering from the top.
- `Style.SOFT`: curved upper and lower lids, longer tear trails, and an angry
  sequence that squints and briefly closes.
- `Style.ENHANCED`: star highlight and small eye jitter when happy; when
  angry, a dark red background, shrinking pupil, eyebrows, flames, squints
  and screen shake. Pass a `random.Random` to make it repeatable.

The generators are `happy_frames`, `idle_frames`, `sad_frames` and
`angry_frames(style, rng)`.

## Modules

- `dolyeyes.canvas`: `Color` and `Canvas`. `set_pixel`, `get_pixel`,
  `clear`, `fill_circle`, `draw_ring`, `fill_ellipse`, `draw_star`,
  `draw_tear`, `copy` and `to_bytes`. Drawing outside the frame is clipped.
- `dolyeyes.flame`: `FlameParticle`, `FlameEffect` and `draw_flame_particle`,
  the flame particles above an angry eye.
- `dolyeyes.eye`: `new_eye_canvas`, `draw_cartoon_eye`, `draw_lid_blink` and
  `draw_closed_eye`.
- `dolyeyes.lids`: `draw_soft_blink`, `draw_soft_closed_eye` and
  `draw_eyelid_arc`.
- `dolyeyes.angry`: `draw_angry_blink`, `draw_angry_eyebrow`,
  `draw_angry_eye_enhanced`, `draw_squint_overlay` and `apply_screen_shake`.
- `dolyeyes.animations`: `Style`, `Frame` and the frame generators.

## What it does not do

The package only produces frames. It has no command-line program, does not
drive any screen, simulated display or window, and does not convert frames
to other colour depths. Showing the frames and waiting between them is left
to the caller.