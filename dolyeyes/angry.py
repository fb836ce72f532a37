"""Angry expressions: a tight red-iris blink, eyebrows, the enhanced angry eye, squint and shake."""

from __future__ import annotations

import random

from dolyeyes.canvas import (
    ANGRY_BG,
    ANGRY_RED,
    BLACK_PUPIL,
    BLUE_IRIS,
    EYE_BACKGROUND_RADIUS,
    IRIS_RING_WIDTH,
    PUPIL_RADIUS,
    WHITE_EYE,
    YELLOW_EYELID,
    Canvas,
    Color,
)
from dolyeyes.eye import draw_cartoon_eye
from dolyeyes.flame import FlameEffect

EYELID_RADIUS_X = EYE_BACKGROUND_RADIUS + 10
EYELID_RADIUS_Y = EYE_BACKGROUND_RADIUS
UPPER_LID_SHARE = 0.55
LOWER_LID_SHARE = 0.45
LID_REACH = 1.9
LID_WIDTH_SCALE = 1.2
LID_CURVE_SHIFT = 0.2
LID_CURVE_SCALE = 2.5
CONNECTION_START = 0.6
CONNECTION_MAX_HEIGHT = 15

EYEBROW_RAISE = 25
EYEBROW_THICKNESS = 8
EYEBROW_SLANT = 12

SQUINT_REACH = 0.6


def _center(canvas: Canvas) -> tuple[int, int]:
    return canvas.width // 2, canvas.height // 2


def _lid_columns(canvas: Canvas, center_x: int) -> range:
    return range(
        max(center_x - EYELID_RADIUS_X, 0),
        min(center_x + EYELID_RADIUS_X, canvas.width - 1) + 1,
    )


def _paint_sharp_lid(canvas: Canvas, rows: range, row_depth, height: int) -> None:
    """Paint a sharp curved lid over ``rows``; ``row_depth`` is each row's distance from the lid edge."""
    if height <= 0:
        return
    center_x, _ = _center(canvas)
    columns = _lid_columns(canvas, center_x)
    for y in rows:
        if not 0 <= y < canvas.height:
            continue
        dy = row_depth(y) / height
        curve = (dy - LID_CURVE_SHIFT) ** 2 * LID_CURVE_SCALE
        for x in columns:
            dx = (x - center_x) / EYELID_RADIUS_X
            if dx * dx * LID_WIDTH_SCALE + curve <= 1.0:
                canvas.set_pixel(x, y, YELLOW_EYELID)


def draw_angry_blink(canvas: Canvas, blink_progress: float) -> None:
    """Draw a red-iris eye without highlight, narrowed by sharp upper and lower lids.

    ``blink_progress`` runs from 0.0 (open) to 1.0 (closed); the lids meet in
    the middle once it passes 0.6.
    """
    draw_cartoon_eye(canvas, 0, 0, ANGRY_RED, False)
    if blink_progress <= 0.0:
        return

    center_x, center_y = _center(canvas)
    top = center_y - EYELID_RADIUS_Y
    bottom = center_y + EYELID_RADIUS_Y

    upper_height = int(blink_progress * UPPER_LID_SHARE * EYELID_RADIUS_Y * LID_REACH)
    _paint_sharp_lid(canvas, range(top, top + upper_height), lambda y: y - top, upper_height)

    lower_height = int(blink_progress * LOWER_LID_SHARE * EYELID_RADIUS_Y * LID_REACH)
    _paint_sharp_lid(
        canvas, range(bottom - lower_height, bottom + 1), lambda y: bottom - y, lower_height
    )

    if blink_progress > CONNECTION_START:
        connection = (blink_progress - CONNECTION_START) / (1.0 - CONNECTION_START)
        half = int(connection * CONNECTION_MAX_HEIGHT) // 2
        columns = _lid_columns(canvas, center_x)
        for y in range(center_y - half, center_y + half + 1):
            if not 0 <= y < canvas.height:
                continue
            for x in columns:
                canvas.set_pixel(x, y, YELLOW_EYELID)


def draw_angry_eyebrow(canvas: Canvas, center_x: int, center_y: int, is_left: bool) -> None:
    """Draw a thick black eyebrow above the eye, slanting down towards the nose."""
    eyebrow_y = center_y - EYE_BACKGROUND_RADIUS - EYEBROW_RAISE
    if is_left:
        start_x = center_x - EYE_BACKGROUND_RADIUS + 10
        end_x = center_x - 20
    else:
        start_x = center_x + 20
        end_x = center_x + EYE_BACKGROUND_RADIUS - 10
    span = end_x - start_x
    for x in range(start_x, end_x + 1):
        if not 0 <= x < canvas.width:
            continue
        progress = (x - start_x) / span if span else 0.0
        offset_y = int(progress * EYEBROW_SLANT)
        for y in range(eyebrow_y, eyebrow_y + EYEBROW_THICKNESS + 1):
            if 0 <= y < canvas.height:
                canvas.set_pixel(x, y + offset_y, BLACK_PUPIL)


def _blend_channel(start: int, end: int, amount: float) -> int:
    return max(0, min(255, int(start + (end - start) * amount)))


def draw_angry_eye_enhanced(
    canvas: Canvas,
    pupil_offset_x: int,
    pupil_offset_y: int,
    anger_level: float,
    flame: FlameEffect | None = None,
    frame_count: int = 0,
) -> None:
    """Redraw the canvas as an angry eye on a dark red background.

    The pupil shrinks and the iris turns from blue to red as ``anger_level``
    rises from 0.0 to 1.0. A negative horizontal pupil offset marks the left
    eye for the eyebrow. When ``flame`` is given it is advanced and drawn.
    """
    center_x, center_y = _center(canvas)
    pupil_x = center_x + pupil_offset_x
    pupil_y = center_y + pupil_offset_y

    canvas.clear(ANGRY_BG)
    canvas.fill_circle(center_x, center_y, EYE_BACKGROUND_RADIUS, WHITE_EYE)

    pupil_radius = int(PUPIL_RADIUS * (0.7 + 0.3 * (1.0 - anger_level)))
    canvas.fill_circle(pupil_x, pupil_y, pupil_radius, BLACK_PUPIL)

    iris = Color(
        *(
            _blend_channel(calm, angry, anger_level)
            for calm, angry in zip(BLUE_IRIS, ANGRY_RED)
        )
    )
    canvas.draw_ring(pupil_x, pupil_y, pupil_radius, pupil_radius + IRIS_RING_WIDTH, iris)

    draw_angry_eyebrow(canvas, center_x, center_y, pupil_offset_x < 0)

    if flame is not None:
        flame.draw(canvas, center_x, center_y, frame_count)


def draw_squint_overlay(canvas: Canvas, squint_progress: float) -> None:
    """Cover the top of the eye disc with the angry background colour.

    At 1.0 the cover reaches 60% of the eye radius down from the top of the eye.
    """
    center_x, center_y = _center(canvas)
    radius = EYE_BACKGROUND_RADIUS
    radius_sq = radius * radius
    height = int(squint_progress * radius * SQUINT_REACH)
    top = center_y - radius
    columns = range(max(center_x - radius, 0), min(center_x + radius, canvas.width - 1) + 1)
    for y in range(top, top + height):
        if not 0 <= y < canvas.height:
            continue
        dy_sq = (y - center_y) ** 2
        for x in columns:
            if (x - center_x) ** 2 + dy_sq <= radius_sq:
                canvas.set_pixel(x, y, ANGRY_BG)


def apply_screen_shake(
    canvas: Canvas, intensity: int, rng: random.Random | None = None
) -> tuple[int, int]:
    """Shift the picture by a random offset of at most ``intensity`` pixels per axis.

    Each pixel takes the colour found at its position plus the offset; pixels
    whose source lies outside the frame keep their colour. Returns the offset.
    """
    if intensity <= 0:
        return 0, 0
    rng = rng if rng is not None else random.Random()
    shake_x = rng.randrange(intensity * 2 + 1) - intensity
    shake_y = rng.randrange(intensity * 2 + 1) - intensity

    snapshot = canvas.to_bytes()
    width, height = canvas.width, canvas.height
    for y in range(max(0, -shake_y), min(height, height - shake_y)):
        source_y = y + shake_y
        for x in range(max(0, -shake_x), min(width, width - shake_x)):
            source = (source_y * width + x + shake_x) * 3
            target = (y * width + x) * 3
            pixel = snapshot[source:source + 3]
            if pixel != snapshot[target:target + 3]:
                canvas.set_pixel(x, y, Color(*pixel))
    return shake_x, shake_y