"""The basic cartoon eye: open, blinking under a yellow lid, and closed."""

from __future__ import annotations

from math import isqrt

from dolyeyes.canvas import (
    BLACK_BG,
    BLACK_PUPIL,
    BLUE_IRIS,
    EYE_BACKGROUND_RADIUS,
    HIGHLIGHT_OFFSET_X,
    HIGHLIGHT_OFFSET_Y,
    HIGHLIGHT_RADIUS,
    IRIS_RING_WIDTH,
    LCD_HEIGHT,
    LCD_WIDTH,
    PUPIL_RADIUS,
    WHITE_EYE,
    WHITE_HIGHLIGHT,
    YELLOW_EYELID,
    Canvas,
    Color,
)

CLOSED_EYE_HALF_HEIGHT = 8


def new_eye_canvas() -> Canvas:
    """Return a blank canvas the size of one eye display."""
    return Canvas(LCD_WIDTH, LCD_HEIGHT)


def _center(canvas: Canvas) -> tuple[int, int]:
    return canvas.width // 2, canvas.height // 2


def draw_cartoon_eye(
    canvas: Canvas,
    pupil_offset_x: int = 0,
    pupil_offset_y: int = 0,
    iris_color: Color = BLUE_IRIS,
    show_highlight: bool = True,
    star_highlight: bool = False,
) -> None:
    """Redraw the canvas as an open eye: white ball, black pupil, iris ring, highlight."""
    center_x, center_y = _center(canvas)
    pupil_x = center_x + pupil_offset_x
    pupil_y = center_y + pupil_offset_y

    canvas.clear(BLACK_BG)
    canvas.fill_circle(center_x, center_y, EYE_BACKGROUND_RADIUS, WHITE_EYE)
    canvas.fill_circle(pupil_x, pupil_y, PUPIL_RADIUS, BLACK_PUPIL)
    canvas.draw_ring(pupil_x, pupil_y, PUPIL_RADIUS, PUPIL_RADIUS + IRIS_RING_WIDTH, iris_color)

    if not show_highlight:
        return
    highlight_x = pupil_x + HIGHLIGHT_OFFSET_X
    highlight_y = pupil_y + HIGHLIGHT_OFFSET_Y
    if star_highlight:
        canvas.draw_star(highlight_x, highlight_y, HIGHLIGHT_RADIUS * 2, WHITE_HIGHLIGHT)
    else:
        canvas.fill_circle(highlight_x, highlight_y, HIGHLIGHT_RADIUS, WHITE_HIGHLIGHT)


def draw_lid_blink(canvas: Canvas, blink_progress: float, star_highlight: bool = True) -> None:
    """Draw an open eye with a yellow lid lowered from the top.

    ``blink_progress`` runs from 0.0 (fully open) to 1.0 (lid covers the whole eye).
    """
    draw_cartoon_eye(canvas, 0, 0, BLUE_IRIS, True, star_highlight)

    center_x, center_y = _center(canvas)
    radius = EYE_BACKGROUND_RADIUS
    radius_sq = radius * radius
    lid_height = int(blink_progress * radius * 2)
    top = center_y - radius

    for y in range(top, top + lid_height):
        if not 0 <= y < canvas.height:
            continue
        rest = radius_sq - (y - center_y) ** 2
        if rest < 0:
            continue
        half = min(isqrt(rest), radius)
        for x in range(max(center_x - half, 0), min(center_x + half, canvas.width - 1) + 1):
            canvas.set_pixel(x, y, YELLOW_EYELID)


def draw_closed_eye(canvas: Canvas) -> None:
    """Redraw the canvas as a closed eye: a thin yellow ellipse on black."""
    center_x, center_y = _center(canvas)
    canvas.clear(BLACK_BG)
    canvas.fill_ellipse(
        center_x, center_y, EYE_BACKGROUND_RADIUS, CLOSED_EYE_HALF_HEIGHT, YELLOW_EYELID
    )