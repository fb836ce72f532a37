"""Soft, curved eyelids: a two-lid blink, a closed eye and an eyelid arc."""

from __future__ import annotations

import math

from dolyeyes.canvas import (
    BLACK_BG,
    EYE_BACKGROUND_RADIUS,
    YELLOW_EYELID,
    Canvas,
)
from dolyeyes.eye import draw_cartoon_eye

EYELID_RADIUS_X = EYE_BACKGROUND_RADIUS + 10
EYELID_RADIUS_Y = EYE_BACKGROUND_RADIUS
UPPER_LID_SHARE = 0.6
LOWER_LID_SHARE = 0.4
LID_REACH = 1.8
LID_CURVE_SHIFT = 0.3
LID_CURVE_SCALE = 2.0
CONNECTION_START = 0.8
CONNECTION_MAX_HEIGHT = 20

CLOSED_EYE_WIDTH = EYE_BACKGROUND_RADIUS + 15
CLOSED_EYE_HEIGHT = 12


def _center(canvas: Canvas) -> tuple[int, int]:
    return canvas.width // 2, canvas.height // 2


def _paint_lid(canvas: Canvas, rows: range, row_depth, height: int) -> None:
    """Paint a curved lid over ``rows``; ``row_depth`` gives each row's distance from the lid edge."""
    if height <= 0:
        return
    center_x, _ = _center(canvas)
    x_start = max(center_x - EYELID_RADIUS_X, 0)
    x_stop = min(center_x + EYELID_RADIUS_X, canvas.width - 1) + 1
    for y in rows:
        if not 0 <= y < canvas.height:
            continue
        dy = row_depth(y) / height
        curve = (dy - LID_CURVE_SHIFT) ** 2 * LID_CURVE_SCALE
        for x in range(x_start, x_stop):
            dx = (x - center_x) / EYELID_RADIUS_X
            if dx * dx + curve <= 1.0:
                canvas.set_pixel(x, y, YELLOW_EYELID)


def draw_soft_blink(canvas: Canvas, blink_progress: float) -> None:
    """Draw an open eye closed partway by an upper and a lower curved lid.

    ``blink_progress`` runs from 0.0 (fully open) to 1.0 (fully closed); the
    upper lid takes 60% of the travel and the lower lid 40%.
    """
    draw_cartoon_eye(canvas)
    if blink_progress <= 0.0:
        return

    center_x, center_y = _center(canvas)
    top = center_y - EYELID_RADIUS_Y
    bottom = center_y + EYELID_RADIUS_Y

    upper_height = int(blink_progress * UPPER_LID_SHARE * EYELID_RADIUS_Y * LID_REACH)
    _paint_lid(canvas, range(top, top + upper_height), lambda y: y - top, upper_height)

    lower_height = int(blink_progress * LOWER_LID_SHARE * EYELID_RADIUS_Y * LID_REACH)
    _paint_lid(
        canvas, range(bottom - lower_height, bottom + 1), lambda y: bottom - y, lower_height
    )

    if blink_progress > CONNECTION_START:
        connection = (blink_progress - CONNECTION_START) / (1.0 - CONNECTION_START)
        half = int(connection * CONNECTION_MAX_HEIGHT) // 2
        x_start = max(center_x - EYELID_RADIUS_X, 0)
        x_stop = min(center_x + EYELID_RADIUS_X, canvas.width - 1) + 1
        for y in range(center_y - half, center_y + half + 1):
            if not 0 <= y < canvas.height:
                continue
            for x in range(x_start, x_stop):
                canvas.set_pixel(x, y, YELLOW_EYELID)


def draw_soft_closed_eye(canvas: Canvas) -> None:
    """Redraw the canvas as a closed eye: a wide yellow ellipse thickened above and below."""
    center_x, center_y = _center(canvas)
    canvas.clear(BLACK_BG)
    canvas.fill_ellipse(center_x, center_y, CLOSED_EYE_WIDTH, CLOSED_EYE_HEIGHT, YELLOW_EYELID)
    canvas.fill_ellipse(
        center_x, center_y - 3, CLOSED_EYE_WIDTH - 5, CLOSED_EYE_HEIGHT - 3, YELLOW_EYELID
    )
    canvas.fill_ellipse(
        center_x, center_y + 3, CLOSED_EYE_WIDTH - 5, CLOSED_EYE_HEIGHT - 3, YELLOW_EYELID
    )


def draw_eyelid_arc(
    canvas: Canvas,
    center_x: int,
    center_y: int,
    radius_x: int,
    radius_y: int,
    start_angle: float,
    end_angle: float,
    is_upper: bool,
    thickness: int,
) -> None:
    """Draw a yellow band along an elliptical arc.

    Angles are in radians, measured from the positive x axis with y pointing
    down the screen, in the range [0, 2π). The band covers pixels whose
    normalised elliptical distance lies in [0.9, 1 + thickness / radius_y].
    """
    if radius_x <= 0 or radius_y <= 0:
        raise ValueError(f"arc radii must be positive, got {radius_x} and {radius_y}")
    full_turn = 2 * math.pi
    outer_limit = 1.0 + thickness / radius_y
    y_start = max(center_y - radius_y - thickness, 0)
    y_stop = min(center_y + radius_y + thickness, canvas.height - 1) + 1
    x_start = max(center_x - radius_x - thickness, 0)
    x_stop = min(center_x + radius_x + thickness, canvas.width - 1) + 1
    for y in range(y_start, y_stop):
        dy = float(y - center_y)
        for x in range(x_start, x_stop):
            dx = float(x - center_x)
            angle = math.atan2(dy, dx)
            if angle < 0:
                angle += full_turn
            distance = math.sqrt(dx * dx / (radius_x * radius_x) + dy * dy / (radius_y * radius_y))
            in_range = start_angle <= angle <= end_angle
            if is_upper and not in_range:
                in_range = start_angle - full_turn <= angle <= end_angle - full_turn
            if in_range and 0.9 <= distance <= outer_limit:
                canvas.set_pixel(x, y, YELLOW_EYELID)