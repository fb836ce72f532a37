import random

import pytest

from dolyeyes.angry import (
    apply_screen_shake,
    draw_angry_blink,
    draw_angry_eye_enhanced,
    draw_angry_eyebrow,
    draw_squint_overlay,
)
from dolyeyes.canvas import (
    ANGRY_BG,
    ANGRY_RED,
    BLACK_PUPIL,
    BLUE_IRIS,
    WHITE_EYE,
    YELLOW_EYELID,
    Canvas,
    Color,
)
from dolyeyes.eye import new_eye_canvas
from dolyeyes.flame import FlameEffect

CX = 120
CY = 120


def count_color(canvas, color):
    data = canvas.to_bytes()
    target = bytes(color)
    return sum(1 for i in range(0, len(data), 3) if data[i:i + 3] == target)


class FixedRng:
    def __init__(self, values):
        self.values = list(values)

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


def test_angry_blink_open_has_red_iris_and_no_highlight():
    canvas = new_eye_canvas()
    draw_angry_blink(canvas, 0.0)
    assert canvas.get_pixel(CX + 80, CY) == ANGRY_RED
    assert canvas.get_pixel(CX - 30, CY - 30) == BLACK_PUPIL
    assert canvas.get_pixel(CX, CY) == BLACK_PUPIL
    assert count_color(canvas, YELLOW_EYELID) == 0


def test_angry_blink_fully_closed_joins_lids_in_middle():
    canvas = new_eye_canvas()
    draw_angry_blink(canvas, 1.0)
    assert canvas.get_pixel(CX, CY) == YELLOW_EYELID
    assert canvas.get_pixel(CX - 100, CY) == YELLOW_EYELID


def test_angry_blink_below_connection_leaves_center_open():
    canvas = new_eye_canvas()
    draw_angry_blink(canvas, 0.5)
    assert canvas.get_pixel(CX, CY) == BLACK_PUPIL
    assert count_color(canvas, YELLOW_EYELID) > 0


def test_angry_blink_covers_more_as_it_closes():
    counts = []
    for progress in (0.2, 0.5, 0.8, 1.0):
        canvas = new_eye_canvas()
        draw_angry_blink(canvas, progress)
        counts.append(count_color(canvas, YELLOW_EYELID))
    assert counts == sorted(counts)
    assert counts[0] < counts[-1]


def test_left_eyebrow_slants_down_towards_the_nose():
    canvas = Canvas(240, 240)
    canvas.clear(WHITE_EYE)
    draw_angry_eyebrow(canvas, 120, 200, True)
    assert canvas.get_pixel(10, 55) == BLACK_PUPIL
    assert canvas.get_pixel(10, 63) == BLACK_PUPIL
    assert canvas.get_pixel(10, 64) == WHITE_EYE
    assert canvas.get_pixel(100, 67) == BLACK_PUPIL
    assert canvas.get_pixel(100, 66) == WHITE_EYE
    assert canvas.get_pixel(150, 60) == WHITE_EYE


def test_right_eyebrow_starts_past_the_center():
    canvas = Canvas(240, 240)
    canvas.clear(WHITE_EYE)
    draw_angry_eyebrow(canvas, 120, 200, False)
    assert canvas.get_pixel(140, 55) == BLACK_PUPIL
    assert canvas.get_pixel(100, 55) == WHITE_EYE


def test_eyebrow_above_screen_draws_nothing():
    canvas = new_eye_canvas()
    canvas.clear(WHITE_EYE)
    before = canvas.to_bytes()
    draw_angry_eyebrow(canvas, CX, CY, True)
    assert canvas.to_bytes() == before


def test_enhanced_eye_calm_keeps_blue_iris():
    canvas = new_eye_canvas()
    draw_angry_eye_enhanced(canvas, 0, 0, 0.0)
    assert canvas.get_pixel(0, 0) == ANGRY_BG
    assert canvas.get_pixel(CX + 80, CY) == BLUE_IRIS
    assert canvas.get_pixel(CX, CY) == BLACK_PUPIL


def test_enhanced_eye_full_anger_shrinks_pupil_and_reddens_iris():
    canvas = new_eye_canvas()
    draw_angry_eye_enhanced(canvas, 0, 0, 1.0)
    assert canvas.get_pixel(CX + 60, CY) == ANGRY_RED
    assert canvas.get_pixel(CX + 80, CY) == WHITE_EYE
    assert count_color(canvas, BLUE_IRIS) == 0


def test_enhanced_eye_angrier_means_smaller_pupil():
    calm = new_eye_canvas()
    draw_angry_eye_enhanced(calm, 0, 0, 0.2)
    furious = new_eye_canvas()
    draw_angry_eye_enhanced(furious, 0, 0, 0.9)
    assert count_color(furious, BLACK_PUPIL) < count_color(calm, BLACK_PUPIL)


def test_enhanced_eye_with_flame_spawns_particles():
    canvas = new_eye_canvas()
    flame = FlameEffect(random.Random(7))
    draw_angry_eye_enhanced(canvas, 0, 0, 0.5, flame, 3)
    assert len(flame.particles) == 12
    assert canvas.get_pixel(CX, CY) == BLACK_PUPIL


def test_squint_zero_changes_nothing():
    canvas = new_eye_canvas()
    draw_angry_eye_enhanced(canvas, 0, 0, 0.5)
    before = canvas.to_bytes()
    draw_squint_overlay(canvas, 0.0)
    assert canvas.to_bytes() == before


def test_squint_covers_top_of_eye_only():
    canvas = new_eye_canvas()
    canvas.clear(WHITE_EYE)
    draw_squint_overlay(canvas, 1.0)
    assert canvas.get_pixel(CX, 1) == ANGRY_BG
    assert canvas.get_pixel(CX, 70) == ANGRY_BG
    assert canvas.get_pixel(CX, 80) == WHITE_EYE
    assert canvas.get_pixel(0, 0) == WHITE_EYE


def test_shake_zero_intensity_is_identity():
    canvas = new_eye_canvas()
    draw_angry_eye_enhanced(canvas, 0, 0, 0.5)
    before = canvas.to_bytes()
    assert apply_screen_shake(canvas, 0, random.Random(1)) == (0, 0)
    assert canvas.to_bytes() == before


def test_shake_moves_picture_by_returned_offset():
    canvas = Canvas(240, 240)
    marker = Color(10, 20, 30)
    canvas.set_pixel(50, 60, marker)
    offset = apply_screen_shake(canvas, 2, FixedRng([4, 0]))
    assert offset == (2, -2)
    assert canvas.get_pixel(48, 62) == marker
    assert canvas.get_pixel(50, 60) == Color(0, 0, 0)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_shake_offset_stays_within_intensity(seed):
    canvas = new_eye_canvas()
    draw_angry_eye_enhanced(canvas, 0, 0, 1.0)
    shake_x, shake_y = apply_screen_shake(canvas, 3, random.Random(seed))
    assert -3 <= shake_x <= 3
    assert -3 <= shake_y <= 3
    assert canvas.get_pixel(CX - shake_x, CY - shake_y) == BLACK_PUPIL