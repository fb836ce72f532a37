import random
from itertools import islice

import pytest

from dolyeyes.angry import draw_angry_blink
from dolyeyes.animations import (
    Frame,
    Style,
    angry_frames,
    happy_frames,
    idle_frames,
    sad_frames,
)
from dolyeyes.canvas import ANGRY_BG, ANGRY_RED, BLACK_BG, BLUE_IRIS, YELLOW_EYELID
from dolyeyes.eye import draw_cartoon_eye, draw_lid_blink, new_eye_canvas
from dolyeyes.lids import draw_soft_blink


def _drawn(draw, *args):
    canvas = new_eye_canvas()
    draw(canvas, *args)
    return canvas.to_bytes()


def _delays(frames):
    return [frame.delay_ms for frame in frames]


def test_frame_delay_in_seconds():
    canvas = new_eye_canvas()
    frame = Frame(canvas, canvas, 80)
    assert frame.delay == pytest.approx(0.08)


def test_happy_classic_counts_and_blink():
    frames = list(happy_frames(Style.CLASSIC))
    delays = _delays(frames)
    assert delays.count(80) == 80
    assert delays.count(60) == 2 * len((0.3, 0.7, 1.0, 0.7, 0.3))
    assert frames[0].left.to_bytes() == _drawn(draw_cartoon_eye)
    blink_index = delays.index(60) + 2
    assert frames[blink_index].left.to_bytes() == _drawn(draw_lid_blink, 1.0, False)
    assert all(f.left.to_bytes() == f.right.to_bytes() for f in frames)


def test_happy_soft_uses_soft_blink():
    frames = list(happy_frames(Style.SOFT))
    blink_index = _delays(frames).index(60)
    assert frames[blink_index].left.to_bytes() == _drawn(draw_soft_blink, 0.3)


def test_happy_enhanced_star_and_jitter():
    frames = list(islice(happy_frames(Style.ENHANCED), 4))
    assert frames[0].left.to_bytes() == _drawn(draw_cartoon_eye, 0, 0, BLUE_IRIS, True, True)
    assert frames[3].left.to_bytes() == _drawn(draw_cartoon_eye, -1, -1, BLUE_IRIS, True, True)


def test_happy_accepts_style_value():
    first = next(happy_frames("classic"))
    assert first.delay_ms == 80


def test_invalid_style_rejected():
    with pytest.raises(ValueError):
        next(happy_frames("nonsense"))


def test_idle_frames():
    frames = list(idle_frames(Style.CLASSIC))
    delays = _delays(frames)
    assert delays.count(70) == 2 * 7 * 20
    blinks = [f for f in frames if f.delay_ms == 100]
    assert blinks
    expected = _drawn(draw_lid_blink, 1.0, False)
    assert all(f.left.to_bytes() == expected for f in blinks)
    assert frames[20].left.to_bytes() == _drawn(draw_cartoon_eye, -8, -5)


def test_sad_classic_looks_down():
    frames = list(sad_frames(Style.CLASSIC))
    assert len(frames) == 30
    assert set(_delays(frames)) == {100}
    assert frames[0].left.to_bytes() == _drawn(draw_cartoon_eye, 0, 12)


def test_sad_soft_phases():
    frames = list(sad_frames(Style.SOFT))
    delays = _delays(frames)
    assert delays.count(100) == 20
    assert delays.count(150) == 25
    assert frames[0].right.to_bytes() == _drawn(draw_cartoon_eye, 0, 20)


def test_angry_classic():
    frames = list(angry_frames(Style.CLASSIC))
    delays = _delays(frames)
    assert delays.count(120) == 50
    assert frames[0].left.to_bytes() == _drawn(draw_cartoon_eye, 0, 0, ANGRY_RED, False)
    squints = [f for f in frames if f.delay_ms == 200]
    assert len(squints) == 3
    assert squints[0].left.to_bytes() == _drawn(draw_lid_blink, 0.4, False)


def test_angry_soft_phases():
    frames = list(angry_frames(Style.SOFT))
    delays = _delays(frames)
    assert delays.count(100) == 30
    assert delays.count(80) == 40
    assert delays.count(150) == 10
    assert delays.count(120) == 20
    assert frames[30].left.to_bytes() == _drawn(draw_angry_blink, 0.4)
    closed = frames[70].left
    assert closed.get_pixel(120, 120) == YELLOW_EYELID
    assert closed.get_pixel(120, 100) == BLACK_BG


def test_angry_enhanced_is_deterministic_with_seed():
    first = list(islice(angry_frames(Style.ENHANCED, random.Random(7)), 3))
    second = list(islice(angry_frames(Style.ENHANCED, random.Random(7)), 3))
    assert [f.left.to_bytes() for f in first] == [f.left.to_bytes() for f in second]
    assert [f.right.to_bytes() for f in first] == [f.right.to_bytes() for f in second]
    for frame in first:
        assert 80 <= frame.delay_ms < 120
        assert frame.left.get_pixel(0, 239) == ANGRY_BG
        assert frame.left.get_pixel(120, 120) != ANGRY_BG