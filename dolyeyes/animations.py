"""Expression animations for a pair of eyes, produced as a stream of frames."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

from dolyeyes.angry import (
    apply_screen_shake,
    draw_angry_blink,
    draw_angry_eye_enhanced,
    draw_squint_overlay,
)
from dolyeyes.canvas import (
    ANGRY_RED,
    BLACK_BG,
    BLUE_IRIS,
    EYE_BACKGROUND_RADIUS,
    LCD_HEIGHT,
    LCD_WIDTH,
    YELLOW_EYELID,
    Canvas,
)
from dolyeyes.eye import draw_cartoon_eye, draw_lid_blink, new_eye_canvas
from dolyeyes.flame import FlameEffect
from dolyeyes.lids import draw_soft_blink

SCREEN_CENTER_X = LCD_WIDTH // 2
SCREEN_CENTER_Y = LCD_HEIGHT // 2

BLINK_STEPS = (0.3, 0.7, 1.0, 0.7, 0.3)
SQUINT_STEPS = (0.2, 0.5, 0.8, 0.5, 0.2)
ANGER_LEVELS = (0.3, 0.6, 0.9, 1.0, 0.8, 0.5, 0.7, 0.9, 0.6, 0.4)

IDLE_MOVES = ((0, 0), (-8, -5), (8, -5), (0, 8), (-12, 0), (12, 0), (0, 0))
HAPPY_MOVES = ((0, 0), (-1, -1), (1, -1), (-1, 1), (1, 1), (0, 0))
ANGRY_MOVES = ((0, 0), (-3, -2), (3, -2), (-3, 2), (3, 2), (0, 0))


class Style(Enum):
    """Which generation of the eye artwork to animate."""

    CLASSIC = "classic"
    SOFT = "soft"
    ENHANCED = "enhanced"


@dataclass(frozen=True)
class Frame:
    """One picture for each eye and how long to show it."""

    left: Canvas
    right: Canvas
    delay_ms: int

    @property
    def delay(self) -> float:
        """The display time in seconds."""
        return self.delay_ms / 1000.0


def _mirrored(delay_ms: int, draw: Callable[..., None], *args) -> Frame:
    """Draw one picture and show it on both eyes."""
    left = new_eye_canvas()
    draw(left, *args)
    return Frame(left, left.copy(), delay_ms)


def _blink(style: Style) -> Callable[[Canvas, float], None]:
    if style is Style.SOFT:
        return draw_soft_blink
    star = style is Style.ENHANCED
    return lambda canvas, progress: draw_lid_blink(canvas, progress, star)


def happy_frames(style: Style = Style.CLASSIC) -> Iterator[Frame]:
    """Open eyes that blink twice; the enhanced style adds a star highlight and jitter."""
    style = Style(style)
    enhanced = style is Style.ENHANCED
    moves = HAPPY_MOVES if enhanced else ((0, 0),)
    blink = _blink(style)
    current = 0
    for i in range(80):
        offset_x, offset_y = moves[current]
        yield _mirrored(80, draw_cartoon_eye, offset_x, offset_y, BLUE_IRIS, True, enhanced)
        if enhanced and i % 3 == 2:
            current = (current + 1) % len(moves)
        if i % 40 == 35:
            for step in BLINK_STEPS:
                yield _mirrored(60, blink, step)


def idle_frames(style: Style = Style.CLASSIC) -> Iterator[Frame]:
    """Eyes glancing around in two cycles, with an occasional full blink."""
    style = Style(style)
    blink = _blink(style)
    for _ in range(2):
        for move, (offset_x, offset_y) in enumerate(IDLE_MOVES):
            for frame in range(20):
                yield _mirrored(70, draw_cartoon_eye, offset_x, offset_y)
                if frame == 15 and move % 4 == 1:
                    yield _mirrored(100, blink, 1.0)


def _sad_pair(pupil_offset_y: int) -> tuple[Canvas, Canvas]:
    left = new_eye_canvas()
    draw_cartoon_eye(left, 0, pupil_offset_y)
    return left, left.copy()


def sad_frames(style: Style = Style.CLASSIC) -> Iterator[Frame]:
    """Eyes looking down while tears run below them."""
    style = Style(style)
    if style is Style.SOFT:
        yield from _soft_sad_frames()
        return

    pupil_offset_y = 12
    for tear_y in range(SCREEN_CENTER_Y + EYE_BACKGROUND_RADIUS + 15, LCD_HEIGHT - 30, 6):
        left, right = _sad_pair(pupil_offset_y)
        left.draw_tear(SCREEN_CENTER_X - 30, tear_y)
        right.draw_tear(SCREEN_CENTER_X + 30, tear_y)
        yield Frame(left, right, 150)
    for _ in range(30):
        yield Frame(*_sad_pair(pupil_offset_y), 100)


def _soft_sad_frames() -> Iterator[Frame]:
    pupil_offset_y = 20
    for _ in range(20):
        yield Frame(*_sad_pair(pupil_offset_y), 100)

    tear_start = SCREEN_CENTER_Y + EYE_BACKGROUND_RADIUS + 5
    for tear_y in range(tear_start, LCD_HEIGHT - 20, 4):
        left, right = _sad_pair(pupil_offset_y)
        for trail_y in range(tear_start, tear_y + 1, 8):
            left.draw_tear(SCREEN_CENTER_X - 25, trail_y, 4)
        for trail_y in range(tear_start, tear_y + 1, 8):
            right.draw_tear(SCREEN_CENTER_X + 25, trail_y, 4)
        left.draw_tear(SCREEN_CENTER_X - 25, tear_y, 6)
        right.draw_tear(SCREEN_CENTER_X + 25, tear_y, 6)
        yield Frame(left, right, 120)

    for _ in range(25):
        left, right = _sad_pair(pupil_offset_y)
        for trail_y in range(tear_start, LCD_HEIGHT - 20, 6):
            left.draw_tear(SCREEN_CENTER_X - 25, trail_y, 3)
            right.draw_tear(SCREEN_CENTER_X + 25, trail_y, 3)
        yield Frame(left, right, 150)


def _draw_angry_closed(canvas: Canvas) -> None:
    canvas.clear(BLACK_BG)
    canvas.fill_ellipse(SCREEN_CENTER_X, SCREEN_CENTER_Y, EYE_BACKGROUND_RADIUS, 4, YELLOW_EYELID)


def angry_frames(
    style: Style = Style.CLASSIC, rng: random.Random | None = None
) -> Iterator[Frame]:
    """Angry eyes; the enhanced style uses ``rng`` for flames and screen shake."""
    style = Style(style)
    if style is Style.CLASSIC:
        for i in range(50):
            yield _mirrored(120, draw_cartoon_eye, 0, 0, ANGRY_RED, False)
            if i % 15 == 10:
                yield _mirrored(200, _blink(style), 0.4)
    elif style is Style.SOFT:
        for _ in range(30):
            yield _mirrored(100, draw_cartoon_eye, 0, 0, ANGRY_RED, False)
        for i in range(40):
            yield _mirrored(80, draw_angry_blink, 0.4 + 0.2 * math.sin(i * 0.3))
        for _ in range(10):
            yield _mirrored(150, _draw_angry_closed)
        for _ in range(20):
            yield _mirrored(120, draw_cartoon_eye, 0, 0, ANGRY_RED, False)
    else:
        yield from _enhanced_angry_frames(rng if rng is not None else random.Random())


def _enhanced_angry_frames(rng: random.Random) -> Iterator[Frame]:
    flame = FlameEffect(rng)

    def pair(offset_x: int, offset_y: int, anger: float, frame_count: int):
        left = new_eye_canvas()
        right = new_eye_canvas()
        draw_angry_eye_enhanced(left, offset_x, offset_y, anger, flame, frame_count)
        draw_angry_eye_enhanced(right, offset_x, offset_y, anger, flame, frame_count)
        return left, right

    current = 0
    for i in range(80):
        anger = ANGER_LEVELS[i % len(ANGER_LEVELS)]
        offset_x, offset_y = ANGRY_MOVES[current]

        left, right = pair(offset_x, offset_y, anger, i)
        shake = int(anger * 3)
        if shake > 0:
            apply_screen_shake(left, shake, rng)
            apply_screen_shake(right, shake, rng)
        yield Frame(left, right, int(120 - anger * 40))

        if i % 2 == 1:
            current = (current + 1) % len(ANGRY_MOVES)

        if i % 8 == 6:
            for step in SQUINT_STEPS:
                left, right = pair(offset_x, offset_y, anger, i)
                draw_squint_overlay(left, step)
                draw_squint_overlay(right, step)
                yield Frame(left, right, 80)

        if i % 25 == 20:
            for burst in range(5):
                left, right = pair(offset_x, offset_y, 1.0, i + burst)
                apply_screen_shake(left, 5, rng)
                apply_screen_shake(right, 5, rng)
                yield Frame(left, right, 60)