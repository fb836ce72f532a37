"""Flickering flame particles drawn above an angry eye."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from dolyeyes.canvas import (
    EYE_BACKGROUND_RADIUS,
    FLAME_ORANGE,
    FLAME_RED,
    FLAME_YELLOW,
    Canvas,
    Color,
)

MAX_FLAME_PARTICLES = 12
FLAME_AREA_WIDTH = 200
FLAME_AREA_HEIGHT = 80

_FLAME_COLORS = (FLAME_YELLOW, FLAME_ORANGE, FLAME_RED)


@dataclass
class FlameParticle:
    """One flame blob rising above the eye."""

    x: int
    y: int
    life: float
    speed: float
    color: Color
    size: int
    flicker: float


def _scaled(color: Color, intensity: float) -> Color:
    return Color(*(int(channel * intensity) for channel in color))


def draw_flame_particle(canvas: Canvas, particle: FlameParticle) -> None:
    """Draw a particle as a disc fading from yellow core through orange to red edge."""
    if particle.life <= 0.0:
        return
    radius = int(particle.size * particle.life * particle.flicker)
    if radius <= 0:
        return
    radius_sq = radius * radius
    strength = particle.life * particle.flicker
    for y in range(particle.y - radius, particle.y + radius + 1):
        for x in range(particle.x - radius, particle.x + radius + 1):
            if not (0 <= x < canvas.width and 0 <= y < canvas.height):
                continue
            dx = x - particle.x
            dy = y - particle.y
            dist_sq = dx * dx + dy * dy
            if dist_sq > radius_sq:
                continue
            dist = math.sqrt(dist_sq) / radius
            intensity = (1.0 - dist) * strength
            if dist < 0.3:
                base = FLAME_YELLOW
            elif dist < 0.7:
                base = FLAME_ORANGE
            else:
                base = FLAME_RED
            canvas.set_pixel(x, y, _scaled(base, intensity))


class FlameEffect:
    """A persistent set of flame particles, spawned on the first draw."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[FlameParticle] = []

    def _spawn_position(self, center_x: int, center_y: int) -> tuple[int, int]:
        x = center_x + (self.rng.randrange(FLAME_AREA_WIDTH) - FLAME_AREA_WIDTH // 2)
        y = center_y - EYE_BACKGROUND_RADIUS - 20 + self.rng.randrange(FLAME_AREA_HEIGHT)
        return x, y

    def _spawn(self, center_x: int, center_y: int) -> FlameParticle:
        x, y = self._spawn_position(center_x, center_y)
        life = 0.8 + self.rng.randrange(20) / 100.0
        speed = 0.5 + self.rng.randrange(30) / 100.0
        size = 8 + self.rng.randrange(12)
        flicker = 0.7 + self.rng.randrange(30) / 100.0
        color = _FLAME_COLORS[self.rng.randrange(3)]
        return FlameParticle(x, y, life, speed, color, size, flicker)

    def draw(self, canvas: Canvas, center_x: int, center_y: int, frame_count: int) -> None:
        """Advance every particle by one frame and draw it onto the canvas."""
        if not self.particles:
            self.particles = [self._spawn(center_x, center_y) for _ in range(MAX_FLAME_PARTICLES)]
        ceiling = center_y - EYE_BACKGROUND_RADIUS - 100
        for index, particle in enumerate(self.particles):
            particle.y = int(particle.y - particle.speed)
            particle.life -= 0.02
            particle.flicker = 0.7 + math.sin(frame_count * 0.3 + index) * 0.3
            if particle.life <= 0.0 or particle.y < ceiling:
                particle.x, particle.y = self._spawn_position(center_x, center_y)
                particle.life = 0.8 + self.rng.randrange(20) / 100.0
                particle.size = 8 + self.rng.randrange(12)
            draw_flame_particle(canvas, particle)