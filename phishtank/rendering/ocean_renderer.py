"""
Cosmetic ocean backdrop for the fish tank.

- Verticale gradient van aqua naar diep teal, gecached per venstergrootte.
- Golvende rimpellijnen die met het frame meebewegen.
- Pulserende sparkles, geplaatst met de RNG van de scene.

Niets hiervan raakt de simulatie; de loop tekent de gradient vóór de vissen
en de rimpels en sparkles erna.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Tuple

import pygame

from ..config.constants import (
    OCEAN_BOTTOM_COLOR,
    OCEAN_TOP_COLOR,
    RIPPLE_ALPHA,
    RIPPLE_COLOR,
    RIPPLE_SPACING,
    SPARKLE_COLOR,
)
from ..utils.math_utils import lerp

Color = Tuple[int, int, int]


def lerp_color(a: Color, b: Color, t: float) -> Color:
    return (
        int(lerp(a[0], b[0], t)),
        int(lerp(a[1], b[1], t)),
        int(lerp(a[2], b[2], t)),
    )


def ripple_offset(x: float, y: float, frame: int) -> float:
    """Vertical displacement of a ripple line at column ``x``."""

    return (
        math.sin(x * 0.015 + frame * 0.01 + y * 0.02) * 18
        + math.sin(x * 0.03 + frame * 0.02) * 9
    )


def sparkle_pulse(time_s: float, offset: float) -> float:
    """Pulse phase in [0, 1] for a sparkle."""

    return (math.sin(time_s * 2 + offset) + 1) * 0.5


@dataclass(frozen=True)
class Sparkle:
    x: float
    y: float
    offset: float


class OceanRenderer:
    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random,
        sparkle_count: int = 200,
        *,
        top_color: Color = OCEAN_TOP_COLOR,
        bottom_color: Color = OCEAN_BOTTOM_COLOR,
    ) -> None:
        self.top_color = top_color
        self.bottom_color = bottom_color
        self._rng = rng
        self._sparkle_count = sparkle_count
        self.w = 0
        self.h = 0
        self._static_bg: pygame.Surface = pygame.Surface((1, 1))
        self.sparkles: List[Sparkle] = []
        self.resize(width, height)

    @property
    def static_background(self) -> pygame.Surface:
        return self._static_bg

    def resize(self, width: int, height: int) -> None:
        """Rebuild the cached gradient and scatter sparkles over the new area."""

        self.w = max(1, int(width))
        self.h = max(1, int(height))
        self._static_bg = pygame.Surface((self.w, self.h))
        self._fill_gradient(self._static_bg)
        self.sparkles = [
            Sparkle(
                self._rng.uniform(0, self.w),
                self._rng.uniform(0, self.h),
                self._rng.uniform(0, 1000),
            )
            for _ in range(self._sparkle_count)
        ]

    # ------------------------------------------------------------------ #
    #  BUILD BACKGROUND
    # ------------------------------------------------------------------ #

    def gradient_color(self, y: int) -> Color:
        t = y / max(1, self.h - 1)
        return lerp_color(self.top_color, self.bottom_color, t)

    def _fill_gradient(self, target: pygame.Surface) -> None:
        for y in range(self.h):
            pygame.draw.line(target, self.gradient_color(y), (0, y), (self.w, y))

    # ------------------------------------------------------------------ #
    #  PER FRAME
    # ------------------------------------------------------------------ #

    def draw_background(self, surface: pygame.Surface) -> None:
        surface.blit(self._static_bg, (0, 0))

    def draw_water_lines(self, surface: pygame.Surface, frame: int) -> None:
        overlay = pygame.Surface((self.w, self.h), pygame.SRCALPHA)
        color = (*RIPPLE_COLOR, RIPPLE_ALPHA)
        for y in range(-50, self.h + 100, RIPPLE_SPACING):
            points = [(x, y + ripple_offset(x, y, frame)) for x in range(0, self.w + 40, 40)]
            if len(points) >= 2:
                pygame.draw.lines(overlay, color, False, points, 1)
        surface.blit(overlay, (0, 0))

    def draw_sparkles(self, surface: pygame.Surface, time_s: float) -> None:
        overlay = pygame.Surface((self.w, self.h), pygame.SRCALPHA)
        for sparkle in self.sparkles:
            pulse = sparkle_pulse(time_s, sparkle.offset)
            size = 1 + pulse * 3
            alpha = int(25 + pulse * 60)
            pygame.draw.circle(overlay, (*SPARKLE_COLOR, alpha), (sparkle.x, sparkle.y), size / 2)
        surface.blit(overlay, (0, 0))
