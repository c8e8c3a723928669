"""Drawing surface abstraction used by the scene.

The simulation only talks to :class:`Canvas`; :class:`PygameCanvas` is the
backend used by the window loop, tests substitute a recording fake.
"""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple

import pygame

Color = Tuple[int, int, int]
Point = Tuple[float, float]


class Canvas(Protocol):
    def fill_polygon(self, points: Sequence[Point], color: Color, alpha: int = 255) -> None:
        ...

    def fill_circle(self, center: Point, radius: float, color: Color, alpha: int = 255) -> None:
        ...


class PygameCanvas:
    """:class:`Canvas` implementation drawing straight onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def fill_polygon(self, points: Sequence[Point], color: Color, alpha: int = 255) -> None:
        if len(points) < 3:
            return
        if alpha >= 255:
            pygame.draw.polygon(self.surface, color, points)
            return
        overlay, origin = self._overlay_for(points, pad=1)
        pygame.draw.polygon(overlay, (*color, alpha), [(x - origin[0], y - origin[1]) for x, y in points])
        self.surface.blit(overlay, origin)

    def fill_circle(self, center: Point, radius: float, color: Color, alpha: int = 255) -> None:
        if radius <= 0 or alpha <= 0:
            return
        if alpha >= 255:
            pygame.draw.circle(self.surface, color, center, radius)
            return
        size = int(radius * 2) + 2
        overlay = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(overlay, (*color, alpha), (size / 2, size / 2), radius)
        self.surface.blit(overlay, (center[0] - size / 2, center[1] - size / 2))

    @staticmethod
    def _overlay_for(points: Sequence[Point], pad: int) -> Tuple[pygame.Surface, Tuple[int, int]]:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        left = int(min(xs)) - pad
        top = int(min(ys)) - pad
        width = int(max(xs)) - left + pad + 1
        height = int(max(ys)) - top + pad + 1
        return pygame.Surface((max(1, width), max(1, height)), pygame.SRCALPHA), (left, top)
