"""Draws a :class:`FishGeometry` onto any canvas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.body import FishGeometry
from .shapes import bezier_points, closed_catmull_rom, ellipse_points

if TYPE_CHECKING:  # pragma: no cover - imported for type hints only
    from .canvas import Canvas


def draw_fish(canvas: "Canvas", geometry: FishGeometry) -> None:
    for fin in geometry.pectoral_fins + geometry.ventral_fins:
        canvas.fill_polygon(ellipse_points(fin), fin.color)

    canvas.fill_polygon(closed_catmull_rom(geometry.tail), geometry.fin_color)
    canvas.fill_polygon(closed_catmull_rom(geometry.outline), geometry.body_color)

    front, back = geometry.dorsal_fin
    # The return curve starts where the first one ends; drop the duplicate.
    canvas.fill_polygon(bezier_points(front) + bezier_points(back)[1:], geometry.fin_color)

    for eye in geometry.eyes:
        canvas.fill_circle((eye.center.x, eye.center.y), eye.width / 2.0, eye.color)
