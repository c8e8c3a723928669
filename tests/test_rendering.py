"""Tests for curve tessellation, fish drawing and the pygame backdrop."""

from __future__ import annotations

import math
import random

import pytest

from phishtank.config.constants import BODY_COLOR, EYE_COLOR, FIN_COLOR, OCEAN_BOTTOM_COLOR, OCEAN_TOP_COLOR
from phishtank.entities.body import BezierSegment, CreatureBody, Ellipse
from phishtank.physics.vector_math import Vector2
from phishtank.rendering.fish_renderer import draw_fish
from phishtank.rendering.shapes import bezier_points, closed_catmull_rom, ellipse_points

from .canvas_helpers import RecordingCanvas


class TestShapes:
    def test_catmull_rom_passes_through_control_points(self):
        square = [Vector2(0.0, 0.0), Vector2(10.0, 0.0), Vector2(10.0, 10.0), Vector2(0.0, 10.0)]
        samples = closed_catmull_rom(square, steps=5)
        assert len(samples) == 20
        for index, point in enumerate(square):
            assert samples[index * 5] == pytest.approx((point.x, point.y))

    def test_catmull_rom_degenerate_input(self):
        points = [Vector2(1.0, 2.0), Vector2(3.0, 4.0)]
        assert closed_catmull_rom(points) == [(1.0, 2.0), (3.0, 4.0)]

    def test_bezier_includes_end_points(self):
        segment = BezierSegment(Vector2(0.0, 0.0), Vector2(1.0, 5.0), Vector2(2.0, 5.0), Vector2(3.0, 0.0))
        points = bezier_points(segment, steps=8)
        assert len(points) == 9
        assert points[0] == (0.0, 0.0)
        assert points[-1] == pytest.approx((3.0, 0.0))
        assert points[4] == pytest.approx((1.5, 3.75))

    def test_ellipse_is_rotated_about_its_center(self):
        ellipse = Ellipse(Vector2(5.0, 5.0), 20.0, 10.0, math.pi / 2, FIN_COLOR)
        points = ellipse_points(ellipse, segments=4)
        assert len(points) == 4
        assert points[0] == pytest.approx((5.0, 15.0))
        assert points[1] == pytest.approx((0.0, 5.0))


class TestDrawFish:
    def test_draw_order_and_colours(self):
        canvas = RecordingCanvas()
        draw_fish(canvas, CreatureBody(Vector2(200.0, 200.0), 0.5).geometry())

        kinds = [call[0] for call in canvas.calls]
        assert kinds == ["polygon"] * 7 + ["circle"] * 2
        colours = [call[2] if call[0] == "polygon" else call[3] for call in canvas.calls]
        assert colours == [FIN_COLOR] * 5 + [BODY_COLOR, FIN_COLOR] + [EYE_COLOR] * 2

    def test_eye_radius_follows_scale(self):
        canvas = RecordingCanvas()
        draw_fish(canvas, CreatureBody(Vector2(), 0.5).geometry())
        assert {call[2] for call in canvas.of_kind("circle")} == {6.0}

    def test_dorsal_fin_has_no_duplicate_vertex(self):
        canvas = RecordingCanvas()
        draw_fish(canvas, CreatureBody(Vector2(), 1.0).geometry())
        dorsal = canvas.of_kind("polygon")[6][1]
        assert len(dorsal) == 21


class TestPygameBackends:
    @pytest.fixture(autouse=True)
    def _pygame(self):
        pygame = pytest.importorskip("pygame")
        pygame.font.init()
        self.pygame = pygame
        yield
        pygame.font.quit()

    def test_ocean_gradient_runs_top_to_bottom(self):
        from phishtank.rendering.ocean_renderer import OceanRenderer

        ocean = OceanRenderer(64, 48, random.Random(1), sparkle_count=10)
        assert ocean.gradient_color(0) == OCEAN_TOP_COLOR
        assert ocean.gradient_color(47) == OCEAN_BOTTOM_COLOR
        assert ocean.static_background.get_size() == (64, 48)
        assert ocean.static_background.get_at((10, 0))[:3] == OCEAN_TOP_COLOR

    def test_ocean_resize_rescatters_sparkles(self):
        from phishtank.rendering.ocean_renderer import OceanRenderer

        ocean = OceanRenderer(64, 48, random.Random(1), sparkle_count=10)
        ocean.resize(200, 100)
        assert ocean.static_background.get_size() == (200, 100)
        assert len(ocean.sparkles) == 10
        assert all(0 <= s.x <= 200 and 0 <= s.y <= 100 for s in ocean.sparkles)

    def test_ocean_draws_every_layer(self):
        from phishtank.rendering.ocean_renderer import OceanRenderer

        surface = self.pygame.Surface((64, 48))
        ocean = OceanRenderer(64, 48, random.Random(1), sparkle_count=10)
        ocean.draw_background(surface)
        ocean.draw_water_lines(surface, frame=3)
        ocean.draw_sparkles(surface, time_s=1.5)
        assert surface.get_at((0, 47))[:3] != (0, 0, 0)

    def test_pygame_canvas_draws_opaque_and_translucent_shapes(self):
        from phishtank.rendering.canvas import PygameCanvas

        surface = self.pygame.Surface((40, 40))
        canvas = PygameCanvas(surface)
        canvas.fill_polygon([(0, 0), (20, 0), (20, 20), (0, 20)], (255, 0, 0))
        assert surface.get_at((10, 10))[:3] == (255, 0, 0)
        canvas.fill_circle((30.0, 30.0), 5.0, (0, 0, 255), alpha=128)
        r, g, b = surface.get_at((30, 30))[:3]
        assert b > 0 and r == 0
        canvas.fill_polygon([(0, 0), (1, 1)], (0, 255, 0))
        assert surface.get_at((0, 0))[:3] == (255, 0, 0)

    def test_pygame_canvas_renders_a_scene(self):
        from phishtank.rendering.canvas import PygameCanvas
        from phishtank.simulation.scene import Scene

        surface = self.pygame.Surface((320, 240))
        scene = Scene(320, 240, fish_count=2, seed=3, feeding_mode=True)
        scene.feed(100.0, 100.0)
        scene.render(PygameCanvas(surface))

    def test_feed_button_layout_and_label(self):
        from phishtank.rendering.feed_button import ACTIVE_LABEL, IDLE_LABEL, FeedButton

        button = FeedButton(self.pygame.font.Font(None, 24))
        button.layout(800, 600)
        assert button.rect.bottomright == (784, 584)
        assert button.hit(button.rect.center)
        assert not button.hit((10, 10))
        assert FeedButton.label_for(True) == ACTIVE_LABEL
        assert FeedButton.label_for(False) == IDLE_LABEL
        surface = self.pygame.Surface((800, 600))
        button.draw(surface, active=True)
