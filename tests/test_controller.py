"""Tests for per-fish steering."""

from __future__ import annotations

import math
import random

import pytest

from phishtank.entities.body import CreatureBody
from phishtank.entities.controller import Bounds, CreatureController, SteeringParams, nearest_food
from phishtank.entities.food import FoodParticle
from phishtank.physics.vector_math import Vector2
from phishtank.utils.math_utils import wrap_angle


def _controller(origin=Vector2(0.0, 0.0), velocity=Vector2(), **params) -> CreatureController:
    steering = SteeringParams(**params)
    return CreatureController(CreatureBody(origin, 0.15), velocity, params=steering)


class TestNearestFood:
    def test_empty_collection(self):
        closest, distance = nearest_food(Vector2(), [])
        assert closest is None
        assert distance == math.inf

    def test_picks_closest_pellet(self):
        far = FoodParticle(100.0, 0.0)
        near = FoodParticle(0.0, 30.0)
        closest, distance = nearest_food(Vector2(), [far, near])
        assert closest is near
        assert distance == pytest.approx(30.0)


class TestSeek:
    def test_chase_speed_ramps_linearly(self):
        controller = _controller(detection_radius=350.0, chase_speed_min=2.0, chase_speed_max=6.0)
        assert controller.chase_speed(300.0) == pytest.approx(2 + (6 - 2) * 50 / 350)
        assert controller.chase_speed(350.0) == pytest.approx(2.0)
        assert controller.chase_speed(0.0) == pytest.approx(6.0)

    def test_seek_blends_towards_food(self):
        start_velocity = Vector2(0.5, -0.5)
        controller = _controller(velocity=start_velocity, detection_radius=350.0, steer_blend=0.2)
        pellet = FoodParticle(300.0, 0.0)
        assert controller.seek(pellet, 300.0)

        speed = 2 + 4 * 50 / 350
        expected = start_velocity.lerp(Vector2(speed, 0.0), 0.2)
        assert controller.velocity.x == pytest.approx(expected.x)
        assert controller.velocity.y == pytest.approx(expected.y)

    def test_seek_ignores_food_out_of_range(self):
        controller = _controller(velocity=Vector2(1.0, 0.0), detection_radius=350.0)
        assert not controller.seek(FoodParticle(400.0, 0.0), 400.0)
        assert not controller.seek(FoodParticle(350.0, 0.0), 350.0)
        assert not controller.seek(None, math.inf)
        assert controller.velocity == Vector2(1.0, 0.0)

    def test_seek_skips_food_on_the_head(self):
        controller = _controller(velocity=Vector2(1.0, 0.0))
        assert not controller.seek(FoodParticle(0.0, 0.0), 0.0)
        assert controller.velocity == Vector2(1.0, 0.0)

    def test_wants_to_eat_within_radius(self):
        controller = _controller(eat_radius=25.0)
        pellet = FoodParticle(10.0, 0.0)
        assert controller.wants_to_eat(pellet, 10.0)
        assert not controller.wants_to_eat(pellet, 25.0)
        assert not controller.wants_to_eat(None, 0.0)


class TestWander:
    def test_wander_speed_is_capped(self):
        controller = _controller(velocity=Vector2(5.0, 5.0), max_wander_speed=1.0)
        controller.wander(random.Random(3))
        assert controller.velocity.length() == pytest.approx(1.0)

    def test_wander_angle_drifts_within_jitter(self):
        controller = _controller(wander_jitter=0.08)
        controller.wander(random.Random(3))
        assert abs(controller.wander_angle) <= 0.08


class TestBoundary:
    def test_bounce_off_right_edge(self):
        controller = _controller(
            origin=Vector2(949.5, 300.0),
            velocity=Vector2(1.0, 0.0),
            wander_jitter=0.0,
            padding=150.0,
        )
        angle_before = controller.wander_angle
        controller.update(None, math.inf, Bounds(800.0, 600.0), random.Random(0))

        assert controller.velocity.x < 0
        change = wrap_angle(controller.wander_angle - angle_before)
        assert change == pytest.approx(math.pi / 2)
        assert controller.head.x == pytest.approx(948.5)

    def test_corner_flips_both_axes(self):
        controller = _controller(origin=Vector2(-149.5, -149.5), velocity=Vector2(-1.0, -1.0), padding=150.0)
        controller.avoid_boundary(Bounds(800.0, 600.0))
        assert controller.velocity == Vector2(1.0, 1.0)
        assert controller.wander_angle == pytest.approx(math.pi)

    def test_no_bounce_inside_padded_area(self):
        controller = _controller(origin=Vector2(400.0, 300.0), velocity=Vector2(1.0, 1.0), padding=150.0)
        controller.avoid_boundary(Bounds(800.0, 600.0))
        assert controller.velocity == Vector2(1.0, 1.0)
        assert controller.wander_angle == 0.0


class TestUpdate:
    def test_update_returns_eaten_pellet(self):
        controller = _controller(origin=Vector2(400.0, 300.0), eat_radius=25.0)
        pellet = FoodParticle(410.0, 300.0)
        eaten = controller.update(pellet, 10.0, Bounds(800.0, 600.0), random.Random(1))
        assert eaten is pellet

    def test_update_moves_head_by_velocity(self):
        controller = _controller(origin=Vector2(400.0, 300.0), velocity=Vector2(0.3, 0.4))
        rng = random.Random(5)
        controller.update(None, math.inf, Bounds(800.0, 600.0), rng)
        assert controller.head.distance_to(Vector2(400.0, 300.0)) == pytest.approx(controller.velocity.length())

    def test_same_seed_same_swim(self):
        first = _controller(origin=Vector2(400.0, 300.0), velocity=Vector2(0.2, -0.3))
        second = _controller(origin=Vector2(400.0, 300.0), velocity=Vector2(0.2, -0.3))
        rng_a, rng_b = random.Random(7), random.Random(7)
        bounds = Bounds(800.0, 600.0)
        for _ in range(200):
            first.update(None, math.inf, bounds, rng_a)
            second.update(None, math.inf, bounds, rng_b)
        assert first.body.spine.positions == second.body.spine.positions
        assert first.wander_angle == second.wander_angle

    def test_food_out_of_range_steers_like_no_food(self):
        bounds = Bounds(800.0, 600.0)
        hungry = _controller(origin=Vector2(400.0, 300.0), velocity=Vector2(0.2, -0.3), detection_radius=350.0)
        idle = _controller(origin=Vector2(400.0, 300.0), velocity=Vector2(0.2, -0.3), detection_radius=350.0)
        pellet = FoodParticle(400.0 + 360.0, 300.0)

        eaten = hungry.update(pellet, 360.0, bounds, random.Random(7))
        idle.update(None, math.inf, bounds, random.Random(7))

        assert eaten is None
        assert hungry.velocity == idle.velocity
        assert hungry.wander_angle == idle.wander_angle
        assert hungry.head == idle.head
