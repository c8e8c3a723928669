"""Spawning helpers used when a scene is first populated."""

from __future__ import annotations

import logging
import random
from typing import List

from ..config import settings
from ..entities.body import CreatureBody
from ..entities.controller import Bounds, CreatureController, SteeringParams
from ..physics.vector_math import Vector2

logger = logging.getLogger(__name__)

EDGES = ("left", "right", "top", "bottom")


def off_screen_origin(bounds: Bounds, padding: float, rng: random.Random) -> Vector2:
    """Pick a point ``padding`` beyond a random viewport edge."""

    side = rng.choice(EDGES)
    if side == "left":
        return Vector2(-padding, rng.uniform(-padding, bounds.height + padding))
    if side == "right":
        return Vector2(bounds.width + padding, rng.uniform(-padding, bounds.height + padding))
    if side == "top":
        return Vector2(rng.uniform(-padding, bounds.width + padding), -padding)
    return Vector2(rng.uniform(-padding, bounds.width + padding), bounds.height + padding)


def spawn_controller(
    bounds: Bounds,
    rng: random.Random,
    *,
    params: SteeringParams,
    scale: float,
) -> CreatureController:
    """Create one fish off-screen with a gentle random drift."""

    origin = off_screen_origin(bounds, params.padding, rng)
    velocity = Vector2(
        rng.uniform(-settings.SPAWN_VELOCITY_X, settings.SPAWN_VELOCITY_X),
        rng.uniform(-settings.SPAWN_VELOCITY_Y, settings.SPAWN_VELOCITY_Y),
    )
    return CreatureController(CreatureBody(origin, scale), velocity, params=params)


def spawn_school(
    count: int,
    bounds: Bounds,
    rng: random.Random,
    *,
    params: SteeringParams,
    scale: float,
) -> List[CreatureController]:
    school = [spawn_controller(bounds, rng, params=params, scale=scale) for _ in range(count)]
    logger.info("Spawned %d fish around a %dx%d viewport", len(school), bounds.width, bounds.height)
    return school
