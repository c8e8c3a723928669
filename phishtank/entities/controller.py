"""Per-fish steering: wander, chase food, turn back at the edges."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..config import settings
from ..physics.vector_math import Vector2
from ..utils.math_utils import remap
from .body import CreatureBody
from .food import FoodParticle

logger = logging.getLogger("phishtank.steering")


@dataclass(frozen=True)
class SteeringParams:
    """Tuning knobs for one fish's steering."""

    wander_jitter: float = settings.WANDER_JITTER
    wander_strength: float = settings.WANDER_STRENGTH
    max_wander_speed: float = settings.MAX_WANDER_SPEED
    detection_radius: float = settings.DETECTION_RADIUS
    eat_radius: float = settings.EAT_RADIUS
    chase_speed_min: float = settings.CHASE_SPEED_MIN
    chase_speed_max: float = settings.CHASE_SPEED_MAX
    steer_blend: float = settings.STEER_BLEND
    padding: float = settings.BORDER_PADDING

    @classmethod
    def from_settings(cls, sim_settings: settings.SimulationSettings) -> "SteeringParams":
        return cls(
            detection_radius=sim_settings.DETECTION_RADIUS,
            eat_radius=sim_settings.EAT_RADIUS,
            steer_blend=sim_settings.STEER_BLEND,
            padding=sim_settings.BORDER_PADDING,
        )


@dataclass(frozen=True)
class Bounds:
    """Visible area the fish swim in; the origin is the top-left corner."""

    width: float
    height: float

    def padded(self, padding: float) -> Tuple[float, float, float, float]:
        return -padding, -padding, self.width + padding, self.height + padding


def nearest_food(head: Vector2, food: Iterable[FoodParticle]) -> Tuple[Optional[FoodParticle], float]:
    """Linear scan for the pellet closest to ``head``."""

    closest: Optional[FoodParticle] = None
    min_dist = math.inf
    for particle in food:
        dist = head.distance_to(particle.position)
        if dist < min_dist:
            min_dist = dist
            closest = particle
    return closest, min_dist


class CreatureController:
    """Drives one :class:`CreatureBody` around the tank.

    Wandering always contributes; seeking and boundary avoidance layer on top
    of it whenever food is in range or the next step would leave the padded
    viewport.
    """

    def __init__(
        self,
        body: CreatureBody,
        velocity: Vector2 = Vector2(),
        *,
        params: Optional[SteeringParams] = None,
        wander_angle: float = 0.0,
    ) -> None:
        self.body = body
        self.velocity = velocity
        self.wander_angle = wander_angle
        self.params = params or SteeringParams()

    @property
    def padding(self) -> float:
        return self.params.padding

    @property
    def head(self) -> Vector2:
        return self.body.head

    # ------------------------------------------------------------------
    # Steering contributions
    # ------------------------------------------------------------------
    def wander(self, rng: random.Random) -> None:
        jitter = self.params.wander_jitter
        self.wander_angle += rng.uniform(-jitter, jitter)
        nudge = Vector2.from_angle(self.wander_angle, self.params.wander_strength)
        self.velocity = (self.velocity + nudge).limit(self.params.max_wander_speed)

    def chase_speed(self, distance: float) -> float:
        """Speed ramping from the minimum at the detection edge to the maximum on contact."""

        return remap(
            distance,
            self.params.detection_radius,
            0.0,
            self.params.chase_speed_min,
            self.params.chase_speed_max,
            within_bounds=True,
        )

    def seek(self, food: Optional[FoodParticle], distance: float) -> bool:
        """Ease the velocity towards ``food``; returns whether it steered."""

        if food is None or distance >= self.params.detection_radius:
            return False
        direction = food.position - self.head
        if direction.length_squared() == 0.0:
            return False
        target = direction.normalize() * self.chase_speed(distance)
        self.velocity = self.velocity.lerp(target, self.params.steer_blend)
        return True

    def wants_to_eat(self, food: Optional[FoodParticle], distance: float) -> bool:
        return food is not None and distance < self.params.eat_radius

    def avoid_boundary(self, bounds: Bounds) -> None:
        left, top, right, bottom = bounds.padded(self.params.padding)
        next_head = self.head + self.velocity
        vx, vy = self.velocity.x, self.velocity.y
        if next_head.x < left or next_head.x > right:
            vx = -vx
            self.wander_angle += math.pi / 2
        if next_head.y < top or next_head.y > bottom:
            vy = -vy
            self.wander_angle += math.pi / 2
        if (vx, vy) != (self.velocity.x, self.velocity.y):
            logger.debug("Bounced off the edge at (%.1f, %.1f)", self.head.x, self.head.y)
        self.velocity = Vector2(vx, vy)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------
    def update(
        self,
        food: Optional[FoodParticle],
        distance: float,
        bounds: Bounds,
        rng: random.Random,
    ) -> Optional[FoodParticle]:
        """Advance one tick and return the pellet this fish ate, if any.

        ``food``/``distance`` describe the nearest pellet as seen from the head
        before this tick's movement. The caller owns the food collection and
        is responsible for removing the returned pellet.
        """
        self.wander(rng)
        self.seek(food, distance)
        eaten = food if self.wants_to_eat(food, distance) else None
        self.avoid_boundary(bounds)
        self.body.resolve(self.head + self.velocity)
        return eaten


__all__ = [
    "Bounds",
    "CreatureController",
    "SteeringParams",
    "nearest_food",
]
