"""The scene: sole owner of the fish and food for one running session."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from numbers import Real
from typing import List, Optional, Tuple, TYPE_CHECKING

from ..config import settings
from ..config.settings import SimulationSettings
from ..entities.controller import Bounds, CreatureController, SteeringParams, nearest_food
from ..entities.food import FoodParticle
from ..rendering.fish_renderer import draw_fish
from .bootstrap import spawn_school

if TYPE_CHECKING:  # pragma: no cover - imported for type hints only
    from ..rendering.canvas import Canvas

logger = logging.getLogger("phishtank.simulation")


@dataclass(frozen=True)
class TickInfo:
    """What the host hands over every frame."""

    width: float
    height: float
    elapsed_ms: float = 0.0


class Scene:
    """Holds every fish and pellet and advances them in a fixed order.

    Per tick each fish looks up the pellet nearest its head, steers, eats and
    moves; eaten pellets are removed; the remaining pellets then sink, fade and
    are pruned. Only the scene adds or removes fish and food.
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        fish_count: int = settings.N_FISH,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        steering: Optional[SteeringParams] = None,
        fish_scale: float = settings.FISH_SCALE,
        food_decay_rate: float = settings.FOOD_DECAY_RATE,
        feeding_mode: bool = False,
    ) -> None:
        self.bounds = self._validated_bounds(width, height)
        self.rng = rng if rng is not None else random.Random(seed)
        self.steering = steering or SteeringParams()
        self.food_decay_rate = food_decay_rate
        self.feeding_mode = feeding_mode
        self.frame = 0
        self.elapsed_ms = 0.0
        self._food: List[FoodParticle] = []
        self._controllers: List[CreatureController] = spawn_school(
            fish_count,
            self.bounds,
            self.rng,
            params=self.steering,
            scale=fish_scale,
        )

    @classmethod
    def from_settings(cls, sim_settings: SimulationSettings) -> "Scene":
        return cls(
            sim_settings.WINDOW_WIDTH,
            sim_settings.WINDOW_HEIGHT,
            fish_count=sim_settings.N_FISH,
            seed=sim_settings.SEED or None,
            steering=SteeringParams.from_settings(sim_settings),
            fish_scale=sim_settings.FISH_SCALE,
            food_decay_rate=sim_settings.FOOD_DECAY_RATE,
            feeding_mode=sim_settings.FEEDING_MODE,
        )

    @staticmethod
    def _validated_bounds(width: float, height: float) -> Bounds:
        if not (width > 0 and height > 0):
            raise ValueError(f"viewport must have a positive size, got {width}x{height}")
        return Bounds(float(width), float(height))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def controllers(self) -> Tuple[CreatureController, ...]:
        return tuple(self._controllers)

    @property
    def food(self) -> Tuple[FoodParticle, ...]:
        return tuple(self._food)

    # ------------------------------------------------------------------
    # Host input
    # ------------------------------------------------------------------
    def set_feeding_mode(self, enabled: bool) -> None:
        self.feeding_mode = bool(enabled)
        logger.info("Feeding mode %s", "on" if self.feeding_mode else "off")

    def toggle_feeding_mode(self) -> bool:
        self.set_feeding_mode(not self.feeding_mode)
        return self.feeding_mode

    def resize(self, width: float, height: float) -> None:
        """Adopt a new viewport size; fish and food stay where they are."""

        self.bounds = self._validated_bounds(width, height)
        logger.info("Viewport resized to %dx%d", self.bounds.width, self.bounds.height)

    def feed(self, x: float, y: float) -> Optional[FoodParticle]:
        """Drop a pellet at ``(x, y)`` when feeding mode is on."""

        if not self.feeding_mode:
            return None
        if not all(isinstance(v, Real) and not isinstance(v, bool) and math.isfinite(v) for v in (x, y)):
            logger.debug("Rejected feed request at (%r, %r)", x, y)
            return None
        pellet = FoodParticle(float(x), float(y), decay_rate=self.food_decay_rate)
        self._food.append(pellet)
        logger.debug("Food dropped at (%.1f, %.1f); %d pellets in the tank", x, y, len(self._food))
        return pellet

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def tick(self, tick_info: Optional[TickInfo] = None) -> None:
        if tick_info is not None:
            width, height = tick_info.width, tick_info.height
            # A minimised window reports 0x0; keep the last usable bounds.
            usable = width > 0 and height > 0
            if usable and (width, height) != (self.bounds.width, self.bounds.height):
                self.resize(width, height)
            self.elapsed_ms = tick_info.elapsed_ms

        for controller in self._controllers:
            closest, distance = nearest_food(controller.head, self._food)
            eaten = controller.update(closest, distance, self.bounds, self.rng)
            if eaten is not None:
                self._food.remove(eaten)
                logger.debug("yum! %d pellets left", len(self._food))

        for pellet in self._food:
            pellet.update()
        self._food = [pellet for pellet in self._food if not pellet.is_gone(self.bounds.height)]
        self.frame += 1

    def render(self, canvas: "Canvas") -> None:
        """Draw every fish, then the food on top."""

        for controller in self._controllers:
            draw_fish(canvas, controller.body.geometry())
        for pellet in self._food:
            pellet.display(canvas)
