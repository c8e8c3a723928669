"""Fish food pellets dropped by the visitor while feeding mode is on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import settings
from ..config.constants import FOOD_COLOR
from ..physics.vector_math import Vector2

if TYPE_CHECKING:  # pragma: no cover - imported for type hints only
    from ..rendering.canvas import Canvas


@dataclass(eq=False)
class FoodParticle:
    """A pellet that sinks at a constant rate and fades out as it goes."""

    x: float
    y: float
    size: float = settings.FOOD_SIZE
    speed: float = settings.FOOD_SPEED
    decay_rate: float = settings.FOOD_DECAY_RATE
    alpha: float = settings.FOOD_START_ALPHA

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    def update(self) -> None:
        self.y += self.speed
        self.alpha -= self.decay_rate

    def is_gone(self, bottom: float) -> bool:
        """True once the pellet has faded out or sunk below ``bottom``."""

        return self.alpha <= 0 or self.y > bottom

    def display(self, canvas: "Canvas") -> None:
        alpha = int(max(0.0, min(255.0, self.alpha)))
        canvas.fill_circle((self.x, self.y), self.size / 2.0, FOOD_COLOR, alpha)
