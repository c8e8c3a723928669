"""Fish bodies, their steering controllers and the food they chase."""

from .body import CreatureBody, FishGeometry, build_geometry
from .controller import Bounds, CreatureController, SteeringParams, nearest_food
from .food import FoodParticle

__all__ = [
    "Bounds",
    "CreatureBody",
    "CreatureController",
    "FishGeometry",
    "FoodParticle",
    "SteeringParams",
    "build_geometry",
    "nearest_food",
]
