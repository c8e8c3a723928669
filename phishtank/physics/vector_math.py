"""Minimal immutable 2D vector used by the spine solver and steering code."""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Vector2:
    """Tiny immutable vector; every operation returns a new instance."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> "Vector2":
        """Build a vector of ``length`` pointing along ``angle`` radians."""

        return cls(math.cos(angle) * length, math.sin(angle) * length)

    # Basic arithmetic -----------------------------------------------------
    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    # Geometry -------------------------------------------------------------
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_to(self, other: "Vector2") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def heading(self) -> float:
        """Angle of the vector in radians; 0.0 for the zero vector."""

        return math.atan2(self.y, self.x)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction, or the zero vector."""

        length = self.length()
        if length < 1e-12:
            return Vector2()
        return Vector2(self.x / length, self.y / length)

    def limit(self, max_length: float) -> "Vector2":
        """Clamp the magnitude to ``max_length`` keeping the direction."""

        length_sq = self.length_squared()
        if length_sq > max_length * max_length:
            return self * (max_length / math.sqrt(length_sq))
        return self

    def lerp(self, other: "Vector2", t: float) -> "Vector2":
        return Vector2(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"Vector2(x={self.x:.3f}, y={self.y:.3f})"


__all__ = ["Vector2"]
