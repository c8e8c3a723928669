"""Follow-the-leader spine solver for the swimming fish."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List

from ..utils.math_utils import TWO_PI, clamp, wrap_angle
from .vector_math import Vector2

logger = logging.getLogger("phishtank.physics")


@dataclass
class Joint:
    """One vertebra: a position plus the heading it currently faces."""

    position: Vector2
    heading: float = 0.0


class SpineChain:
    """Ordered chain of joints dragged along by its head.

    ``resolve`` is a single pass from head to tail: every joint turns to face
    its predecessor, but never by more than ``angle_constraint`` relative to
    that predecessor's heading, and is then pinned exactly ``link_size``
    behind it. Sudden target changes therefore ripple down the body instead
    of snapping it straight.
    """

    def __init__(
        self,
        origin: Vector2,
        joint_count: int,
        link_size: float,
        angle_constraint: float = TWO_PI,
    ) -> None:
        if joint_count < 1:
            raise ValueError(f"joint_count must be at least 1, got {joint_count}")
        if not link_size > 0:
            raise ValueError(f"link_size must be positive, got {link_size}")

        constrained = clamp(angle_constraint, 0.0, TWO_PI)
        if constrained != angle_constraint:
            logger.debug("angle_constraint %.4f clamped to %.4f", angle_constraint, constrained)

        self.link_size = float(link_size)
        self.angle_constraint = constrained
        self.joints: List[Joint] = [Joint(Vector2(origin.x, origin.y), 0.0)]
        for _ in range(1, joint_count):
            previous = self.joints[-1].position
            self.joints.append(Joint(Vector2(previous.x, previous.y + self.link_size), 0.0))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.joints)

    def __iter__(self) -> Iterator[Joint]:
        return iter(self.joints)

    def __getitem__(self, index: int) -> Joint:
        return self.joints[index]

    @property
    def head(self) -> Vector2:
        return self.joints[0].position

    @property
    def positions(self) -> List[Vector2]:
        return [joint.position for joint in self.joints]

    @property
    def headings(self) -> List[float]:
        return [joint.heading for joint in self.joints]

    # ------------------------------------------------------------------
    # Solver
    # ------------------------------------------------------------------
    def constrain_heading(self, raw_heading: float, anchor_heading: float) -> float:
        """Limit ``raw_heading`` to within ``angle_constraint`` of the anchor."""

        delta = wrap_angle(raw_heading - anchor_heading)
        delta = clamp(delta, -self.angle_constraint, self.angle_constraint)
        return anchor_heading + delta

    def resolve(self, target: Vector2) -> None:
        """Move the head onto ``target`` and drag the rest of the spine after it."""

        head = self.joints[0]
        travel = target - head.position
        # Standing still keeps the old facing instead of snapping to angle 0.
        if travel.length_squared() > 0.0:
            head.heading = travel.heading()
        head.position = Vector2(target.x, target.y)

        for index in range(1, len(self.joints)):
            leader = self.joints[index - 1]
            joint = self.joints[index]
            raw_heading = (leader.position - joint.position).heading()
            joint.heading = self.constrain_heading(raw_heading, leader.heading)
            offset = Vector2(math.cos(joint.heading), math.sin(joint.heading)) * self.link_size
            joint.position = leader.position - offset


__all__ = ["Joint", "SpineChain"]
