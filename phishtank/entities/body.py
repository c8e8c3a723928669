"""Fish body geometry derived from the current state of a spine chain.

Nothing in here is cached: every call to :func:`build_geometry` reads the
joint positions and headings fresh, so the drawn silhouette always matches
the spine the steering code just resolved.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..config.constants import (
    BODY_COLOR,
    BODY_WIDTH_PROFILE,
    EYE_COLOR,
    FIN_COLOR,
    SPINE_ANGLE_CONSTRAINT,
    SPINE_JOINT_COUNT,
    SPINE_LINK_LENGTH,
)
from ..physics.chain import SpineChain
from ..physics.vector_math import Vector2
from ..utils.math_utils import clamp, relative_angle_diff

Color = Tuple[int, int, int]

HALF_PI = math.pi / 2

# Joint indices of the fish anatomy.
PECTORAL_JOINT = 3
PECTORAL_ANGLE_JOINT = 2
VENTRAL_JOINT = 7
VENTRAL_ANGLE_JOINT = 6
DORSAL_JOINTS = (4, 5, 6, 7)
MID_JOINTS = (6, 7)
TAIL_JOINTS = (8, 9, 10, 11)


@dataclass(frozen=True)
class Ellipse:
    center: Vector2
    width: float
    height: float
    rotation: float
    color: Color


@dataclass(frozen=True)
class BezierSegment:
    start: Vector2
    control1: Vector2
    control2: Vector2
    end: Vector2


@dataclass(frozen=True)
class FishGeometry:
    """Everything needed to draw one fish, listed in back-to-front order."""

    pectoral_fins: Tuple[Ellipse, Ellipse]
    ventral_fins: Tuple[Ellipse, Ellipse]
    tail: Tuple[Vector2, ...]
    outline: Tuple[Vector2, ...]
    dorsal_fin: Tuple[BezierSegment, BezierSegment]
    eyes: Tuple[Ellipse, Ellipse]
    body_color: Color
    fin_color: Color


def _offset_point(
    chain: SpineChain,
    widths: Sequence[float],
    index: int,
    angle_offset: float,
    length_offset: float,
) -> Vector2:
    joint = chain[index]
    return joint.position + Vector2.from_angle(joint.heading + angle_offset, widths[index] + length_offset)


def _fin_pair(
    chain: SpineChain,
    widths: Sequence[float],
    index: int,
    side_angle: float,
    rotation_joint: int,
    size: Tuple[float, float],
    color: Color,
) -> Tuple[Ellipse, Ellipse]:
    base_rotation = chain[rotation_joint].heading
    right = Ellipse(
        _offset_point(chain, widths, index, side_angle, 0.0),
        size[0],
        size[1],
        base_rotation - math.pi / 4,
        color,
    )
    left = Ellipse(
        _offset_point(chain, widths, index, -side_angle, 0.0),
        size[0],
        size[1],
        base_rotation + math.pi / 4,
        color,
    )
    return right, left


def _tail_points(chain: SpineChain, head_to_tail: float, scale: float) -> Tuple[Vector2, ...]:
    first = TAIL_JOINTS[0]
    points: List[Vector2] = []
    # Lower lobe grows with the square of the distance from the tail root.
    for index in TAIL_JOINTS:
        joint = chain[index]
        spread = 1.5 * head_to_tail * (index - first) ** 2 * scale
        points.append(joint.position + Vector2.from_angle(joint.heading - HALF_PI, spread))
    # Upper lobe is a flat band, flaring with curvature up to a fixed limit.
    upper = clamp(head_to_tail * 6 * scale, -13 * scale, 13 * scale)
    for index in reversed(TAIL_JOINTS):
        joint = chain[index]
        points.append(joint.position + Vector2.from_angle(joint.heading + HALF_PI, upper))
    return tuple(points)


def _outline_points(chain: SpineChain, widths: Sequence[float], scale: float) -> Tuple[Vector2, ...]:
    last = len(widths) - 1
    points = [_offset_point(chain, widths, i, HALF_PI, 0.0) for i in range(len(widths))]
    points.append(_offset_point(chain, widths, last, math.pi, 0.0))
    points.extend(_offset_point(chain, widths, i, -HALF_PI, 0.0) for i in range(last, -1, -1))
    # Head cap: two shoulders and a slightly protruding snout.
    points.append(_offset_point(chain, widths, 0, -math.pi / 6, 0.0))
    points.append(_offset_point(chain, widths, 0, 0.0, 4 * scale))
    points.append(_offset_point(chain, widths, 0, math.pi / 6, 0.0))
    return tuple(points)


def _dorsal_fin(
    chain: SpineChain,
    head_to_mid1: float,
    head_to_mid2: float,
    scale: float,
) -> Tuple[BezierSegment, BezierSegment]:
    j4, j5, j6, j7 = (chain[i] for i in DORSAL_JOINTS)
    along_spine = BezierSegment(j4.position, j5.position, j6.position, j7.position)
    bulge_6 = j6.position + Vector2.from_angle(j6.heading + HALF_PI, head_to_mid2 * 16 * scale)
    bulge_5 = j5.position + Vector2.from_angle(j5.heading + HALF_PI, head_to_mid1 * 16 * scale)
    return along_spine, BezierSegment(j7.position, bulge_6, bulge_5, j4.position)


def build_geometry(
    chain: SpineChain,
    width_profile: Sequence[float],
    body_color: Color,
    fin_color: Color,
    scale: float,
) -> FishGeometry:
    """Derive the drawable shapes of a fish from ``chain``.

    ``width_profile`` holds the already scaled half-width of each body
    vertebra; ``scale`` sizes the fins, tail and eyes. The chain is only read.
    """
    if len(chain) < SPINE_JOINT_COUNT:
        raise ValueError(f"fish geometry needs {SPINE_JOINT_COUNT} joints, chain has {len(chain)}")
    if not VENTRAL_JOINT < len(width_profile) <= len(chain):
        raise ValueError(f"width_profile must cover between {VENTRAL_JOINT + 1} and {len(chain)} joints")

    headings = chain.headings
    head_to_mid1 = relative_angle_diff(headings[0], headings[MID_JOINTS[0]])
    head_to_mid2 = relative_angle_diff(headings[0], headings[MID_JOINTS[1]])
    head_to_tail = head_to_mid1 + relative_angle_diff(headings[MID_JOINTS[0]], headings[TAIL_JOINTS[-1]])

    pectoral = _fin_pair(
        chain, width_profile, PECTORAL_JOINT, math.pi / 3, PECTORAL_ANGLE_JOINT,
        (160 * scale, 64 * scale), fin_color,
    )
    ventral = _fin_pair(
        chain, width_profile, VENTRAL_JOINT, HALF_PI, VENTRAL_ANGLE_JOINT,
        (96 * scale, 32 * scale), fin_color,
    )
    eye_size = 24 * scale
    eyes = tuple(
        Ellipse(
            _offset_point(chain, width_profile, 0, side, -18 * scale),
            eye_size,
            eye_size,
            0.0,
            EYE_COLOR,
        )
        for side in (HALF_PI, -HALF_PI)
    )

    return FishGeometry(
        pectoral_fins=pectoral,
        ventral_fins=ventral,
        tail=_tail_points(chain, head_to_tail, scale),
        outline=_outline_points(chain, width_profile, scale),
        dorsal_fin=_dorsal_fin(chain, head_to_mid1, head_to_mid2, scale),
        eyes=eyes,
        body_color=body_color,
        fin_color=fin_color,
    )


class CreatureBody:
    """A fish: one spine plus the fixed proportions used to flesh it out."""

    def __init__(
        self,
        origin: Vector2,
        scale: float = 0.4,
        *,
        width_profile: Sequence[float] = BODY_WIDTH_PROFILE,
        body_color: Color = BODY_COLOR,
        fin_color: Color = FIN_COLOR,
        joint_count: int = SPINE_JOINT_COUNT,
        angle_constraint: float = SPINE_ANGLE_CONSTRAINT,
    ) -> None:
        if joint_count < SPINE_JOINT_COUNT:
            raise ValueError(f"a fish needs at least {SPINE_JOINT_COUNT} joints, got {joint_count}")
        if not VENTRAL_JOINT < len(width_profile) <= joint_count:
            raise ValueError(f"width_profile must cover between {VENTRAL_JOINT + 1} and {joint_count} joints")
        self.scale = scale
        self.body_color = body_color
        self.fin_color = fin_color
        self.body_width: List[float] = [w * scale for w in width_profile]
        self.spine = SpineChain(origin, joint_count, SPINE_LINK_LENGTH * scale, angle_constraint)

    @property
    def head(self) -> Vector2:
        return self.spine.head

    def resolve(self, target: Vector2) -> None:
        self.spine.resolve(target)

    def geometry(self) -> FishGeometry:
        return build_geometry(self.spine, self.body_width, self.body_color, self.fin_color, self.scale)


__all__ = [
    "BezierSegment",
    "CreatureBody",
    "Ellipse",
    "FishGeometry",
    "build_geometry",
]
