"""Constant values for the phishtank animation."""

from __future__ import annotations

import math

DEFAULTS = {
    "WINDOW_WIDTH": 1280,
    "WINDOW_HEIGHT": 800,
    "N_FISH": 15,
    "FPS": 60,
}

# Fish anatomy: twelve spine joints, the first ten carry body width and the
# last four (8..11) carry the caudal fin.
SPINE_JOINT_COUNT = 12
SPINE_LINK_LENGTH = 64.0
SPINE_ANGLE_CONSTRAINT = math.pi / 8
BODY_WIDTH_PROFILE = (68, 81, 84, 83, 77, 64, 51, 38, 32, 19)

BODY_COLOR = (58, 124, 165)
FIN_COLOR = (129, 195, 215)
EYE_COLOR = (255, 255, 255)
FOOD_COLOR = (255, 204, 0)

OCEAN_TOP_COLOR = (90, 200, 210)
OCEAN_BOTTOM_COLOR = (0, 90, 110)
RIPPLE_COLOR = (255, 255, 255)
RIPPLE_ALPHA = 28
RIPPLE_SPACING = 120
SPARKLE_COLOR = (255, 255, 255)
