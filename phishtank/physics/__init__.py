"""Vector maths and the spine solver that bends each fish."""

from .chain import Joint, SpineChain
from .vector_math import Vector2

__all__ = [
    "Joint",
    "SpineChain",
    "Vector2",
]
