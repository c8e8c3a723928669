"""Simulation package containing the scene and the pygame host loop."""

from __future__ import annotations

from .scene import Scene, TickInfo


def run(*args, **kwargs):
    """Start the pygame loop (imported lazily so the scene stays pygame-free)."""

    from .loop import run as _run

    return _run(*args, **kwargs)


__all__ = [
    "Scene",
    "TickInfo",
    "run",
]
