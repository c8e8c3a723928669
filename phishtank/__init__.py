"""Package initializer for the phishtank fish animation."""

from __future__ import annotations

from .config import settings as settings

__all__ = ["settings"]
