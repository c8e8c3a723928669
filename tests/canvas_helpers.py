"""Recording stand-in for the drawing canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class RecordingCanvas:
    """Remembers every draw call in order instead of drawing."""

    calls: List[Tuple] = field(default_factory=list)

    def fill_polygon(self, points, color, alpha=255):
        self.calls.append(("polygon", list(points), color, alpha))

    def fill_circle(self, center, radius, color, alpha=255):
        self.calls.append(("circle", center, radius, color, alpha))

    def of_kind(self, kind: str) -> List[Tuple]:
        return [call for call in self.calls if call[0] == kind]
