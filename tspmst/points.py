"""Points in the Euclidean plane."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PlanePoint:
    """A point with ``x`` and ``y`` coordinates."""

    x: float
    y: float

    def distance_to(self, other: PlanePoint) -> float:
        """Return the Euclidean distance between this point and ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)