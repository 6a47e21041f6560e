"""Surface size in physical pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """Width and height in pixels, with the display scale factor."""

    width: int
    height: int
    pixels_per_point: float = 1.0

    def aspect(self) -> float:
        """Return width divided by height."""
        if self.height == 0:
            return math.inf if self.width else math.nan
        return self.width / self.height