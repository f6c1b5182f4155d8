"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np


class WriteMode(str, Enum):
    OVERWRITE = "overwrite"
    COMPOSE = "compose"


@dataclass(frozen=True)
class GlyphOutline:
    """A character's tight pixel bounds and per-pixel coverage in [0, 1]."""

    width: int
    height: int
    coverage: np.ndarray

    def draw(self, callback: Callable[[int, int, float], None]) -> None:
        """Call ``callback(x, y, coverage)`` for every covered pixel, row by row."""
        ys, xs = np.nonzero(self.coverage)
        for y, x in zip(ys.tolist(), xs.tolist()):
            callback(x, y, float(self.coverage[y, x]))
