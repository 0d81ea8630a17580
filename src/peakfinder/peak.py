"""Define the peak record produced by the detection pipeline.

A `Peak` always knows the plateau it spans. Every other field starts as `None`
and is filled in by the stage that needs it (height, threshold, plateau size,
prominence) or by an explicit `compute_properties` request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Peak:
    """
    One local maximum (plateau) of the input sequence.

    left_position/right_position are inclusive indices of the plateau and are
    equal for a single-sample peak.
    """

    left_position: int
    right_position: int
    height: Any | None = None
    plateau_size: int | None = None
    left_threshold: Any | None = None
    right_threshold: Any | None = None
    prominence: Any | None = None
    left_base: int | None = None
    right_base: int | None = None

    @property
    def middle_position(self) -> int:
        """Center of the plateau, rounded down for even plateau sizes."""
        return self.left_position + (self.right_position - self.left_position) // 2
