"""Compute and filter on the cheap per-peak properties (height, thresholds, plateau size).

Each ``compute_*`` function caches its result on the peak, so a property is
evaluated at most once per candidate no matter how many stages read it.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import numpy as np

from peakfinder.bounds import Bounds
from peakfinder.peak import Peak


def difference(larger: Any, smaller: Any) -> Any:
    """
    Return larger - smaller without fixed-width integer wrap-around.

    numpy integer scalars are widened to Python ints first; other sample types
    are subtracted as they are.
    """
    if isinstance(larger, np.integer):
        larger = larger.item()
    if isinstance(smaller, np.integer):
        smaller = smaller.item()
    return larger - smaller


def compute_height(data: Sequence, peak: Peak) -> Any:
    """Return the sample value of the plateau (identical across it)."""
    if peak.height is None:
        peak.height = data[peak.left_position]
    return peak.height


def compute_thresholds(data: Sequence, peak: Peak) -> Tuple[Any, Any]:
    """
    Return the vertical drop from the peak to its immediate neighbors.

    Args:
        data: Full input sequence.
        peak: Candidate with valid neighbors on both sides.

    Returns:
        (left_threshold, right_threshold)
    """
    if peak.left_threshold is None or peak.right_threshold is None:
        height = compute_height(data, peak)
        peak.left_threshold = difference(height, data[peak.left_position - 1])
        peak.right_threshold = difference(height, data[peak.right_position + 1])
    return peak.left_threshold, peak.right_threshold


def compute_plateau_size(peak: Peak) -> int:
    if peak.plateau_size is None:
        peak.plateau_size = peak.right_position - peak.left_position + 1
    return peak.plateau_size


def filter_by_plateau_size(peaks: List[Peak], bounds: Bounds) -> List[Peak]:
    return [p for p in peaks if bounds.contains(compute_plateau_size(p))]


def filter_by_height(data: Sequence, peaks: List[Peak], bounds: Bounds) -> List[Peak]:
    return [p for p in peaks if bounds.contains(compute_height(data, p))]


def filter_by_threshold(data: Sequence, peaks: List[Peak], bounds: Bounds) -> List[Peak]:
    """Keep peaks whose left and right thresholds both lie inside the bounds."""
    kept: List[Peak] = []
    for peak in peaks:
        left, right = compute_thresholds(data, peak)
        if bounds.contains(left) and bounds.contains(right):
            kept.append(peak)
    return kept
