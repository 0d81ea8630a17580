"""Topographic prominence of a peak and the bases that bound it."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from peakfinder.bounds import Bounds
from peakfinder.peak import Peak
from peakfinder.properties import compute_height, difference


def _scan(data: Sequence, start: int, stop: int, step: int, height: Any) -> Tuple[Any, int]:
    """Walk from start toward stop, returning (lowest value seen, base index)."""
    lowest = data[start]
    i = start
    while True:
        value = data[i]
        if value > height:
            return lowest, i
        if value < lowest:
            lowest = value
        if i == stop:
            return lowest, i
        i += step


def compute_prominence(data: Sequence, peak: Peak) -> Tuple[Any, int, int]:
    """
    Compute the prominence of a peak against the full sequence.

    Each side is scanned outward until a sample strictly higher than the peak
    or the sequence boundary is reached; that index is the base. Lower peaks
    encountered on the way count as terrain. The prominence is the height
    above the higher of the two valley minima.

    Args:
        data: Full, unfiltered input sequence.
        peak: Candidate local maximum.

    Returns:
        (prominence, left_base, right_base)
    """
    if peak.prominence is None:
        height = compute_height(data, peak)
        left_min, left_base = _scan(data, peak.left_position - 1, 0, -1, height)
        right_min, right_base = _scan(data, peak.right_position + 1, len(data) - 1, 1, height)
        # 浅い方の谷が基準になる
        reference = left_min if left_min > right_min else right_min
        peak.prominence = difference(height, reference)
        peak.left_base = left_base
        peak.right_base = right_base
    return peak.prominence, peak.left_base, peak.right_base


def filter_by_prominence(data: Sequence, peaks: List[Peak], bounds: Bounds) -> List[Peak]:
    return [p for p in peaks if bounds.contains(compute_prominence(data, p)[0])]
