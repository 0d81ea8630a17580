"""Greedy selection of peaks by their mutual distance."""

from __future__ import annotations

from typing import Any, List, Sequence

from peakfinder.bounds import Bounds
from peakfinder.peak import Peak
from peakfinder.properties import compute_height, difference


def select_by_distance(
    data: Sequence,
    peaks: List[Peak],
    bounds: Bounds,
    coordinates: Sequence | None = None,
) -> List[Peak]:
    """
    Enforce the distance bounds between surviving peaks.

    Minimum distance: peaks are visited tallest first (equal heights by
    ascending position). Each peak that is still present removes every other
    present peak closer than the minimum, whatever that neighbour's height.
    A neighbour exactly at the minimum distance is kept.

    Maximum distance: applied to the survivors of the minimum pass. A peak is
    dropped when its nearest surviving neighbour is farther than the maximum.
    A single survivor has no neighbour and is dropped as well.

    Args:
        data: Full input sequence, used for peak heights.
        peaks: Candidates to thin out.
        bounds: Distance bounds; an empty bound returns the peaks sorted by position.
        coordinates: Optional strictly increasing axis; distances are then
            measured between ``coordinates[middle_position]`` values.

    Returns:
        Surviving peaks ordered by position.
    """
    by_position = sorted(peaks, key=lambda p: p.middle_position)
    if bounds.is_empty() or not by_position:
        return by_position

    if coordinates is None:
        coords: List[Any] = [p.middle_position for p in by_position]
    else:
        coords = [coordinates[p.middle_position] for p in by_position]

    survivors = by_position
    if bounds.minimum is not None:
        keep = _suppress_close_neighbours(data, by_position, coords, bounds.minimum)
        survivors = [p for p, flag in zip(by_position, keep) if flag]
        coords = [c for c, flag in zip(coords, keep) if flag]
    if bounds.maximum is not None:
        survivors = _drop_isolated(survivors, coords, bounds.maximum)
    return survivors


def _suppress_close_neighbours(data: Sequence, peaks: List[Peak], coords: List[Any], minimum: Any) -> List[bool]:
    heights = [compute_height(data, p) for p in peaks]
    # sort() は安定なので同じ高さでは位置の小さいピークが先に来る
    priority = sorted(range(len(peaks)), key=lambda k: heights[k], reverse=True)
    keep = [True] * len(peaks)
    for k in priority:
        if not keep[k]:
            continue
        j = k - 1
        while j >= 0 and difference(coords[k], coords[j]) < minimum:
            keep[j] = False
            j -= 1
        j = k + 1
        while j < len(peaks) and difference(coords[j], coords[k]) < minimum:
            keep[j] = False
            j += 1
    return keep


def _drop_isolated(peaks: List[Peak], coords: List[Any], maximum: Any) -> List[Peak]:
    kept: List[Peak] = []
    for k, peak in enumerate(peaks):
        gaps = []
        if k > 0:
            gaps.append(difference(coords[k], coords[k - 1]))
        if k + 1 < len(peaks):
            gaps.append(difference(coords[k + 1], coords[k]))
        if gaps and min(gaps) <= maximum:
            kept.append(peak)
    return kept
