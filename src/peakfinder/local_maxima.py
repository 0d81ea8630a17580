"""Plateau-aware local maxima detection."""

from __future__ import annotations

from typing import List, Sequence

from peakfinder.peak import Peak


def detect_local_maxima(data: Sequence) -> List[Peak]:
    """
    Find every maximal plateau that is a strict local maximum.

    A plateau [i, j] qualifies when data[i-1] < data[i] == ... == data[j] > data[j+1].
    The first and last samples never form a peak, and a plateau that reaches
    the end of the sequence has no falling edge and is skipped.

    Args:
        data: Ordered samples supporting ``<`` and ``==``.

    Returns:
        Candidate peaks ordered by position.
    """
    n = len(data)
    peaks: List[Peak] = []
    i = 1
    while i < n - 1:
        if data[i - 1] < data[i]:
            j = i
            while j + 1 < n - 1 and data[j + 1] == data[i]:
                j += 1
            if data[j + 1] < data[i]:
                peaks.append(Peak(left_position=i, right_position=j))
            # 平坦部は一度だけ走査する
            i = j + 1
        else:
            i += 1
    return peaks
