"""局所最大（平坦部を含む）の検出を検証するテスト。"""

import numpy as np
import pytest

from peakfinder.local_maxima import detect_local_maxima


def _spans(data):
    return [(p.left_position, p.right_position) for p in detect_local_maxima(data)]


@pytest.mark.parametrize("data", [[], [1.0], [2.0, 1.0], [3, 3]])
def test_short_sequences_have_no_maxima(data):
    """3点未満の系列からはピークが得られない。"""
    assert _spans(data) == []


@pytest.mark.parametrize(
    "data",
    [
        list(range(10)),
        list(range(10, 0, -1)),
        [4.0] * 8,
    ],
)
def test_monotonic_and_flat_sequences_have_no_maxima(data):
    assert _spans(data) == []


def test_single_spike():
    assert _spans([0, 0, 5, 0, 0]) == [(2, 2)]


def test_flat_topped_peak_is_one_candidate():
    """平坦部は左右端を持つ一つの候補になる。"""
    peaks = detect_local_maxima([0, 3, 5, 5, 5, 3, 0])
    assert len(peaks) == 1
    assert (peaks[0].left_position, peaks[0].right_position) == (2, 4)
    assert peaks[0].middle_position == 3


def test_even_plateau_middle_rounds_down():
    peaks = detect_local_maxima([0, 5, 5, 0])
    assert peaks[0].middle_position == 1


def test_step_plateau_and_trailing_plateau_are_not_peaks():
    """上り段差の途中の平坦部と末尾まで続く平坦部は除外される。"""
    assert _spans([0, 2, 2, 3, 0]) == [(3, 3)]
    assert _spans([0, 1, 2, 2, 2]) == []
    assert _spans([2, 2, 1, 3, 3]) == []


def test_multiple_peaks_are_ordered_by_position():
    data = np.array([1.0, 2.0, 3.0, 3.0, 3.0, 0.0, 5.0, 5.0, 0.0])
    assert _spans(data) == [(2, 4), (6, 7)]
