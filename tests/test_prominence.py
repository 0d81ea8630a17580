"""トポグラフィックプロミネンスと基点の計算を検証するテスト。"""

from decimal import Decimal

import numpy as np

from peakfinder.bounds import Bounds
from peakfinder.local_maxima import detect_local_maxima
from peakfinder.peak import Peak
from peakfinder.prominence import compute_prominence, filter_by_prominence


def test_isolated_spike_bases_are_the_boundaries():
    peak = Peak(2, 2)
    assert compute_prominence([0, 0, 5, 0, 0], peak) == (5, 0, 4)
    assert peak.height == 5


def test_lower_peak_between_taller_neighbours():
    """高いピークに挟まれた低いピークは谷底までの落差がプロミネンスになる。"""
    data = [0, 5, 0, 3, 0, 5, 0]
    middle = Peak(3, 3)
    assert compute_prominence(data, middle) == (3, 1, 5)
    outer = Peak(1, 1)
    assert compute_prominence(data, outer) == (5, 0, 6)


def test_intervening_lower_peaks_count_as_terrain():
    """途中の低いピークは障壁ではなく地形として扱う。"""
    data = [1.0, 2.0, 3.0, 3.0, 3.0, 0.0, 5.0, 5.0, 0.0]
    first, second = detect_local_maxima(data)
    assert compute_prominence(data, first) == (2.0, 0, 6)
    assert compute_prominence(data, second) == (5.0, 0, 8)


def test_shallower_valley_determines_prominence():
    data = [0, 6, 1, 4, 2, 7, 0]
    assert compute_prominence(data, Peak(3, 3))[0] == 2


def test_equal_height_does_not_stop_scan():
    """同じ高さの点では走査を止めない（より高い点でのみ停止）。"""
    data = [0, 4, 1, 4, 2, 0]
    prominence, left_base, right_base = compute_prominence(data, Peak(3, 3))
    assert (prominence, left_base, right_base) == (4, 0, 5)


def test_decimal_samples():
    data = [Decimal("0.5"), Decimal("2.25"), Decimal("1.0")]
    assert compute_prominence(data, Peak(1, 1))[0] == Decimal("1.25")


def test_filter_by_prominence_uses_full_sequence():
    data = np.array([1.0, 2.0, 3.0, 0.0, 5.0, 0.0])
    candidates = detect_local_maxima(data)
    kept = filter_by_prominence(data, candidates, Bounds(minimum=3.0))
    assert [p.middle_position for p in kept] == [4]
    assert kept[0].prominence == 5.0
    kept = filter_by_prominence(data, detect_local_maxima(data), Bounds(minimum=1.0, maximum=2.0))
    assert [p.middle_position for p in kept] == [2]
