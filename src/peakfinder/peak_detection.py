"""Array-oriented peak detection helpers built on `PeakFinder`."""

from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from peakfinder.bounds import Bounds
from peakfinder.finder import PeakFinder
from peakfinder.peak import Peak

# Peak field -> key of the returned property dict
PROPERTY_KEYS: Dict[str, str] = {
    "height": "peak_heights",
    "left_threshold": "left_thresholds",
    "right_threshold": "right_thresholds",
    "plateau_size": "plateau_sizes",
    "prominence": "prominences",
    "left_base": "left_bases",
    "right_base": "right_bases",
}


def _as_bounds(value: Any) -> Bounds:
    """Interpret a scalar as a minimum and a 2-tuple as (min, max)."""
    if value is None:
        return Bounds()
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise ValueError(f"Bounds must be a scalar or a (min, max) pair, got {value!r}")
        return Bounds(minimum=value[0], maximum=value[1])
    return Bounds(minimum=value)


def peaks_to_arrays(peaks: Sequence[Peak]) -> Dict[str, NDArray]:
    """
    Convert peaks to a dict of property arrays.

    Plateau edges are always present; any other field is included only when it
    is populated on every peak.

    Unlike scipy, ``left_bases``/``right_bases`` hold the index where the
    prominence scan stopped: the first sample higher than the peak, or the
    sequence boundary. They are not the positions of the valley minima.

    Returns:
        {"left_edges": ..., "right_edges": ..., "peak_heights": ..., ...}
    """
    properties: Dict[str, NDArray] = {
        "left_edges": np.array([p.left_position for p in peaks], dtype=int),
        "right_edges": np.array([p.right_position for p in peaks], dtype=int),
    }
    if not peaks:
        return properties
    for field_name, key in PROPERTY_KEYS.items():
        values = [getattr(p, field_name) for p in peaks]
        if any(v is None for v in values):
            continue
        properties[key] = np.asarray(values)
    return properties


def find_peaks(
    signal: NDArray | Sequence,
    *,
    height: Any = None,
    threshold: Any = None,
    prominence: Any = None,
    distance: Any = None,
    plateau_size: Any = None,
    coordinates: NDArray | Sequence | None = None,
) -> Tuple[NDArray[np.int_], Dict[str, NDArray]]:
    """
    Detect peaks and return their middle indices with the computed properties.

    Args:
        signal: 1D samples, converted to float64 like scipy.signal.find_peaks.
        height: Minimum height, or (min, max) with None for an open side.
        threshold: Minimum drop to both neighbors, or (min, max).
        prominence: Minimum prominence, or (min, max).
        distance: Minimum separation between peaks, or (min, max).
        plateau_size: Minimum plateau length in samples, or (min, max).
        coordinates: Optional axis used to measure distances.

    Returns:
        (indices, properties) where properties holds one array per computed field.
    """
    signal = np.asarray(signal, dtype=np.float64)
    finder = PeakFinder(signal, coordinates=coordinates)
    setters = [
        (height, finder.with_min_height, finder.with_max_height),
        (threshold, finder.with_min_threshold, finder.with_max_threshold),
        (prominence, finder.with_min_prominence, finder.with_max_prominence),
        (distance, finder.with_min_distance, finder.with_max_distance),
        (plateau_size, finder.with_min_plateau_size, finder.with_max_plateau_size),
    ]
    for value, set_min, set_max in setters:
        bounds = _as_bounds(value)
        if bounds.minimum is not None:
            set_min(bounds.minimum)
        if bounds.maximum is not None:
            set_max(bounds.maximum)

    peaks = finder.find_peaks()
    indices = np.array([p.middle_position for p in peaks], dtype=int)
    return indices, peaks_to_arrays(peaks)


def detect_peaks(signal: NDArray[np.float64], prominence: float = 0.01, distance: int = 5) -> NDArray[np.int_]:
    """
    Detect peaks with a prominence relative to the signal maximum.

    Args:
        signal: Smoothed spectrum.
        prominence: Minimum prominence relative to max to keep a peak.
        distance: Minimum separation between peaks in bins.

    Returns:
        Indices of detected peaks.
    """
    signal = np.asarray(signal)
    if signal.size == 0:
        return np.array([], dtype=int)
    prom = prominence * float(signal.max() if signal.max() > 0 else 1.0)
    peaks, _ = find_peaks(signal, prominence=prom, distance=distance)
    return peaks.astype(int)
