"""Orchestrate local maxima detection and the filter stages.

Typical use::

    peaks = (
        PeakFinder(signal)
        .with_min_height(0.0)
        .with_min_prominence(200.0)
        .find_peaks()
    )

Stage order: plateau size, height, threshold, distance, prominence. A stage is
skipped entirely when its bounds are unset, so its property is never computed.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence

from peakfinder.bounds import PeakFinderConfig, require_bound_value, require_non_negative
from peakfinder.distance import select_by_distance
from peakfinder.local_maxima import detect_local_maxima
from peakfinder.peak import Peak
from peakfinder.prominence import compute_prominence, filter_by_prominence
from peakfinder.properties import (
    compute_height,
    compute_plateau_size,
    compute_thresholds,
    filter_by_height,
    filter_by_plateau_size,
    filter_by_threshold,
)

logger = logging.getLogger(__name__)


def _check_one_dimensional(name: str, values: Sequence) -> None:
    ndim = getattr(values, "ndim", 1)
    if ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got ndim={ndim}")
    if len(values) > 0 and isinstance(values[0], (list, tuple)):
        raise ValueError(f"{name} must be one-dimensional, got nested sequences")


class PeakFinder:
    """
    Find local maxima of a 1D sequence and filter them by configurable bounds.

    The sequence is kept by reference and never modified. Samples only need to
    support ordering and subtraction, so ints, floats, Fractions, Decimals and
    numpy arrays all work.
    """

    def __init__(
        self,
        data: Sequence,
        coordinates: Sequence | None = None,
        config: PeakFinderConfig | None = None,
    ) -> None:
        """
        Args:
            data: Samples to search.
            coordinates: Optional strictly increasing axis (same length as data)
                used to measure peak distances instead of sample indices.
            config: Initial filter bounds; all filters are disabled by default.
        """
        _check_one_dimensional("data", data)
        if coordinates is not None:
            _check_one_dimensional("coordinates", coordinates)
            if len(coordinates) != len(data):
                raise ValueError(
                    f"coordinates length {len(coordinates)} does not match data length {len(data)}"
                )
            for k in range(1, len(coordinates)):
                if not coordinates[k - 1] < coordinates[k]:
                    raise ValueError("coordinates must be strictly increasing")
        self.data = data
        self.coordinates = coordinates
        self.config = config.copy() if config is not None else PeakFinderConfig()

    # --- configuration -------------------------------------------------

    def with_min_prominence(self, prominence: Any) -> "PeakFinder":
        require_non_negative("prominence", prominence)
        self.config.prominence = self.config.prominence.with_minimum(prominence)
        return self

    def with_max_prominence(self, prominence: Any) -> "PeakFinder":
        require_non_negative("prominence", prominence)
        self.config.prominence = self.config.prominence.with_maximum(prominence)
        return self

    def with_min_height(self, height: Any) -> "PeakFinder":
        require_bound_value("height", height)
        self.config.height = self.config.height.with_minimum(height)
        return self

    def with_max_height(self, height: Any) -> "PeakFinder":
        require_bound_value("height", height)
        self.config.height = self.config.height.with_maximum(height)
        return self

    def with_min_threshold(self, threshold: Any) -> "PeakFinder":
        require_non_negative("threshold", threshold)
        self.config.threshold = self.config.threshold.with_minimum(threshold)
        return self

    def with_max_threshold(self, threshold: Any) -> "PeakFinder":
        require_non_negative("threshold", threshold)
        self.config.threshold = self.config.threshold.with_maximum(threshold)
        return self

    def with_min_plateau_size(self, size: int) -> "PeakFinder":
        require_non_negative("plateau size", size)
        self.config.plateau_size = self.config.plateau_size.with_minimum(size)
        return self

    def with_max_plateau_size(self, size: int) -> "PeakFinder":
        require_non_negative("plateau size", size)
        self.config.plateau_size = self.config.plateau_size.with_maximum(size)
        return self

    def with_min_distance(self, distance: Any) -> "PeakFinder":
        require_non_negative("distance", distance)
        self.config.distance = self.config.distance.with_minimum(distance)
        return self

    def with_max_distance(self, distance: Any) -> "PeakFinder":
        require_non_negative("distance", distance)
        self.config.distance = self.config.distance.with_maximum(distance)
        return self

    # --- execution -----------------------------------------------------

    def find_peaks(self) -> List[Peak]:
        """
        Run the detection pipeline.

        Only properties whose filter is configured are populated on the
        returned peaks; use `compute_properties` to fill the rest.

        Returns:
            Fresh list of peaks ordered by ascending middle position. Empty when
            the sequence is shorter than three samples or nothing passes.
        """
        data = self.data
        config = self.config.copy()
        for k in range(len(data)):
            value = data[k]
            if value != value:
                raise ValueError(f"data contains an unordered (NaN) value at index {k}")

        peaks = detect_local_maxima(data)
        logger.debug("local maxima: %d candidates", len(peaks))

        stages = [
            ("plateau_size", config.plateau_size, filter_by_plateau_size),
            ("height", config.height, lambda ps, b: filter_by_height(data, ps, b)),
            ("threshold", config.threshold, lambda ps, b: filter_by_threshold(data, ps, b)),
            ("distance", config.distance, lambda ps, b: select_by_distance(data, ps, b, self.coordinates)),
            ("prominence", config.prominence, lambda ps, b: filter_by_prominence(data, ps, b)),
        ]
        for name, bounds, stage in stages:
            if bounds.is_empty() or not peaks:
                continue
            if bounds.is_impossible():
                logger.debug("%s bounds %r admit no value; result will be empty", name, bounds)
            peaks = stage(peaks, bounds)
            logger.debug("after %s filter: %d peaks", name, len(peaks))

        peaks.sort(key=lambda p: p.middle_position)
        return peaks

    def compute_properties(self, peaks: Iterable[Peak]) -> List[Peak]:
        """Populate every optional field of the given peaks against this finder's data."""
        filled: List[Peak] = []
        for peak in peaks:
            compute_height(self.data, peak)
            compute_plateau_size(peak)
            compute_thresholds(self.data, peak)
            compute_prominence(self.data, peak)
            filled.append(peak)
        return filled
