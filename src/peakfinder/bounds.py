"""Inclusive (min, max) bounds and the filter configuration of `PeakFinder`."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Bounds:
    """
    Inclusive interval with optional ends.

    A missing end does not constrain that side. If both ends are set and
    minimum > maximum the interval is empty: `contains` is False for every
    value, so a filter configured this way rejects all candidates.
    """

    minimum: Any | None = None
    maximum: Any | None = None

    def is_empty(self) -> bool:
        """Return True when neither end is configured (filter disabled)."""
        return self.minimum is None and self.maximum is None

    def is_impossible(self) -> bool:
        """Return True when no value can satisfy the bounds."""
        return self.minimum is not None and self.maximum is not None and self.minimum > self.maximum

    def contains(self, value: Any) -> bool:
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True

    def with_minimum(self, minimum: Any) -> "Bounds":
        return replace(self, minimum=minimum)

    def with_maximum(self, maximum: Any) -> "Bounds":
        return replace(self, maximum=maximum)


@dataclass
class PeakFinderConfig:
    """フィルタごとの上下限をまとめた設定。空の Bounds はそのフィルタを無効にする。"""

    prominence: Bounds = field(default_factory=Bounds)
    height: Bounds = field(default_factory=Bounds)
    threshold: Bounds = field(default_factory=Bounds)
    plateau_size: Bounds = field(default_factory=Bounds)
    distance: Bounds = field(default_factory=Bounds)

    def copy(self) -> "PeakFinderConfig":
        # Bounds are frozen, a shallow copy is a full snapshot.
        return replace(self)


def require_bound_value(name: str, value: Any) -> Any:
    """Reject bound values that would silently disable or break the comparison."""
    if value is None:
        raise ValueError(f"{name} bound must not be None")
    if value != value:
        raise ValueError(f"{name} bound must not be NaN")
    return value


def require_non_negative(name: str, value: Any) -> Any:
    """Reject negative bound values for quantities that are distances or sizes."""
    require_bound_value(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value!r}")
    return value
