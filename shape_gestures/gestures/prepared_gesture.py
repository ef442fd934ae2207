"""
Fixed-resolution gesture descriptor.
"""

import numpy as np

from ..config.settings import GestureConfig

RESOLUTION = GestureConfig.RESOLUTION


class PreparedGesture:
    """
    A stroke resampled to exactly RESOLUTION points evenly spaced by arc length.

    Instances are immutable: the underlying array is read-only.
    """

    def __init__(self, points: np.ndarray):
        points = np.array(points, dtype=float)
        if points.shape != (RESOLUTION, 2):
            raise ValueError(
                f"PreparedGesture needs shape ({RESOLUTION}, 2), got {points.shape}"
            )
        points.setflags(write=False)
        self._points = points

    @property
    def points(self) -> np.ndarray:
        return self._points

    def distance(self, other: 'PreparedGesture') -> float:
        """Sum of |dx| + |dy| over every index position (pointwise L1)."""
        return float(np.sum(np.abs(self._points - other._points)))

    def __len__(self):
        return RESOLUTION

    def __iter__(self):
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __repr__(self):
        first = self._points[0]
        last = self._points[-1]
        return (f"PreparedGesture(({first[0]:.2f}, {first[1]:.2f}) -> "
                f"({last[0]:.2f}, {last[1]:.2f}))")
