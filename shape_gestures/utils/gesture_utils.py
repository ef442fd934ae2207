"""
Shared utilities for stroke processing.

This module provides the array conversions and geometric helpers used by the
normalizer, the resampler and the stroke capture components.
"""

from typing import Dict, Sequence, Tuple, Union

import numpy as np

PathSample = Union[Sequence[float], Dict[str, float]]


class PathUtils:
    """Utility class for path processing."""

    @staticmethod
    def to_array(path: Sequence[PathSample]) -> np.ndarray:
        """
        Convert a path into an (n, 2) float array.

        Args:
            path: (x, y) pairs, or dicts with 'x' and 'y' keys as stored by
                the stroke session and the touch listener

        Returns:
            Array of shape (n, 2); (0, 2) for an empty path

        Raises:
            ValueError: If a sample is not a coordinate pair
        """
        if isinstance(path, np.ndarray):
            points = path.astype(float, copy=True)
        else:
            points = np.array(
                [PathUtils._sample_to_pair(sample) for sample in path], dtype=float
            )

        if points.size == 0:
            return np.empty((0, 2), dtype=float)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Path must be a sequence of (x, y) pairs, got shape {points.shape}")
        return points

    @staticmethod
    def _sample_to_pair(sample: PathSample) -> Tuple[float, float]:
        if isinstance(sample, dict):
            try:
                return float(sample['x']), float(sample['y'])
            except KeyError as e:
                raise ValueError(f"Path sample is missing key {e}") from e
        try:
            x, y = sample
        except (TypeError, ValueError) as e:
            raise ValueError(f"Path sample must be an (x, y) pair, got {sample!r}") from e
        return float(x), float(y)

    @staticmethod
    def remove_consecutive_duplicates(points: np.ndarray) -> np.ndarray:
        """Drop points equal (on both axes) to the point before them."""
        if len(points) < 2:
            return points.copy()
        changed = np.any(points[1:] != points[:-1], axis=1)
        keep = np.concatenate(([True], changed))
        return points[keep]

    @staticmethod
    def get_path_bounds(points: np.ndarray) -> Tuple[float, float, float, float]:
        """Get bounding box of a path as (min_x, max_x, min_y, max_y)."""
        if len(points) == 0:
            return 0.0, 0.0, 0.0, 0.0

        min_x, min_y = points.min(axis=0)
        max_x, max_y = points.max(axis=0)
        return float(min_x), float(max_x), float(min_y), float(max_y)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def segment_lengths(points: np.ndarray) -> np.ndarray:
        """Euclidean length of each consecutive segment."""
        deltas = np.diff(points, axis=0)
        return np.sqrt(np.sum(deltas ** 2, axis=1))

    @staticmethod
    def calculate_path_length(points: np.ndarray) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0
        return float(np.sum(GeometryUtils.segment_lengths(points)))
