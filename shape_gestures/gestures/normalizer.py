"""
Path normalization.

Removes consecutive duplicate samples and rescales a raw stroke into a square
frame centred on its bounding box. The same scale is applied to both axes, so
the longer axis spans exactly [-1, 1] and the aspect ratio is preserved.
"""

import logging
from typing import Sequence

import numpy as np

from ..config.settings import GestureConfig
from ..utils.gesture_utils import PathSample, PathUtils
from .exceptions import DegenerateInput

logger = logging.getLogger(__name__)


class NormalizedPath:
    """An ordered, deduplicated path inside the normalized frame."""

    def __init__(self, points: np.ndarray):
        self.points = points
        self.points.setflags(write=False)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def __repr__(self):
        return f"NormalizedPath({len(self.points)} points)"


class PathNormalizer:
    """Translates and uniformly scales raw strokes into the normalized frame."""

    def __init__(self, half_extent: float = GestureConfig.HALF_EXTENT):
        self.half_extent = half_extent

    def normalize(self, points: Sequence[PathSample]) -> NormalizedPath:
        """
        Normalize a raw stroke.

        Args:
            points: Ordered (x, y) samples of one stroke

        Returns:
            NormalizedPath with one point per deduplicated sample

        Raises:
            DegenerateInput: If fewer than 2 distinct consecutive points remain,
                or the bounding box has no extent
        """
        raw = PathUtils.to_array(points)
        dedup = PathUtils.remove_consecutive_duplicates(raw)
        if len(dedup) < 2:
            raise DegenerateInput(
                f"Need at least 2 distinct points, got {len(dedup)} from {len(raw)} samples"
            )

        if not np.isfinite(dedup).all():
            raise DegenerateInput("Path contains non-finite coordinates")

        min_x, max_x, min_y, max_y = PathUtils.get_path_bounds(dedup)
        center = np.array([(max_x + min_x) / 2.0, (max_y + min_y) / 2.0])
        half_size = max((max_x - min_x) / 2.0, (max_y - min_y) / 2.0)

        if half_size == 0.0:
            raise DegenerateInput("Path bounding box has zero extent")
        # Finite coordinates can still overflow once subtracted or added
        if not np.isfinite(half_size) or not np.isfinite(center).all():
            raise DegenerateInput(f"Path extent overflows (half size {half_size})")

        normalized = (dedup - center) / half_size * self.half_extent
        logger.debug(
            "Normalized %d samples to %d points (half size %.3f)",
            len(raw), len(normalized), half_size
        )
        return NormalizedPath(normalized)


_default_normalizer = PathNormalizer()


def normalize(points: Sequence[PathSample]) -> NormalizedPath:
    """Normalize a raw stroke with the default normalizer."""
    return _default_normalizer.normalize(points)
