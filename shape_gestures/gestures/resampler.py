"""
Arc-length resampling.

Converts a normalized path of any length into RESOLUTION points placed at
uniform fractions of the total distance travelled along it.
"""

import logging

import numpy as np

from ..utils.gesture_utils import GeometryUtils
from .normalizer import NormalizedPath
from .prepared_gesture import RESOLUTION, PreparedGesture

logger = logging.getLogger(__name__)


class PathResampler:
    """Resamples normalized paths into PreparedGesture descriptors."""

    @staticmethod
    def locate_segments(segment_ends: np.ndarray, targets: np.ndarray) -> np.ndarray:
        """
        Index of the segment holding each target distance.

        Segment k covers the inclusive range [end[k-1], end[k]]. The first
        segment in path order that contains the target wins, so a target equal
        to a shared boundary maps to the earlier segment. Targets past the end
        (rounding) map to the last segment.
        """
        index = np.searchsorted(segment_ends, targets, side='left')
        return np.minimum(index, len(segment_ends) - 1)

    def resample(self, path: NormalizedPath) -> PreparedGesture:
        """
        Resample a path to RESOLUTION evenly spaced points.

        Sample i sits at distance (i / (RESOLUTION - 1)) * total_length along
        the path, linearly interpolated inside its segment.

        Args:
            path: Normalized path with at least 2 points

        Returns:
            PreparedGesture whose first and last points are the path's own
        """
        points = np.asarray(path.points, dtype=float)

        lengths = GeometryUtils.segment_lengths(points)
        ends = np.cumsum(lengths)
        starts = np.concatenate(([0.0], ends[:-1]))
        total = ends[-1]

        targets = np.arange(RESOLUTION) / (RESOLUTION - 1) * total
        index = self.locate_segments(ends, targets)

        seg_lengths = lengths[index]
        safe_lengths = np.where(seg_lengths > 0.0, seg_lengths, 1.0)
        t = np.clip((targets - starts[index]) / safe_lengths, 0.0, 1.0)[:, np.newaxis]

        resampled = points[index] * (1.0 - t) + points[index + 1] * t
        resampled[0] = points[0]
        resampled[-1] = points[-1]

        logger.debug("Resampled %d points (length %.3f) to %d", len(points), total, RESOLUTION)
        return PreparedGesture(resampled)


_default_resampler = PathResampler()


def resample(path: NormalizedPath) -> PreparedGesture:
    """Resample a normalized path with the default resampler."""
    return _default_resampler.resample(path)
