"""
Nearest-template shape classification.

A stroke is normalized, resampled and compared against every template with the
pointwise L1 distance. The closest template's label wins; ties go to the
template listed first. There is no rejection threshold, so any stroke that can
be prepared gets a label.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..utils.gesture_utils import PathSample
from .exceptions import DegenerateInput
from .normalizer import PathNormalizer
from .resampler import PathResampler
from .template_library import TemplateLibrary, get_template_library

logger = logging.getLogger(__name__)


@dataclass
class Match:
    """Closest template for a stroke."""
    label: str
    distance: float
    index: int


class ShapeClassifier:
    """Classifies single strokes against a template library."""

    def __init__(self, library: Optional[TemplateLibrary] = None,
                 normalizer: Optional[PathNormalizer] = None,
                 resampler: Optional[PathResampler] = None):
        """
        Args:
            library: Templates to match against. Defaults to the shared
                built-in library.
        """
        self.library = library if library is not None else get_template_library()
        self.normalizer = normalizer or PathNormalizer()
        self.resampler = resampler or PathResampler()

    def classify(self, points: Sequence[PathSample]) -> Optional[str]:
        """
        Classify a stroke.

        Args:
            points: Ordered (x, y) samples of one stroke

        Returns:
            Label of the closest template, or None for a degenerate stroke
        """
        match = self.nearest(points)
        return match.label if match else None

    def nearest(self, points: Sequence[PathSample]) -> Optional[Match]:
        """Closest template for a stroke, or None if the stroke is degenerate."""
        try:
            normalized = self.normalizer.normalize(points)
        except DegenerateInput as e:
            logger.debug(f"No gesture recognized: {e}")
            return None

        gesture = self.resampler.resample(normalized)

        best: Optional[Match] = None
        for index, template in enumerate(self.library):
            distance = gesture.distance(template.gesture)
            logger.debug(f"Template {template.name}: distance {distance:.4f}")
            if best is None or distance < best.distance:
                best = Match(template.name, distance, index)

        if best is not None:
            logger.debug(f"Best template: {best.label} with distance {best.distance:.4f}")
        return best


# Convenience function for simple usage
def classify_path(points: Sequence[PathSample]) -> Optional[str]:
    """
    Classify a stroke against the built-in templates.

    Args:
        points: Ordered (x, y) pairs, or dicts with 'x' and 'y' keys

    Returns:
        Template label, or None if the stroke is degenerate
    """
    return ShapeClassifier().classify(points)
