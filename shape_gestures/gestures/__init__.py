"""
Single-stroke shape recognition.

This module normalizes and resamples freehand strokes and classifies them
against a fixed library of reference shapes.
"""

from .exceptions import DegenerateInput, InvalidTemplateDefinition
from .normalizer import NormalizedPath, PathNormalizer, normalize
from .prepared_gesture import RESOLUTION, PreparedGesture
from .resampler import PathResampler, resample
from .template_library import (
    TEMPLATE_DEFINITIONS,
    Template,
    TemplateLibrary,
    get_template_library,
)
from .shape_classifier import Match, ShapeClassifier, classify_path

__all__ = [
    'DegenerateInput',
    'InvalidTemplateDefinition',
    'NormalizedPath',
    'PathNormalizer',
    'normalize',
    'RESOLUTION',
    'PreparedGesture',
    'PathResampler',
    'resample',
    'TEMPLATE_DEFINITIONS',
    'Template',
    'TemplateLibrary',
    'get_template_library',
    'Match',
    'ShapeClassifier',
    'classify_path',
]
