"""
Shape Gestures Package
Single-stroke shape recognition for touch and pointer input.

The touch listener lives in shape_gestures.core.listener and needs evdev.
"""

from .gestures.shape_classifier import ShapeClassifier, classify_path
from .gestures.template_library import TemplateLibrary, get_template_library
from .core.stroke_session import StrokeSession

__version__ = "1.0.0"
__all__ = ["ShapeClassifier", "classify_path", "TemplateLibrary",
           "get_template_library", "StrokeSession"]
