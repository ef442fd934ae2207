"""
Utilities package for stroke processing.

This package provides shared path conversions, geometry helpers and the
gesture logger used by the recognizer and the capture components.
"""

from .gesture_utils import (
    PathUtils,
    GeometryUtils,
)
from .logger import GestureLogger

__all__ = [
    'PathUtils',
    'GeometryUtils',
    'GestureLogger',
]
