"""
Stroke capture between pointer press and release.
"""

import json
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from ..gestures.shape_classifier import ShapeClassifier

logger = logging.getLogger(__name__)

StrokeSample = Dict[str, Any]
GestureCallback = Callable[[Optional[str], List[Dict[str, Any]]], None]


class StrokeSession:
    """
    Collects the samples of one stroke and classifies it when it ends.

    Samples are stored as {'x', 'y', 't'} dicts. Only one stroke is active at
    a time; begin() while a stroke is active discards the unfinished one.
    """

    def __init__(self, classifier: Optional[ShapeClassifier] = None,
                 on_gesture: Optional[GestureCallback] = None):
        self.classifier = classifier or ShapeClassifier()
        self.on_gesture = on_gesture

        self.current_path: List[Dict[str, Any]] = []
        self.is_active = False
        self.last_path: List[Dict[str, Any]] = []
        self.last_label: Optional[str] = None

    def begin(self, x: float, y: float, t: Optional[float] = None):
        """Start a new stroke at (x, y)."""
        if self.is_active:
            logger.debug(f"Discarding unfinished stroke with {len(self.current_path)} samples")
        self.current_path = []
        self.is_active = True
        self._append(x, y, t)

    def add(self, x: float, y: float, t: Optional[float] = None):
        """Add a sample to the active stroke. Ignored when no stroke is active."""
        if not self.is_active:
            return
        self._append(x, y, t)

    def end(self) -> Optional[str]:
        """
        Finish the active stroke and classify it.

        Returns:
            The recognized label, or None for a degenerate stroke or when no
            stroke was active
        """
        if not self.is_active:
            return None

        path = self.current_path
        self.current_path = []
        self.is_active = False

        label = self.classifier.classify(path)
        self.last_path = path
        self.last_label = label

        if self.on_gesture:
            self.on_gesture(label, path)
        return label

    def cancel(self):
        """Drop the active stroke without classifying it."""
        self.current_path = []
        self.is_active = False

    def _append(self, x: float, y: float, t: Optional[float]):
        self.current_path.append({
            'x': float(x),
            'y': float(y),
            't': time.time() if t is None else float(t),
        })


def save_stroke(filename: str, path: List[StrokeSample], label: Optional[str]):
    """Write a stroke and its label as JSON."""
    data = {
        "path": path,
        "recognized_as": label,
    }
    with open(filename, "w") as f:
        json.dump(data, f, indent=2)


def load_stroke(filename: str) -> List[StrokeSample]:
    """
    Read the samples of a stroke written by save_stroke().

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or has no "path" list
    """
    with open(filename, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{filename} is not valid JSON: {e}") from e

    try:
        path = data["path"]
    except (KeyError, TypeError) as e:
        raise ValueError(f"{filename} has no stroke path") from e
    if not isinstance(path, list):
        raise ValueError(f"{filename} stroke path must be a list, got {type(path).__name__}")
    return path
