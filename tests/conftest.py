"""Shared pytest fixtures for the shape_gestures test suite.

Fixtures:
    classifier: ShapeClassifier over the shared built-in library
    library: the shared built-in TemplateLibrary
    square_cw / square_ccw: both windings of a 100x100 square
    make_events: builds fake evdev events from (type, code, value) tuples
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shape_gestures.gestures.shape_classifier import ShapeClassifier
from shape_gestures.gestures.template_library import get_template_library


@pytest.fixture
def library():
    return get_template_library()


@pytest.fixture
def classifier(library):
    return ShapeClassifier(library)


@pytest.fixture
def square_cw():
    """Clockwise square in screen coordinates (y down)."""
    return [(0, 0), (100, 0), (100, 100), (0, 100)]


@pytest.fixture
def square_ccw():
    """Counter-clockwise square in screen coordinates (y down)."""
    return [(0, 0), (0, 100), (100, 100), (100, 0)]


@pytest.fixture
def make_events():
    """Turn (type, code, value) tuples into objects shaped like evdev events."""
    def _make(*triples):
        return [SimpleNamespace(type=t, code=c, value=v) for t, c, v in triples]
    return _make
