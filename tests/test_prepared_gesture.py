"""Unit tests for the PreparedGesture descriptor and its distance."""

import numpy as np
import pytest

from shape_gestures.gestures.normalizer import normalize
from shape_gestures.gestures.prepared_gesture import RESOLUTION, PreparedGesture
from shape_gestures.gestures.resampler import resample


@pytest.fixture
def zigzag():
    return resample(normalize([(0, 0), (50, 100), (100, 0), (150, 100)]))


@pytest.fixture
def hook():
    return resample(normalize([(0, 0), (0, 100), (60, 100), (60, 40)]))


def test_rejects_wrong_length():
    with pytest.raises(ValueError):
        PreparedGesture(np.zeros((RESOLUTION - 1, 2)))


def test_rejects_wrong_dimensions():
    with pytest.raises(ValueError):
        PreparedGesture(np.zeros((RESOLUTION, 3)))


def test_points_are_immutable():
    gesture = PreparedGesture(np.zeros((RESOLUTION, 2)))

    with pytest.raises(ValueError):
        gesture.points[0, 0] = 1.0


def test_construction_copies_input():
    source = np.zeros((RESOLUTION, 2))
    gesture = PreparedGesture(source)
    source[0, 0] = 9.0

    assert gesture[0][0] == 0.0


def test_distance_is_sum_of_manhattan_differences():
    zeros = PreparedGesture(np.zeros((RESOLUTION, 2)))
    offset = PreparedGesture(np.tile([0.5, -0.25], (RESOLUTION, 1)))

    assert zeros.distance(offset) == pytest.approx(RESOLUTION * 0.75)


def test_distance_to_self_is_zero(zigzag):
    assert zigzag.distance(zigzag) == 0.0


def test_distance_is_symmetric_and_non_negative(zigzag, hook):
    forward = zigzag.distance(hook)

    assert forward == hook.distance(zigzag)
    assert forward > 0.0

