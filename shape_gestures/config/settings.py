"""
Configuration settings for the shape gesture recognizer.
"""

import logging


class GestureConfig:
    """Configuration constants for stroke capture and shape recognition."""

    # Number of samples in a prepared gesture descriptor
    RESOLUTION = 128

    # Normalized paths fit inside [-HALF_EXTENT, HALF_EXTENT] on the longer axis
    HALF_EXTENT = 1.0

    # Drawing pad (in pixels)
    CANVAS_SIZE = 512
    WINDOW_WIDTH = 640
    WINDOW_HEIGHT = 680
    MARKER_RADIUS = 4
    STROKE_WIDTH = 3
    SAVED_STROKE_FILE = 'saved_stroke.json'

    # Touch device discovery
    DEFAULT_SCREEN_WIDTH = 1920
    DEFAULT_SCREEN_HEIGHT = 1080

    # Logging
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
    DEBUG_LOG_FILE = None  # e.g. 'gesture_debug.log'
