"""
Device management for touch input discovery and initialization.
"""

import logging

import evdev
from evdev import ecodes

from ..config.settings import GestureConfig

logger = logging.getLogger(__name__)

# Multitouch axes first, then single-touch axes
POSITION_AXES = (
    (ecodes.ABS_MT_POSITION_X, ecodes.ABS_MT_POSITION_Y),
    (ecodes.ABS_X, ecodes.ABS_Y),
)


class DeviceManager:
    """Manages touch device discovery and initialization."""

    def __init__(self):
        self.device = None
        self.axis_x = None
        self.axis_y = None
        self.screen_width = GestureConfig.DEFAULT_SCREEN_WIDTH
        self.screen_height = GestureConfig.DEFAULT_SCREEN_HEIGHT

    def find_device(self):
        """Find the first device reporting absolute X/Y positions."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        for device in devices:
            caps = device.capabilities()
            abs_caps = caps.get(ecodes.EV_ABS, [])
            abs_info = {code: info for code, info in abs_caps}

            for axis_x, axis_y in POSITION_AXES:
                if axis_x in abs_info and axis_y in abs_info:
                    self.device = device
                    self.axis_x = axis_x
                    self.axis_y = axis_y
                    self.screen_width = abs_info[axis_x].max + 1
                    self.screen_height = abs_info[axis_y].max + 1
                    logger.info(f"Found touch device: {device.name}")
                    logger.info(f"Resolution: {self.screen_width}x{self.screen_height}")
                    return device

        logger.error("No touch device found")
        return None

    def get_device_info(self):
        """Get device and screen information."""
        return {
            'device': self.device,
            'axis_x': self.axis_x,
            'axis_y': self.axis_y,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height,
        }
