"""
Touch listener that turns evdev events from one finger into classified strokes.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from evdev import ecodes

from ..config.settings import GestureConfig
from ..device.device_manager import DeviceManager
from ..gestures.shape_classifier import ShapeClassifier
from ..utils.logger import GestureLogger
from .stroke_session import StrokeSession

logger = logging.getLogger(__name__)

# Only the first touch point is followed
TRACKED_SLOT = 0


class StrokeListener:
    """Reads touch events in a background thread and classifies each stroke."""

    def __init__(self, device_manager: Optional[DeviceManager] = None,
                 classifier: Optional[ShapeClassifier] = None,
                 on_gesture: Optional[Callable[[Optional[str], List[Dict[str, Any]]], None]] = None,
                 gesture_logger: Optional[GestureLogger] = None):
        self.device_manager = device_manager or DeviceManager()
        self.logger = gesture_logger or GestureLogger(GestureConfig.DEBUG_LOG_FILE)
        self.on_gesture = on_gesture
        self.session = StrokeSession(classifier, on_gesture=self._handle_stroke)

        # Event state
        self.running = False
        self.multitouch = True
        self.current_slot = 0
        self.x: Optional[int] = None
        self.y: Optional[int] = None
        self._moved = False
        self._pressed = False
        self._released = False

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the listener. Returns False if no touch device was found."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touch device found")
            return False

        device_info = self.device_manager.get_device_info()
        self.multitouch = device_info['axis_x'] == ecodes.ABS_MT_POSITION_X
        self.running = True
        self._print_startup_info(device_info)

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
        self.logger.close()

    def _print_startup_info(self, device_info: Dict):
        print(f"✅ Found: {self.device_manager.device.name}")
        print(f"📺 Resolution: {device_info['screen_width']}x{device_info['screen_height']}")
        print(f"🎯 Ready! Draw a single stroke ({'multitouch' if self.multitouch else 'single touch'} device)")

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []
        except OSError as e:
            logger.error(f"Touch device read failed: {e}")
            self.running = False

    def _process_event_batch(self, event_batch):
        """Apply one SYN_REPORT frame of events, then update the stroke."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)
            elif ev.type == ecodes.EV_KEY and ev.code == ecodes.BTN_TOUCH and not self.multitouch:
                self._handle_touch(ev.value != 0)

        self._update_stroke()

    def _handle_abs_event(self, ev):
        if self.multitouch:
            if ev.code == ecodes.ABS_MT_SLOT:
                self.current_slot = ev.value
            elif self.current_slot != TRACKED_SLOT:
                return
            elif ev.code == ecodes.ABS_MT_TRACKING_ID:
                self._handle_touch(ev.value != -1)
            elif ev.code == ecodes.ABS_MT_POSITION_X:
                self._set_position(x=ev.value)
            elif ev.code == ecodes.ABS_MT_POSITION_Y:
                self._set_position(y=ev.value)
        else:
            if ev.code == ecodes.ABS_X:
                self._set_position(x=ev.value)
            elif ev.code == ecodes.ABS_Y:
                self._set_position(y=ev.value)

    def _handle_touch(self, down: bool):
        if down:
            self._pressed = True
        else:
            self._released = True

    def _set_position(self, x: Optional[int] = None, y: Optional[int] = None):
        if x is not None and x != self.x:
            self.x = x
            self._moved = True
        if y is not None and y != self.y:
            self.y = y
            self._moved = True

    def _update_stroke(self):
        has_position = self.x is not None and self.y is not None

        if self._pressed and has_position:
            self.session.begin(self.x, self.y)
            self._pressed = False
        elif self._moved and has_position and self.session.is_active:
            self.session.add(self.x, self.y)
        self._moved = False

        if self._released:
            self._pressed = False
            self._released = False
            self.session.end()

    def _handle_stroke(self, label: Optional[str], path: List[Dict[str, Any]]):
        self.logger.log_gesture(label, path)
        if self.on_gesture:
            self.on_gesture(label, path)
