"""Tests for the evdev stroke listener and device discovery."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

evdev = pytest.importorskip("evdev")
from evdev import ecodes

from shape_gestures.core.listener import StrokeListener
from shape_gestures.device.device_manager import DeviceManager

EV_ABS, EV_KEY, EV_SYN = ecodes.EV_ABS, ecodes.EV_KEY, ecodes.EV_SYN
SYN = (EV_SYN, ecodes.SYN_REPORT, 0)


def mt_frame(*events):
    return list(events) + [SYN]


@pytest.fixture
def on_gesture():
    return MagicMock()


@pytest.fixture
def gesture_logger():
    return MagicMock()


@pytest.fixture
def listener(classifier, on_gesture, gesture_logger):
    return StrokeListener(device_manager=MagicMock(), classifier=classifier,
                          on_gesture=on_gesture, gesture_logger=gesture_logger)


def feed(listener, make_events, frames):
    for frame in frames:
        listener._process_event_batch(make_events(*frame))


def downward_mt_stroke():
    return [
        mt_frame((EV_ABS, ecodes.ABS_MT_SLOT, 0),
                 (EV_ABS, ecodes.ABS_MT_TRACKING_ID, 7),
                 (EV_ABS, ecodes.ABS_MT_POSITION_X, 300),
                 (EV_ABS, ecodes.ABS_MT_POSITION_Y, 100)),
        mt_frame((EV_ABS, ecodes.ABS_MT_POSITION_Y, 150)),
        mt_frame((EV_ABS, ecodes.ABS_MT_POSITION_Y, 200)),
        mt_frame((EV_ABS, ecodes.ABS_MT_TRACKING_ID, -1)),
    ]


class TestMultitouchEvents:
    """Type B multitouch devices."""

    def test_stroke_is_classified_on_lift(self, listener, make_events, on_gesture, gesture_logger):
        feed(listener, make_events, downward_mt_stroke())

        on_gesture.assert_called_once()
        label, path = on_gesture.call_args[0]
        assert label == "down"
        assert [(p['x'], p['y']) for p in path] == [(300, 100), (300, 150), (300, 200)]
        gesture_logger.log_gesture.assert_called_once_with("down", path)

    def test_other_slots_are_ignored(self, listener, make_events, on_gesture):
        frames = downward_mt_stroke()
        frames.insert(2, mt_frame((EV_ABS, ecodes.ABS_MT_SLOT, 1),
                                  (EV_ABS, ecodes.ABS_MT_TRACKING_ID, 8),
                                  (EV_ABS, ecodes.ABS_MT_POSITION_X, 900),
                                  (EV_ABS, ecodes.ABS_MT_POSITION_Y, 900),
                                  (EV_ABS, ecodes.ABS_MT_SLOT, 0)))

        feed(listener, make_events, frames)

        label, path = on_gesture.call_args[0]
        assert label == "down"
        assert all(p['x'] == 300 for p in path)

    def test_tap_reports_no_gesture(self, listener, make_events, on_gesture):
        feed(listener, make_events, [
            mt_frame((EV_ABS, ecodes.ABS_MT_TRACKING_ID, 3),
                     (EV_ABS, ecodes.ABS_MT_POSITION_X, 10),
                     (EV_ABS, ecodes.ABS_MT_POSITION_Y, 10)),
            mt_frame((EV_ABS, ecodes.ABS_MT_TRACKING_ID, -1)),
        ])

        on_gesture.assert_called_once()
        assert on_gesture.call_args[0][0] is None

    def test_motion_without_touch_is_ignored(self, listener, make_events, on_gesture):
        feed(listener, make_events, [
            mt_frame((EV_ABS, ecodes.ABS_MT_POSITION_X, 10)),
            mt_frame((EV_ABS, ecodes.ABS_MT_POSITION_Y, 10)),
        ])

        assert not listener.session.is_active
        on_gesture.assert_not_called()


class TestSingleTouchEvents:
    """Devices reporting ABS_X/ABS_Y and BTN_TOUCH."""

    def test_left_swipe(self, listener, make_events, on_gesture):
        listener.multitouch = False

        feed(listener, make_events, [
            [(EV_KEY, ecodes.BTN_TOUCH, 1), (EV_ABS, ecodes.ABS_X, 500), (EV_ABS, ecodes.ABS_Y, 40), SYN],
            [(EV_ABS, ecodes.ABS_X, 400), SYN],
            [(EV_ABS, ecodes.ABS_X, 300), SYN],
            [(EV_KEY, ecodes.BTN_TOUCH, 0), SYN],
        ])

        assert on_gesture.call_args[0][0] == "left"


class TestLifecycle:
    """start() and stop()."""

    def test_start_without_device(self, classifier, gesture_logger):
        manager = MagicMock()
        manager.find_device.return_value = None
        listener = StrokeListener(device_manager=manager, classifier=classifier,
                                  gesture_logger=gesture_logger)

        assert listener.start() is False
        assert listener.thread is None

    def test_event_loop_reads_device(self, classifier, gesture_logger, make_events, on_gesture):
        events = make_events(*[event for frame in downward_mt_stroke() for event in frame])
        manager = MagicMock()
        manager.device.read_loop.return_value = iter(events)
        manager.find_device.return_value = manager.device
        manager.get_device_info.return_value = {
            'device': manager.device,
            'axis_x': ecodes.ABS_MT_POSITION_X,
            'axis_y': ecodes.ABS_MT_POSITION_Y,
            'screen_width': 1920,
            'screen_height': 1080,
        }
        listener = StrokeListener(device_manager=manager, classifier=classifier,
                                  on_gesture=on_gesture, gesture_logger=gesture_logger)

        assert listener.start() is True
        listener.thread.join(timeout=5)
        listener.stop()

        assert listener.multitouch is True
        assert on_gesture.call_args[0][0] == "down"
        gesture_logger.close.assert_called_once()


class TestDeviceManager:
    """Touch device discovery."""

    @staticmethod
    def _device(name, abs_axes):
        device = MagicMock()
        device.name = name
        caps = {ecodes.EV_KEY: [ecodes.KEY_A]}
        if abs_axes:
            caps[ecodes.EV_ABS] = [(code, SimpleNamespace(max=maximum)) for code, maximum in abs_axes]
        device.capabilities.return_value = caps
        return device

    def _find(self, devices):
        by_path = {f"/dev/input/event{i}": d for i, d in enumerate(devices)}
        manager = DeviceManager()
        with patch("shape_gestures.device.device_manager.evdev.list_devices", return_value=list(by_path)), \
             patch("shape_gestures.device.device_manager.evdev.InputDevice", side_effect=by_path.__getitem__):
            found = manager.find_device()
        return manager, found

    def test_picks_first_device_with_position_axes(self):
        keyboard = self._device("keyboard", [])
        pen = self._device("pen", [(ecodes.ABS_X, 4095), (ecodes.ABS_Y, 2047)])

        manager, found = self._find([keyboard, pen])

        assert found is pen
        info = manager.get_device_info()
        assert info['axis_x'] == ecodes.ABS_X
        assert (info['screen_width'], info['screen_height']) == (4096, 2048)

    def test_prefers_multitouch_axes(self):
        screen = self._device("touchscreen", [
            (ecodes.ABS_X, 100), (ecodes.ABS_Y, 100),
            (ecodes.ABS_MT_POSITION_X, 1279), (ecodes.ABS_MT_POSITION_Y, 799),
        ])

        manager, found = self._find([screen])

        assert found is screen
        assert manager.axis_x == ecodes.ABS_MT_POSITION_X
        assert manager.screen_width == 1280

    def test_no_device(self):
        manager, found = self._find([self._device("keyboard", [])])

        assert found is None
        assert manager.device is None
