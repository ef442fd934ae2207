"""
Logging utilities for recognized strokes.
"""

import datetime
import logging
from typing import Any, Dict, List, Optional

from .gesture_utils import GeometryUtils, PathUtils

logger = logging.getLogger(__name__)


class GestureLogger:
    """Prints recognized strokes and optionally mirrors them to a debug file."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file {debug_file}: {e}")
                self.debug_file = None

    @staticmethod
    def _timestamp() -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def log_gesture(self, label: Optional[str], path: List[Dict[str, Any]]):
        """Log the outcome of one completed stroke."""
        timestamp = self._timestamp()
        point_count = len(path)

        if label is None:
            print(f"[{timestamp}] 👆 NO GESTURE: {point_count} sample(s)")
        else:
            print(f"[{timestamp}] ✏️  GESTURE: {label} [{point_count} samples]")
            if path:
                start, end = path[0], path[-1]
                print(f"   Start: ({int(start['x'])}, {int(start['y'])})")
                print(f"   End: ({int(end['x'])}, {int(end['y'])})")
                length = GeometryUtils.calculate_path_length(PathUtils.to_array(path))
                print(f"   Length: {int(length)}px")

        self._write_debug(f"[{timestamp}] label={label} samples={point_count}\n")

    def _write_debug(self, message: str):
        if self.debug_file:
            self.debug_file.write(message)
            self.debug_file.flush()

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
