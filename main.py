#!/usr/bin/env python3
"""
Shape Gestures - Main Entry Point
Listens to a touch device and prints the shape recognized for each stroke.
"""

import logging
import time

from shape_gestures.config.settings import GestureConfig
from shape_gestures.core.listener import StrokeListener
from shape_gestures.gestures.template_library import get_template_library

def main():
    """Main entry point for the stroke listener."""
    logging.basicConfig(level=GestureConfig.LOG_LEVEL, format=GestureConfig.LOG_FORMAT)

    # Build templates up front so the first stroke is not delayed
    get_template_library()

    listener = StrokeListener()

    if not listener.start():
        return

    try:
        while listener.running:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()

if __name__ == "__main__":
    main()
