"""Frame timing: delta time, FPS counting and frame-rate capping."""

import time


def _make_default_clock():
    origin = time.monotonic_ns()

    def clock():
        return (time.monotonic_ns() - origin) // 1_000_000

    return clock


def _default_sleep(milliseconds):
    time.sleep(milliseconds / 1000.0)


class FrameTimer:
    """Measures frame times in milliseconds and caps the frame rate.

    ``clock`` returns the current time in whole milliseconds and ``sleep``
    waits for a number of milliseconds.
    """

    MAX_FPS = 60
    FRAME_DELAY = 1000 // MAX_FPS
    MAX_DT = 50

    def __init__(self, clock=None, sleep=None):
        self._clock = clock if clock is not None else _make_default_clock()
        self._sleep = sleep if sleep is not None else _default_sleep
        self.delta_time = 0.0
        self.fps = 0
        self._frame_start = 0
        self._frame_time = 0
        self._last_frame = 0
        self._frame_count = 0
        self._last_fps_update = 0

    def compute_delta_time(self):
        """Start a frame; return the elapsed milliseconds, capped at MAX_DT."""
        self._frame_start = self._clock()
        dt = self._frame_start - self._last_frame
        self._last_frame = self._frame_start

        dt = min(dt, self.MAX_DT)
        self.delta_time = dt / 1000.0

        self._frame_count += 1
        if self._frame_start - self._last_fps_update >= 1000:
            self.fps = self._frame_count
            self._frame_count = 0
            self._last_fps_update = self._frame_start
        return dt

    def delay_time(self):
        """Sleep out the rest of the frame budget, if any is left."""
        self._frame_time = self._clock() - self._frame_start
        if self._frame_time < self.FRAME_DELAY:
            self._sleep(self.FRAME_DELAY - self._frame_time)