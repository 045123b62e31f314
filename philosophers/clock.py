"""Millisecond clock relative to the start of a simulation."""

import time


def _wall_ms():
    return time.time_ns() // 1_000_000


class Clock:
    """Reports milliseconds elapsed since the recorded start.

    Before ``mark_start`` is called the start is 0, so ``now`` gives the
    absolute wall-clock time in milliseconds.
    """

    def __init__(self, time_source=None):
        self._source = time_source or _wall_ms
        self.start = 0

    def now(self):
        """Milliseconds since the start."""
        return self._source() - self.start

    def mark_start(self):
        """Record the current moment as the start of the simulation."""
        self.start = self._source()

    def sleep(self, duration):
        """Wait until ``duration`` milliseconds have passed."""
        scheduled = self.now() + duration
        while self.now() < scheduled:
            time.sleep(0.00001)