"""Clock sources for the stopwatch engine.

Instants are plain float seconds. The engine only ever calls ``now()`` and
never assumes which source it was handed.
"""

import time


class Clock:
    """Capability that reports the current instant."""

    def now(self):
        raise NotImplementedError


class MonotonicClock(Clock):
    """Real source backed by time.monotonic() (immune to wall-clock changes)."""

    def now(self):
        return time.monotonic()


class ManualClock(Clock):
    """Deterministic source that only moves when told to.

    Copies share nothing; hand the same instance to the stopwatch and to the
    code that advances it.
    """

    def __init__(self, start=0.0):
        self._now = float(start)

    def now(self):
        return self._now

    def advance(self, seconds):
        self._now += float(seconds)

    def set(self, instant):
        self._now = float(instant)

    def __repr__(self):
        return f"ManualClock(now={self._now})"
