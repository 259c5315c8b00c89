"""Periodic repaint driver for the stopwatch display.

The stopwatch stays correct without it; every read goes back to the clock.
The driver only makes sure somebody reads often enough for the bar to move.
"""

from PySide6.QtCore import QObject, QTimer
from mt.common.logger import log

DEFAULT_INTERVAL_MS = 100
# Roughly one frame at 60 Hz.
MIN_INTERVAL_MS = 16


class RefreshDriver(QObject):
    """Repeats a read-only stopwatch query on a fixed cadence until cancelled.

    Each tick takes ``stopwatch.reading()`` and hands it to ``on_refresh``.
    Parent it to the owning window so the timer dies with the window even if
    ``cancel()`` is never reached.
    """

    def __init__(self, stopwatch, on_refresh, interval_ms=DEFAULT_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self.stopwatch = stopwatch
        self._on_refresh = on_refresh
        self._timer = QTimer(self)
        self._timer.setInterval(max(MIN_INTERVAL_MS, int(interval_ms)))
        self._timer.timeout.connect(self.tick)

    @property
    def interval_ms(self):
        return self._timer.interval()

    @property
    def active(self):
        return self._timer.isActive()

    def start(self):
        if not self._timer.isActive():
            self._timer.start()
            log.debug(f"Refresh driver started at {self.interval_ms} ms")

    def cancel(self):
        if self._timer.isActive():
            self._timer.stop()
            log.debug("Refresh driver cancelled")

    def tick(self):
        reading = self.stopwatch.reading()
        self._on_refresh(reading)
        return reading
