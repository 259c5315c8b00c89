"""Tests for the periodic refresh driver (mt.ui.refresh).

Ticks are driven by calling tick() directly; the event loop is never run.
"""

import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication


_app = None


def setUpModule():
    global _app
    _app = QApplication.instance() or QApplication([])


class TestRefreshDriver(unittest.TestCase):

    def setUp(self):
        from mt.core.clock import ManualClock
        from mt.core.stopwatch import Stopwatch
        self.clock = ManualClock(0.0)
        self.sw = Stopwatch(self.clock, 2)
        self.readings = []

    def _driver(self, **kwargs):
        from mt.ui.refresh import RefreshDriver
        driver = RefreshDriver(self.sw, self.readings.append, **kwargs)
        self.addCleanup(driver.cancel)
        return driver

    def test_default_cadence(self):
        driver = self._driver()
        self.assertEqual(driver.interval_ms, 100)

    def test_cadence_has_a_floor(self):
        from mt.ui.refresh import MIN_INTERVAL_MS
        driver = self._driver(interval_ms=1)
        self.assertEqual(driver.interval_ms, MIN_INTERVAL_MS)

    def test_start_and_cancel(self):
        driver = self._driver(interval_ms=66)
        self.assertFalse(driver.active)
        driver.start()
        self.assertTrue(driver.active)
        driver.start()  # no-op (already active)
        self.assertTrue(driver.active)
        driver.cancel()
        self.assertFalse(driver.active)
        driver.cancel()
        self.assertFalse(driver.active)

    def test_tick_reports_current_reading(self):
        driver = self._driver()
        self.sw.start()
        self.clock.set(1)
        reading = driver.tick()
        self.assertEqual(self.readings, [reading])
        self.assertEqual(reading.remaining, 1.0)
        self.assertEqual(reading.progress, 0.5)
        self.assertTrue(reading.running)

    def test_tick_does_not_mutate_stopwatch(self):
        driver = self._driver()
        self.sw.start()
        self.clock.set(0.5)
        for _ in range(10):
            driver.tick()
        self.assertTrue(self.sw.running)
        self.assertEqual(self.sw.elapsed, 0.5)
        self.sw.stop()
        for _ in range(10):
            driver.tick()
        self.assertFalse(self.sw.running)
        self.assertEqual(self.sw.elapsed, 0.5)

    def test_tick_count_does_not_drive_elapsed(self):
        """Elapsed follows the clock, no matter how many ticks fired."""
        driver = self._driver()
        self.sw.start()
        driver.tick()
        driver.tick()
        self.clock.set(1.5)
        self.assertEqual(driver.tick().elapsed, 1.5)

    def test_timer_is_owned_by_parent(self):
        from PySide6.QtCore import QObject
        from mt.ui.refresh import RefreshDriver
        parent = QObject()
        driver = RefreshDriver(self.sw, self.readings.append, parent=parent)
        self.assertIs(driver.parent(), parent)


class TestControlLabels(unittest.TestCase):

    def test_add_time_label_flips_with_shift(self):
        from mt.ui.row_factory import add_time_label
        self.assertEqual(add_time_label(30, False), "+30s")
        self.assertEqual(add_time_label(30, True), "-30s")


if __name__ == "__main__":
    unittest.main()
