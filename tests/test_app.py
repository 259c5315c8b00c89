"""Tests for the main window's wiring (mt.ui.app).

The window runs on the offscreen platform with a ManualClock. Handlers are called
directly and the Shift modifier is patched, so no real input events are sent.
"""

import os
import unittest
from unittest import mock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication


_app = None


def setUpModule():
    global _app
    _app = QApplication.instance() or QApplication([])


class _WindowTestCase(unittest.TestCase):

    def setUp(self):
        from mt.core import config
        from mt.core.clock import ManualClock
        from mt.ui.app import MainWindow
        self.settings = config.build_default_settings()
        self.settings["confirm_reset"] = False
        self.clock = ManualClock()
        self.window = MainWindow(self.settings, 10, clock=self.clock)
        self.addCleanup(self._dispose)

    def _dispose(self):
        self.window.close()
        self.window._refresh.cancel()
        self.window.deleteLater()

    def _shift(self, held):
        return mock.patch("mt.ui.app._shift_down", return_value=held)


# ────────────────────────────────────────────────────────────
# Timer controls
# ────────────────────────────────────────────────────────────

class TestTimerControls(_WindowTestCase):

    def test_next_records_lap_and_keeps_running(self):
        self.window._on_toggle()
        self.clock.advance(3)
        with self._shift(False):
            self.window._on_next()

        self.assertEqual(self.window.laps, [3.0])
        self.assertTrue(self.window.stopwatch.running)
        self.assertEqual(self.window.stopwatch.elapsed, 0.0)
        self.assertTrue(self.window._laps_lbl.isVisibleTo(self.window))
        self.assertIn("#1 00:03", self.window._laps_lbl.text())

    def test_toggle_flips_button_glyph(self):
        from mt.ui.row_factory import TOGGLE_PAUSE, TOGGLE_PLAY
        toggle = self.window._ctrl_widgets["toggle"]
        self.assertEqual(toggle.text(), TOGGLE_PLAY)
        self.window._on_toggle()
        self.assertEqual(toggle.text(), TOGGLE_PAUSE)
        self.window._on_toggle()
        self.assertEqual(toggle.text(), TOGGLE_PLAY)

    def test_add_time_adds_and_shift_subtracts(self):
        with self._shift(False):
            self.window._on_add_time()
        self.assertEqual(self.window.stopwatch.total, 40.0)

        with self._shift(True):
            self.window._on_add_time()
            self.window._on_add_time()
        self.assertEqual(self.window.stopwatch.total, -20.0)
        self.assertEqual(self.window._bar_widgets["bar"].format(), "-00:20")

    def test_reset_clears_laps(self):
        self.window._on_toggle()
        self.clock.advance(2)
        with self._shift(False):
            self.window._on_next()
        self.clock.advance(1)
        self.window._reset_timer()

        self.assertEqual(self.window.laps, [])
        self.assertFalse(self.window.stopwatch.running)
        self.assertEqual(self.window.stopwatch.elapsed, 0.0)
        self.assertFalse(self.window._laps_lbl.isVisibleTo(self.window))

    def test_shift_next_resets_instead_of_lapping(self):
        self.window._on_toggle()
        self.clock.advance(4)
        with self._shift(True):
            self.window._on_next()

        self.assertEqual(self.window.laps, [])
        self.assertFalse(self.window.stopwatch.running)
        self.assertEqual(self.window.stopwatch.elapsed, 0.0)

    def test_reset_asks_first_when_confirming(self):
        from PySide6.QtWidgets import QMessageBox
        self.window.confirm_reset = True
        self.window._on_toggle()
        self.clock.advance(2)
        with mock.patch.object(QMessageBox, "question", return_value=QMessageBox.No) as asked:
            self.window._reset_timer()

        asked.assert_called_once()
        self.assertTrue(self.window.stopwatch.running)
        self.assertEqual(self.window.stopwatch.elapsed, 2.0)


# ────────────────────────────────────────────────────────────
# Display
# ────────────────────────────────────────────────────────────

class TestOverrunDisplay(_WindowTestCase):

    def test_overrun_colour_follows_whole_seconds(self):
        bar = self.window._bar_widgets["bar"]
        self.window._on_toggle()

        self.clock.set(10.5)
        self.window._refresh.tick()
        self.assertEqual(bar.format(), "00:00")
        self.assertFalse(self.window._overrun)

        self.clock.set(11)
        self.window._refresh.tick()
        self.assertEqual(bar.format(), "-00:01")
        self.assertTrue(self.window._overrun)
        self.assertIn(self.window.blueprint.theme["overrun_text"], bar.styleSheet())

    def test_bar_fills_with_progress(self):
        from mt.ui.row_factory import PROGRESS_STEPS
        self.window._on_toggle()
        self.clock.set(2.5)
        self.window._refresh.tick()
        self.assertEqual(self.window._bar_widgets["bar"].value(), PROGRESS_STEPS // 4)


# ────────────────────────────────────────────────────────────
# Checklist editing
# ────────────────────────────────────────────────────────────

class TestChecklistEditing(_WindowTestCase):

    def setUp(self):
        super().setUp()
        self.item = self.window.checklist.add("Buy milk")
        self.window._rebuild_checklist()

    def test_escape_restores_text_from_before_edit(self):
        self.window._on_item_edit_start(self.item.id)
        self.window._on_item_edit_text(self.item.id, "Buy")
        self.window._on_item_cancel(self.item.id)

        self.assertIsNone(self.window._editing_id)
        self.assertEqual(self.window.checklist.get(self.item.id).description, "Buy milk")

    def test_escape_after_clearing_text_keeps_item(self):
        self.window._on_item_edit_start(self.item.id)
        self.window._on_item_edit_text(self.item.id, "")
        self.window._on_item_cancel(self.item.id)

        self.assertEqual(len(self.window.checklist), 1)
        self.assertEqual(self.window.checklist.get(self.item.id).description, "Buy milk")

    def test_commit_of_blank_text_drops_item(self):
        self.window._on_item_edit_start(self.item.id)
        self.window._on_item_edit_text(self.item.id, "   ")
        self.window._on_item_commit(self.item.id)

        self.assertIsNone(self.window.checklist.get(self.item.id))

    def test_add_item_from_footer(self):
        self.window._add_input.setText("  Call Sam  ")
        self.window._on_add_item()
        self.assertEqual([i.description for i in self.window.checklist], ["Buy milk", "Call Sam"])
        self.assertEqual(self.window._add_input.text(), "")

        self.window._add_input.setText("   ")
        self.window._on_add_item()
        self.assertEqual(len(self.window.checklist), 2)


# ────────────────────────────────────────────────────────────
# Window close
# ────────────────────────────────────────────────────────────

class TestWindowClose(_WindowTestCase):

    def test_driver_runs_until_close(self):
        self.assertTrue(self.window._refresh.active)
        self.window.show()
        self.window._on_toggle()
        self.clock.advance(3)
        with self._shift(False):
            self.window._on_next()
        self.assertEqual(self.window.laps, [3.0])

        self.window.close()

        self.assertFalse(self.window._refresh.active)
        self.assertTrue(self.window.stopwatch.running)


if __name__ == "__main__":
    unittest.main()
