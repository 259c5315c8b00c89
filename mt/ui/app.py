import sys
from PySide6.QtCore import Qt, QEvent, QTimer
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)
from mt.common.logger import log
from mt.core import config
from mt.core.checklist import Checklist
from mt.core.clock import MonotonicClock
from mt.core.stopwatch import Stopwatch
from mt.ui.dialogs import LobbyDialog
from mt.ui.drag import DragController
from mt.ui.refresh import RefreshDriver
from mt.ui.row_factory import RowFactory, PROGRESS_STEPS, TOGGLE_PAUSE, TOGGLE_PLAY, add_time_label
from mt.ui.theme import THEMES, SIZES, build_stylesheet
from mt.ui.ui_blueprint import UIBlueprint
from mt.util import format_countdown

FONT_FAMILY = "Calibri"


def _shift_down():
    return bool(QApplication.keyboardModifiers() & Qt.ShiftModifier)


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of Moment Timer. Holds one stopwatch session and one checklist, both discarded when it closes.
class MainWindow(QMainWindow):

    def __init__(self, settings, total_seconds, clock=None):
        super().__init__()
        self.setWindowTitle("Moment Timer")

        self.theme = settings["theme"] if settings["theme"] in THEMES else "Slate Dark"
        self.add_seconds = settings["add_seconds"]
        self.confirm_reset = settings["confirm_reset"]

        # -- Session model --
        self.stopwatch = Stopwatch(clock or MonotonicClock(), total_seconds)
        self.checklist = Checklist()
        self.laps = []

        self._shift_held = False
        self._overrun = None
        self._editing_id = None
        self._edit_original = None   # description before the current edit
        self._item_widgets = {}   # item id -> widget dict
        self._drag = DragController(self)

        self.blueprint = UIBlueprint.compute(THEMES[self.theme], SIZES["Regular"], FONT_FAMILY)
        s = self.blueprint.size

        # -- Build UI skeleton --
        central = QWidget()
        self.setCentralWidget(central)
        self._main_lay = QVBoxLayout(central)
        self._main_lay.setContentsMargins(s["frame_pad"], s["frame_pad"], s["frame_pad"], s["frame_pad"])
        self._main_lay.setSpacing(s["padding"])

        bar_ct, self._bar_widgets = RowFactory.timer_bar(self.blueprint)
        self._main_lay.addWidget(bar_ct)

        ctrl_ct, self._ctrl_widgets = RowFactory.controls(
            self.blueprint, self.stopwatch.running, self.add_seconds, self._shift_held,
            on_toggle=self._on_toggle,
            on_add_time=self._on_add_time,
            on_next=self._on_next,
        )
        self._main_lay.addWidget(ctrl_ct)

        self._laps_lbl = QLabel("")
        self._laps_lbl.setFont(QFont(FONT_FAMILY, s["label"]))
        self._laps_lbl.setStyleSheet(f"color: {self.blueprint.theme['text_muted']};")
        self._laps_lbl.setWordWrap(True)
        self._laps_lbl.setVisible(False)
        self._main_lay.addWidget(self._laps_lbl)

        heading = QLabel("Checklist")
        heading_font = QFont(FONT_FAMILY, s["time"])
        heading_font.setBold(True)
        heading.setFont(heading_font)
        self._main_lay.addWidget(heading)

        self._list_widget = QWidget()
        self._list_layout = QVBoxLayout(self._list_widget)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(0)
        self._main_lay.addWidget(self._list_widget)

        footer, fw = RowFactory.checklist_footer(self.blueprint, on_add_input_return=self._on_add_item)
        self._add_input = fw["add_input"]
        self._main_lay.addWidget(footer)
        self._main_lay.addStretch()

        self.setStyleSheet(build_stylesheet(self.theme))
        self._rebuild_checklist()
        self._on_refresh(self.stopwatch.reading())

        # -- Refresh driver --
        self._refresh = RefreshDriver(self.stopwatch, self._on_refresh, settings["tick_ms"], parent=self)
        self._refresh.start()

    # ------------------------------------------------------------------ #
    #  Timer display                                                       #
    # ------------------------------------------------------------------ #

    def _on_refresh(self, reading):
        bar = self._bar_widgets["bar"]
        bar.setValue(int(round(reading.progress * PROGRESS_STEPS)))
        bar.setFormat(reading.display)
        # Whole seconds, matching the sign format_countdown shows
        overrun = int(reading.remaining) < 0
        if overrun != self._overrun:
            self._overrun = overrun
            t = self.blueprint.theme
            color = t["overrun_text"] if overrun else t["text"]
            bar.setStyleSheet(f"QProgressBar {{ color: {color}; }}")
        self._ctrl_widgets["toggle"].setText(TOGGLE_PAUSE if reading.running else TOGGLE_PLAY)

    def _update_laps(self):
        if not self.laps:
            self._laps_lbl.setVisible(False)
            return
        parts = [f"#{i + 1} {format_countdown(seg, signed=True)}" for i, seg in enumerate(self.laps)]
        self._laps_lbl.setText("Laps: " + "  ".join(parts))
        self._laps_lbl.setVisible(True)

    # ------------------------------------------------------------------ #
    #  Timer controls                                                      #
    # ------------------------------------------------------------------ #

    def _on_toggle(self):
        self.stopwatch.toggle()
        self._on_refresh(self.stopwatch.reading())

    def _on_add_time(self):
        direction = -1 if _shift_down() else 1
        self.stopwatch.add_time(direction * self.add_seconds)
        self._on_refresh(self.stopwatch.reading())

    def _on_next(self):
        if _shift_down():
            self._reset_timer()
            return
        self.laps.append(self.stopwatch.lap())
        self._update_laps()
        self._on_refresh(self.stopwatch.reading())

    def _reset_timer(self):
        if self.confirm_reset:
            if QMessageBox.question(
                    self, "Confirm Reset",
                    "Reset the timer to zero and clear laps?"
            ) != QMessageBox.Yes:
                return
        self.stopwatch.reset()
        self.laps.clear()
        self._update_laps()
        self._on_refresh(self.stopwatch.reading())

    # ------------------------------------------------------------------ #
    #  Checklist                                                           #
    # ------------------------------------------------------------------ #

    def _rebuild_checklist(self):
        """Tear down and recreate every checklist row."""
        self._item_widgets.clear()

        while self._list_layout.count():
            entry = self._list_layout.takeAt(0)
            w = entry.widget()
            if w:
                w.hide()
                w.deleteLater()

        items = list(self.checklist)
        for idx, item in enumerate(items):
            rc, wd = RowFactory.checklist_item(
                self.blueprint, item,
                editing=(item.id == self._editing_id),
                is_dragging=(item.id == self._drag.dragging_id),
                draw_separator_line=(idx < len(items) - 1),
                on_check=self._on_item_check,
                on_edit_text=self._on_item_edit_text,
                on_commit=self._on_item_commit,
                on_cancel=self._on_item_cancel,
                on_remove=self._on_item_remove,
            )
            wd["handle"].installEventFilter(self)
            if not wd["editing"]:
                wd["desc"].installEventFilter(self)
            self._item_widgets[item.id] = wd
            self._list_layout.addWidget(rc)

        if self._editing_id in self._item_widgets:
            editor = self._item_widgets[self._editing_id]["desc"]
            QTimer.singleShot(0, editor.setFocus)

    def _on_add_item(self):
        item = self.checklist.add(self._add_input.text())
        if item is None:
            return
        self._add_input.clear()
        self._rebuild_checklist()

    def _on_item_check(self, item_id, checked):
        self.checklist.set_completed(item_id, checked)
        # Deferred so the checkbox that fired this isn't destroyed mid-signal
        QTimer.singleShot(0, self._rebuild_checklist)

    def _on_item_edit_start(self, item_id):
        if self._editing_id == item_id:
            return
        if self._editing_id is not None:
            self.checklist.commit_edit(self._editing_id)
        self._editing_id = item_id
        self._edit_original = self.checklist.get(item_id).description
        self._rebuild_checklist()

    def _on_item_edit_text(self, item_id, text):
        self.checklist.set_description(item_id, text)

    # Enter and focus-out both land here, and the editor's own teardown can fire it a second time.
    def _on_item_commit(self, item_id):
        if self._editing_id != item_id:
            return
        self._editing_id = None
        self.checklist.commit_edit(item_id)
        QTimer.singleShot(0, self._rebuild_checklist)

    # Escape puts back the text the item had when editing began.
    def _on_item_cancel(self, item_id):
        if self._editing_id != item_id:
            return
        self._editing_id = None
        self.checklist.set_description(item_id, self._edit_original)
        self.checklist.commit_edit(item_id)
        QTimer.singleShot(0, self._rebuild_checklist)

    def _on_item_remove(self, item_id):
        if self._editing_id == item_id:
            self._editing_id = None
        self.checklist.remove(item_id)
        QTimer.singleShot(0, self._rebuild_checklist)
        QTimer.singleShot(0, self.adjustSize)

    # ------------------------------------------------------------------ #
    #  Event filter, delegates to DragController                           #
    # ------------------------------------------------------------------ #

    def eventFilter(self, obj, event):
        # Active drag, delegate to controller
        if self._drag.active:
            return self._drag.handle_event(obj, event)

        if event.type() == QEvent.MouseButtonPress and event.button() == Qt.LeftButton:
            iid = self._drag.id_for_handle(obj)
            if iid is not None:
                self._drag.start(iid)
                return True
            for iid, w in self._item_widgets.items():
                if w["desc"] is obj and not w["editing"]:
                    self._on_item_edit_start(iid)
                    return True

        return super().eventFilter(obj, event)

    # ------------------------------------------------------------------ #
    #  Shift-key visual feedback                                           #
    # ------------------------------------------------------------------ #

    def _update_shift_labels(self):
        self._ctrl_widgets["add"].setText(add_time_label(self.add_seconds, self._shift_held))

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Shift and not event.isAutoRepeat():
            self._shift_held = True
            self._update_shift_labels()
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key_Shift and not event.isAutoRepeat():
            self._shift_held = False
            self._update_shift_labels()
        super().keyReleaseEvent(event)

    def changeEvent(self, event):
        if event.type() == QEvent.ActivationChange:
            if not self.isActiveWindow():
                if self._shift_held:
                    self._shift_held = False
                    self._update_shift_labels()
                if self._drag.active:
                    self._drag.end()
        super().changeEvent(event)

    # ------------------------------------------------------------------ #
    #  Window close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        self._refresh.cancel()
        log.info(f"Closing timer session with {len(self.laps)} laps and {len(self.checklist)} checklist items")
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

# Runs the lobby (unless disabled) and returns the chosen time limit, or None if the user backed out.
def _choose_total(settings):
    if not settings["show_lobby"]:
        return settings["default_total_seconds"]

    dlg = LobbyDialog(None, settings)
    if dlg.exec() != QDialog.Accepted:
        return None

    settings["default_total_seconds"] = dlg.chosen_total_seconds
    settings["show_lobby"] = dlg.chosen_show_lobby
    try:
        config.save_settings(settings)
    except OSError:
        log.warning("Failed to save settings after lobby, continuing with unsaved settings.", exc_info=True)
    return dlg.chosen_total_seconds


def main():
    app = QApplication(sys.argv)
    settings = config.load_settings()
    app.setStyleSheet(build_stylesheet(settings["theme"]))

    total = _choose_total(settings)
    if total is None:
        log.info("Lobby dismissed, exiting without starting a session")
        sys.exit(0)

    window = MainWindow(settings, total)
    window.show()
    sys.exit(app.exec())
