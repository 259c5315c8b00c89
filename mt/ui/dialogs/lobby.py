"""Lobby dialog, picks the time limit before a timer session opens."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)
from mt.util import format_countdown

# Upper bound for the time limit spin box (a bit under 100 hours).
MAX_TIME_LIMIT_SECONDS = 359_999

# Small modal dialog shown on launch. Read chosen_* attributes after exec() returns Accepted.
class LobbyDialog(QDialog):

    def __init__(self, parent, settings):
        super().__init__(parent)
        self.setWindowTitle("Moment Timer")
        self.setModal(True)

        # Output attributes, read by main() after dialog closes
        self.chosen_total_seconds = settings.get("default_total_seconds", 10)
        self.chosen_show_lobby = settings.get("show_lobby", True)

        outer = QVBoxLayout(self)
        outer.setSpacing(12)

        title = QLabel("Moment Timer")
        title.setFont(QFont("Calibri", 20, QFont.Bold))
        title.setAlignment(Qt.AlignCenter)
        outer.addWidget(title)

        # Time Limit
        row = QHBoxLayout()
        time_limit_tooltip = "How long the countdown runs before it starts tracking overrun."
        lbl = QLabel("Time Limit (seconds):")
        lbl.setFont(QFont("Calibri", 12, QFont.Bold))
        lbl.setToolTip(time_limit_tooltip)
        self._time_limit = QSpinBox()
        self._time_limit.setRange(1, MAX_TIME_LIMIT_SECONDS)
        self._time_limit.setValue(min(max(1, self.chosen_total_seconds), MAX_TIME_LIMIT_SECONDS))
        self._time_limit.setMinimumWidth(160)
        self._time_limit.setToolTip(time_limit_tooltip)
        self._time_limit.valueChanged.connect(self._on_value_changed)
        row.addWidget(lbl)
        row.addWidget(self._time_limit)
        outer.addLayout(row)

        # Live MM:SS preview of the chosen limit
        self._preview = QLabel(format_countdown(self._time_limit.value()))
        self._preview.setFont(QFont("Calibri", 16))
        self._preview.setAlignment(Qt.AlignCenter)
        outer.addWidget(self._preview)

        self._skip_next_time = QCheckBox("Don't ask again (use this limit on launch)")
        self._skip_next_time.setChecked(not self.chosen_show_lobby)
        outer.addWidget(self._skip_next_time)

        start_btn = QPushButton("Start")
        start_btn.setFont(QFont("Calibri", 14, QFont.Bold))
        start_btn.setDefault(True)
        start_btn.clicked.connect(self._apply)
        outer.addWidget(start_btn)

    def _on_value_changed(self, value):
        self._preview.setText(format_countdown(value))

    def _apply(self):
        self.chosen_total_seconds = self._time_limit.value()
        self.chosen_show_lobby = not self._skip_next_time.isChecked()
        self.accept()
