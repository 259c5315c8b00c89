from typing import Any
from collections.abc import Callable
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QSizePolicy,
    QWidget,
)
from mt.core.checklist import ChecklistItem
from mt.ui.ui_blueprint import UIBlueprint

# Resolution of the progress bar. Progress fractions are scaled onto 0..PROGRESS_STEPS.
PROGRESS_STEPS = 1000

TOGGLE_PLAY = "⏵"
TOGGLE_PAUSE = "⏸"
NEXT_GLYPH = "⏭"


# QLineEdit that also reports Escape, which plain QLineEdit swallows silently.
class EditLine(QLineEdit):
    escaped = Signal()

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.escaped.emit()
            return
        super().keyPressEvent(event)


# Label for the add-time button, which flips to a subtraction while shift is held.
def add_time_label(add_seconds, shift_held):
    return f"-{add_seconds}s" if shift_held else f"+{add_seconds}s"


# Purely organizational class to group functions that build the pieces of the main view (timer bar, controls,
# checklist rows, and the checklist footer). Each builder returns a (container, widget_dict) tuple. The widget_dict
# maps logical names to sub-widgets for later updates.
class RowFactory:
    @staticmethod
    # Builds the countdown bar: a progress bar filled to the stopwatch progress, with the remaining time drawn over it.
    def timer_bar(blueprint: UIBlueprint):
        container = QWidget()
        container.setObjectName("timerCt")
        container.setStyleSheet("#timerCt { background: transparent; }")
        lay = QHBoxLayout(container)
        lay.setContentsMargins(0, 0, 0, 0)

        bar = QProgressBar()
        bar.setRange(0, PROGRESS_STEPS)
        bar.setValue(0)
        bar.setTextVisible(True)
        bar.setFormat("00:00")
        bar.setAlignment(Qt.AlignCenter)
        bar.setFont(blueprint.time_font)
        bar.setFixedHeight(blueprint.size["bar_height"])
        lay.addWidget(bar)

        return container, {"bar": bar, "container": container}

    @staticmethod
    # Builds the three control buttons under the bar: toggle, add time, next/lap.
    def controls(blueprint: UIBlueprint,
                 running: bool,
                 add_seconds: int,
                 shift_held: bool,
                 on_toggle: Callable[...,Any],
                 on_add_time: Callable[...,Any],
                 on_next: Callable[...,Any]):
        container = QWidget()
        container.setObjectName("ctrlCt")
        container.setStyleSheet("#ctrlCt { background: transparent; }")
        lay = QHBoxLayout(container)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(blueprint.btn_spacing)

        toggle_btn = QPushButton(TOGGLE_PAUSE if running else TOGGLE_PLAY)
        toggle_btn.setToolTip("Start / pause")
        add_btn = QPushButton(add_time_label(add_seconds, shift_held))
        add_btn.setToolTip(f"Add {add_seconds} seconds (hold Shift to remove)")
        next_btn = QPushButton(NEXT_GLYPH)
        next_btn.setToolTip("Next lap (hold Shift to reset)")

        for btn in (toggle_btn, add_btn, next_btn):
            btn.setFont(blueprint.action_font)
            btn.setMinimumWidth(blueprint.control_min_w)
            btn.setMinimumHeight(blueprint.size["bar_height"])
            btn.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
            lay.addWidget(btn, 1)

        toggle_btn.clicked.connect(lambda _=False: on_toggle())
        add_btn.clicked.connect(lambda _=False: on_add_time())
        next_btn.clicked.connect(lambda _=False: on_next())

        widget_dict = {
            "toggle": toggle_btn, "add": add_btn, "next": next_btn,
            "container": container,
        }
        return container, widget_dict

    @staticmethod
    # Given a UIBlueprint object and a checklist item, this method builds it into a single checklist row.
    def checklist_item(blueprint: UIBlueprint,
                       item: ChecklistItem,
                       editing: bool,
                       is_dragging: bool,
                       draw_separator_line: bool,
                       on_check: Callable[...,Any],
                       on_edit_text: Callable[...,Any],
                       on_commit: Callable[...,Any],
                       on_cancel: Callable[...,Any],
                       on_remove: Callable[...,Any]):
        t = blueprint.theme
        row_bg = t["row_dragged"] if is_dragging else t["panel_bg"]
        border_css = (f"border-bottom: 1px solid {t['row_separator']};"
                      if draw_separator_line else "")

        rc = QWidget()
        rc.setObjectName("rowBg")
        rc.setStyleSheet(f"#rowBg {{ background-color: {row_bg}; {border_css} }}")
        rc_lay = QHBoxLayout(rc)
        rc_lay.setContentsMargins(4, 2, 4, 2)
        rc_lay.setSpacing(blueprint.h_spacing)

        # Col 0: drag handle
        handle = QLabel("☰")
        handle.setFont(blueprint.action_font)
        handle.setAlignment(Qt.AlignCenter)
        handle.setFixedSize(blueprint.handle_size)
        handle.setStyleSheet(f"color: {t['text_muted']};")
        handle.setCursor(Qt.OpenHandCursor)
        handle.setToolTip("Drag to reorder")
        rc_lay.addWidget(handle)

        # Col 1: completed checkbox
        check = QCheckBox()
        check.setChecked(item.completed)
        check.toggled.connect(lambda checked, iid=item.id: on_check(iid, checked))
        rc_lay.addWidget(check)

        # Col 2: description, either as a label or as the inline editor
        if editing:
            desc = EditLine(item.description)
            desc.setFont(blueprint.label_font)
            desc.textEdited.connect(lambda text, iid=item.id: on_edit_text(iid, text))
            desc.editingFinished.connect(lambda iid=item.id: on_commit(iid))
            desc.escaped.connect(lambda iid=item.id: on_cancel(iid))
        else:
            desc = QLabel(item.description)
            desc.setFont(blueprint.label_font)
            desc.setCursor(Qt.PointingHandCursor)
            if item.completed:
                f = desc.font()
                f.setStrikeOut(True)
                desc.setFont(f)
                desc.setStyleSheet(f"color: {t['text_muted']};")
            else:
                desc.setStyleSheet(f"color: {t['text']};")
        desc.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        rc_lay.addWidget(desc, 1)

        # Col 3: delete
        x_btn = QPushButton("✕")
        x_btn.setFont(blueprint.action_font)
        x_btn.setFixedSize(blueprint.x_size)
        x_btn.setStyleSheet(f"color: {t['danger_text']}; padding: 0px;")
        x_btn.clicked.connect(lambda _=False, iid=item.id: on_remove(iid))
        rc_lay.addWidget(x_btn)

        widget_dict = {
            "handle": handle, "check": check,
            "desc": desc, "x": x_btn,
            "container": rc, "editing": editing,
        }
        return rc, widget_dict

    @staticmethod
    # Given a UIBlueprint, simply builds the "add new item" bar for the bottom of the checklist.
    def checklist_footer(blueprint: UIBlueprint,
                         on_add_input_return: Callable[...,Any]):
        footer = QWidget()
        footer.setObjectName("footer")
        footer.setStyleSheet("#footer { background: transparent; }")
        f_lay = QHBoxLayout(footer)
        f_lay.setContentsMargins(4, 2, 4, 2)
        f_lay.setSpacing(blueprint.h_spacing)

        # Keeps the input lined up with the description column of the rows above
        pad = QWidget()
        pad.setFixedWidth(blueprint.handle_size.width())
        f_lay.addWidget(pad)

        add_input = QLineEdit()
        add_input.setFont(QFont(blueprint.font_family, blueprint.size["label"]))
        add_input.setPlaceholderText("Add new item...")
        add_input.returnPressed.connect(on_add_input_return)
        f_lay.addWidget(add_input, 1)

        pad_x = QWidget()
        pad_x.setFixedWidth(blueprint.x_size.width())
        f_lay.addWidget(pad_x)

        return footer, {"add_input": add_input}
