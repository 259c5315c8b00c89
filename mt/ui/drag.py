"""Drag-and-drop reordering controller for checklist rows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, QEvent
from PySide6.QtWidgets import QApplication

if TYPE_CHECKING:
    from mt.ui.app import MainWindow


class DragController:
    """Manages all drag-reorder state and logic.

    Holds a reference to the host MainWindow for access to the checklist,
    row widgets, and rebuild methods.
    """

    def __init__(self, host: MainWindow):
        self.host = host
        self.dragging_id = None
        self.last_index = -1

    @property
    def active(self):
        return self.dragging_id is not None

    def start(self, item_id):
        """Begin drag-reordering a row."""
        h = self.host
        index = h.checklist.index_of(item_id)
        if index is None:
            return
        self.dragging_id = item_id
        self.last_index = index

        QApplication.setOverrideCursor(Qt.ClosedHandCursor)
        QApplication.instance().installEventFilter(h)
        self._restyle_dragged(True)

    def end(self):
        """Finish drag-reordering and repaint rows in their final order."""
        h = self.host
        self._restyle_dragged(False)
        self.dragging_id = None
        self.last_index = -1

        QApplication.restoreOverrideCursor()
        QApplication.instance().removeEventFilter(h)
        h._rebuild_checklist()

    def handle_event(self, obj, event):
        """Handle a QEvent during an active drag.  Returns True if consumed."""
        if event.type() == QEvent.MouseMove:
            self._on_mouse_move(event)
            return True
        if event.type() == QEvent.MouseButtonRelease:
            self.end()
            return True
        return False

    def _on_mouse_move(self, event):
        h = self.host
        global_pos = event.globalPosition().toPoint()
        local_pos = h._list_widget.mapFromGlobal(global_pos)
        target = self._row_at_y(local_pos.y())
        if target is None or target == self.last_index:
            return

        h.checklist.move(self.last_index, target)
        self.last_index = target
        self._reorder_visual()

    def _reorder_visual(self):
        """Lightweight reorder of existing row containers during drag."""
        h = self.host
        h._list_widget.setUpdatesEnabled(False)

        for w in h._item_widgets.values():
            h._list_layout.removeWidget(w["container"])

        for insert_idx, item in enumerate(h.checklist):
            h._list_layout.insertWidget(insert_idx, h._item_widgets[item.id]["container"])

        h._list_widget.setUpdatesEnabled(True)
        h._list_layout.activate()

    def _restyle_dragged(self, dragging):
        h = self.host
        w = h._item_widgets.get(self.dragging_id)
        if w is None:
            return
        t = h.blueprint.theme
        bg = t["row_dragged"] if dragging else t["panel_bg"]
        w["container"].setStyleSheet(f"#rowBg {{ background-color: {bg}; }}")

    def _row_at_y(self, y):
        """Return the checklist index whose vertical center is closest to y."""
        h = self.host
        best_row = None
        best_dist = float("inf")
        for idx, item in enumerate(h.checklist):
            w = h._item_widgets.get(item.id)
            if w is None:
                continue
            rect = w["container"].geometry()
            dist = abs(y - rect.center().y())
            if dist < best_dist:
                best_dist = dist
                best_row = idx
        return best_row

    def id_for_handle(self, widget):
        """Map a drag handle widget back to its item id."""
        for iid, w in self.host._item_widgets.items():
            if w.get("handle") is widget:
                return iid
        return None
