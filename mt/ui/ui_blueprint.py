from dataclasses import dataclass
from PySide6.QtCore import QSize
from PySide6.QtGui import QFont, QFontMetrics
from PySide6.QtWidgets import QPushButton

# A unified UI Blueprint dataclass to share across all UI builders.
@dataclass
class UIBlueprint:
    theme: dict          # resolved theme dict (THEMES[name])
    size: dict           # resolved size dict (SIZES[name])
    font_family: str
    h_spacing: int
    btn_spacing: int
    handle_size: QSize
    x_size: QSize
    control_min_w: int
    label_font: QFont
    time_font: QFont
    action_font: QFont

    # Builds the context from current settings.
    @staticmethod
    def compute(theme, size, font_family):
        # Establish spacing based on given size preset
        horizontal_spacing = size.get("h_spacing", size["padding"])
        button_spacing = max(1, horizontal_spacing // 2)

        # Initialize font objects
        label_font = QFont(font_family, size["label"])
        time_font = QFont(font_family, size["time"])
        time_font.setBold(True)
        action_font = QFont(font_family, size["action"])

        # Get the drag handle reference size (square) by actually instantiating and measuring it briefly
        _ref = QPushButton("☰")
        _ref.setFont(action_font)
        _h = _ref.sizeHint().height()
        handle_size = QSize(_h, _h)
        _ref.deleteLater()

        # Same for the delete button column
        _ref_x = QPushButton("✕")
        _ref_x.setFont(action_font)
        _hx = _ref_x.sizeHint().height()
        x_size = QSize(_hx, _hx)
        _ref_x.deleteLater()

        # Wide enough for the longest add-time label so shift doesn't jiggle the layout
        control_min_w = QFontMetrics(action_font).horizontalAdvance("-999s") + 20

        return UIBlueprint(
            theme=theme, size=size, font_family=font_family,
            h_spacing=horizontal_spacing, btn_spacing=button_spacing,
            handle_size=handle_size, x_size=x_size,
            control_min_w=control_min_w,
            label_font=label_font, time_font=time_font,
            action_font=action_font,
        )
