from .colors import THEMES


# Build a Qt stylesheet string from a theme name. Unknown names fall back to "Slate Dark".
def build_stylesheet(theme_name):
    t = THEMES.get(theme_name, THEMES["Slate Dark"])
    return (
        f"QMainWindow, QDialog, QWidget {{ background-color: {t['bg']}; }}"
        f"QLabel, QCheckBox {{ color: {t['text']}; background: transparent; }}"
        f"QPushButton {{"
        f"  color: {t['button_text']};"
        f"  background-color: {t['button_bg']};"
        f"  border: {t['border']}px solid rgba(128,128,128,0.4);"
        f"  border-radius: 4px;"
        f"  padding: 4px 8px;"
        f"}}"
        f"QPushButton:hover, QPushButton:pressed {{"
        f"  background-color: {t['button_active']};"
        f"}}"
        f"QLineEdit, QSpinBox {{"
        f"  color: {t['button_text']};"
        f"  background-color: {t['button_bg']};"
        f"  border: {t['border']}px solid rgba(128,128,128,0.4);"
        f"  border-radius: 4px;"
        f"  padding: 3px 5px;"
        f"}}"
        f"QProgressBar {{"
        f"  color: {t['text']};"
        f"  background-color: {t['progress_bg']};"
        f"  border: none;"
        f"  border-radius: 4px;"
        f"  text-align: center;"
        f"}}"
        f"QProgressBar::chunk {{"
        f"  border-radius: 4px;"
        f"  background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,"
        f"    stop:0 {t['progress_top']}, stop:0.5 {t['progress_mid']}, stop:1 {t['progress_bottom']});"
        f"}}"
        f"QToolTip {{"
        f"  background-color: {t['bg']};"
        f"  color: {t['text']};"
        f"  border: 1px solid {t['separator']};"
        f"  padding: 4px 8px;"
        f"}}"
    )
