from PyQt6.QtWidgets import QFrame, QSpinBox, QPushButton
from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPainterPath, QColor

class DurationSpinBox(QSpinBox):
    """
    Minutes input bounded to a timer's allowed range.
    Enter advances focus to the next widget.
    """
    def __init__(self, minimum, maximum, value, parent=None):
        super().__init__(parent)
        self.setRange(minimum, maximum)
        self.setValue(value)
        self.setSuffix(" min")

    def keyPressEvent(self, event):
        if event.key() not in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            super().keyPressEvent(event)
            return
        # Commit what was typed before focus moves on.
        self.interpretText()
        self.focusNextChild()
        event.accept()

class RoundedButton(QPushButton):
    """A flat push button with a solid, rounded background color."""
    def __init__(self, text, color, theme, parent=None):
        super().__init__(text, parent)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumSize(90, 40)
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {color};
                color: {theme['text_fg_light']};
                border: none;
                border-radius: 8px;
                font-weight: bold;
            }}
            QPushButton:hover {{ background-color: {QColor(color).lighter(115).name()}; }}
            QPushButton:disabled {{ background-color: {theme['border']}; }}
        """)

class RoundedFrame(QFrame):
    """Frame that fills its rect with a single rounded, borderless shape."""
    def __init__(self, radius=12, background_color="#ffffff", parent=None):
        super().__init__(parent)
        self.radius = radius
        self.background_color = QColor(background_color)

    def paintEvent(self, event):
        path = QPainterPath()
        path.addRoundedRect(QRectF(self.rect()), self.radius, self.radius)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillPath(path, self.background_color)
        painter.end()
