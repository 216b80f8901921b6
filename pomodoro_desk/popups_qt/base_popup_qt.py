# pomodoro_desk/popups_qt/base_popup_qt.py
from PyQt6.QtWidgets import QDialog, QVBoxLayout, QFrame, QGraphicsDropShadowEffect
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor

class BasePopup(QDialog):
    """Frameless, translucent popup shell with a rounded, shadowed card."""
    def __init__(self, theme, parent=None):
        super().__init__(parent)
        self.theme = theme

        self.setWindowFlags(Qt.WindowType.FramelessWindowHint
                            | Qt.WindowType.WindowStaysOnTopHint
                            | Qt.WindowType.Tool)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating)

        base_layout = QVBoxLayout(self)
        base_layout.setContentsMargins(10, 10, 10, 10)

        self.shadow_frame = QFrame()
        self.shadow_frame.setObjectName("PopupFrame")
        self.shadow_frame.setStyleSheet(f"""
            #PopupFrame {{
                background-color: {self.theme['panel_bg']};
                border: 1px solid {self.theme['border']};
                border-top: 4px solid {self.theme['primary']};
                border-radius: 12px;
            }}
        """)
        base_layout.addWidget(self.shadow_frame)

        self.main_layout = QVBoxLayout(self.shadow_frame)
        self.main_layout.setContentsMargins(20, 16, 20, 12)
        self.main_layout.setSpacing(10)

        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(20)
        shadow.setXOffset(0)
        shadow.setYOffset(4)
        shadow.setColor(QColor(0, 0, 0, 50))
        self.shadow_frame.setGraphicsEffect(shadow)

    def keyPressEvent(self, event):
        """Closes the popup when the Escape key is pressed."""
        if event.key() == Qt.Key.Key_Escape:
            self.on_escape()
        else:
            super().keyPressEvent(event)

    def on_escape(self):
        self.reject()
