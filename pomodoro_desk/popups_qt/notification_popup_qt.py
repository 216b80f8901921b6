# pomodoro_desk/popups_qt/notification_popup_qt.py
from PyQt6.QtWidgets import QApplication, QLabel, QPushButton, QHBoxLayout, QProgressBar
from PyQt6.QtCore import Qt, QTimer, QElapsedTimer
from .base_popup_qt import BasePopup
from pomodoro_desk.core.popup_lifecycle import (PopupLifecycle, PopupEvent, PopupCommand,
                                                FRAME_INTERVAL_MS, DEFAULT_TOTAL_DURATION_MS)

POPUP_WIDTH = 400
POPUP_HEIGHT = 180
SCREEN_MARGIN = 20
OFFSCREEN_OFFSET = 50

class NotificationPopup(BasePopup):
    """
    End-of-interval prompt. Slides in at the bottom-right of the screen,
    offers Start / Later, and closes itself after the configured duration.
    """

    def __init__(self, message, on_accept, theme, total_duration_ms=DEFAULT_TOTAL_DURATION_MS, parent=None):
        super().__init__(theme=theme, parent=parent)
        self.setWindowTitle("Timer Reminder")
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self.setFixedSize(POPUP_WIDTH, POPUP_HEIGHT)

        area = QApplication.primaryScreen().availableGeometry()
        self.popup_x = area.right() - POPUP_WIDTH - SCREEN_MARGIN
        self.lifecycle = PopupLifecycle(
            message, on_accept,
            start_y=area.bottom() + OFFSCREEN_OFFSET,
            target_y=area.bottom() - POPUP_HEIGHT - SCREEN_MARGIN,
            exit_y=area.bottom(),
            total_duration_ms=total_duration_ms,
        )

        header = QHBoxLayout()
        icon_label = QLabel("\U0001F514")
        icon_label.setStyleSheet("font-size: 24pt; background: transparent; border: none;")
        title_label = QLabel("Timer Reminder")
        title_label.setStyleSheet(f"font-size: 12pt; font-weight: bold; color: {self.theme['text_fg']}; border: none;")
        header.addWidget(icon_label)
        header.addWidget(title_label)
        header.addStretch()
        self.main_layout.addLayout(header)

        self.message_label = QLabel(message)
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet(f"color: {self.theme['text_muted']}; border: none;")
        self.main_layout.addWidget(self.message_label)

        button_layout = QHBoxLayout()
        self.accept_button = QPushButton("Start")
        self.accept_button.setObjectName("AcceptButton")
        self.accept_button.clicked.connect(lambda: self.on_command(PopupCommand.ACCEPT))
        self.defer_button = QPushButton("Later")
        self.defer_button.setObjectName("DeferButton")
        self.defer_button.clicked.connect(lambda: self.on_command(PopupCommand.DEFER))
        button_layout.addStretch()
        button_layout.addWidget(self.accept_button)
        button_layout.addWidget(self.defer_button)
        self.main_layout.addLayout(button_layout)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 1000)
        self.progress_bar.setValue(1000)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(4)
        self.main_layout.addWidget(self.progress_bar)

        self.setStyleSheet(f"""
            QPushButton {{
                color: {self.theme['text_fg_light']};
                border: none;
                border-radius: 6px;
                padding: 6px 16px;
                font-weight: bold;
            }}
            QPushButton#AcceptButton {{ background-color: {self.theme['success']}; }}
            QPushButton#DeferButton {{ background-color: {self.theme['neutral']}; }}
            QPushButton:disabled {{ background-color: {self.theme['border']}; }}
            QProgressBar {{ border: none; background-color: {self.theme['border']}; }}
            QProgressBar::chunk {{ background-color: {self.theme['primary']}; }}
        """)

        self.clock = QElapsedTimer()
        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(FRAME_INTERVAL_MS)
        self.frame_timer.timeout.connect(self.advance)

    def show_animated(self):
        """Shows the popup off-screen and starts the slide-in."""
        self.apply_frame()
        self.show()
        self.clock.start()
        self.frame_timer.start()

    def advance(self):
        elapsed = self.clock.restart()
        self.handle_events(self.lifecycle.tick(elapsed))

    def on_command(self, command):
        self.handle_events(self.lifecycle.dispatch(command))

    def on_escape(self):
        self.on_command(PopupCommand.DEFER)

    def handle_events(self, events):
        if not self.lifecycle.is_interactive:
            self.accept_button.setEnabled(False)
            self.defer_button.setEnabled(False)
        if PopupEvent.CLOSED in events:
            self.frame_timer.stop()
            self.close()
            return
        self.apply_frame()

    def apply_frame(self):
        self.move(self.popup_x, round(self.lifecycle.y))
        self.setWindowOpacity(self.lifecycle.opacity)
        self.progress_bar.setValue(round(self.lifecycle.progress_fraction() * 1000))

    def closeEvent(self, event):
        self.frame_timer.stop()
        super().closeEvent(event)
