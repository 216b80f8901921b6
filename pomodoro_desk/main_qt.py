import sys
import logging
from PyQt6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                             QLabel, QPushButton, QCheckBox, QFrame)
from PyQt6.QtGui import QKeySequence, QAction
from PyQt6.QtCore import Qt

from .core.controller import TimerController, TimerKind, Command
from .core.interval_timer import TimerEvent
from .utils.config_manager import load_config
from .utils.logger import setup_logging
from .utils.interval_timer_qt import IntervalTimerQt
from .utils.sound_player_qt import SoundPlayer, cue_files_from_config
from .panels_qt.timer_panel_qt import TimerPanel
from .popups_qt.notification_popup_qt import NotificationPopup

logger = logging.getLogger(__name__)

THEME = {
    'bg': '#ecf0f1',
    'panel_bg': '#ffffff',
    'text_fg': '#2c3e50',
    'text_muted': '#7f8c8d',
    'text_fg_light': '#ffffff',
    'border': '#dcdcdc',
    'primary': '#4a7eb4',
    'title_bg': '#34495e',
    'success': '#2e961e',
    'warning': '#f1b00f',
    'danger': '#e74c3c',
    'neutral': '#95a5a6',
}


class PomodoroWindow(QMainWindow):
    def __init__(self, config):
        super().__init__()
        self.config = config
        self.theme = THEME
        self.drag_pos = None
        self.popups = []

        self.setWindowFlag(Qt.WindowType.FramelessWindowHint)

        work_minutes = config["work_minutes"]
        break_minutes = config["break_minutes"]
        self.interval_timers = {
            TimerKind.WORK: IntervalTimerQt("work", work_minutes * 60, self),
            TimerKind.BREAK: IntervalTimerQt("break", break_minutes * 60, self),
        }
        self.sound_player = SoundPlayer(cue_files_from_config(config), parent=self)
        self.controller = TimerController(
            self.interval_timers[TimerKind.WORK],
            self.interval_timers[TimerKind.BREAK],
            notifier=self.show_notification,
            player=self.sound_player,
            muted=config["muted"],
            work_minutes=work_minutes,
            break_minutes=break_minutes,
        )

        self.init_ui()
        self.apply_stylesheet()
        self.create_actions()

        for kind, timer in self.interval_timers.items():
            timer.ticked.connect(lambda kind=kind: self.controller.tick(kind))
            timer.time_updated.connect(lambda time_str, _state, kind=kind: self.panels[kind].set_time(time_str))
            self.refresh_controls(kind)
        self.controller.add_listener(self.on_timer_events)

    # --- Frameless window dragging via the title bar ---
    def is_on_title_bar(self, pos):
        """`pos` is in window coordinates."""
        return self.title_bar.rect().contains(self.title_bar.mapFrom(self, pos))

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.is_on_title_bar(event.pos()):
            self.drag_pos = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
            event.accept()

    def mouseMoveEvent(self, event):
        if self.drag_pos is not None:
            self.move(event.globalPosition().toPoint() - self.drag_pos)
            event.accept()

    def mouseReleaseEvent(self, event):
        self.drag_pos = None
        event.accept()

    def init_ui(self):
        self.setWindowTitle("Pomodoro Timer")
        self.setFixedSize(720, 400)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 10)
        main_layout.setSpacing(10)

        self.create_title_bar()
        main_layout.addWidget(self.title_bar)

        panels_layout = QHBoxLayout()
        panels_layout.setContentsMargins(15, 0, 15, 0)
        panels_layout.setSpacing(15)
        self.panels = {
            TimerKind.WORK: TimerPanel(TimerKind.WORK, "Work", "Start Work", self.theme['primary'],
                                       self.controller.minutes(TimerKind.WORK), self.theme),
            TimerKind.BREAK: TimerPanel(TimerKind.BREAK, "Break", "Start Break", self.theme['success'],
                                        self.controller.minutes(TimerKind.BREAK), self.theme),
        }
        for kind, panel in self.panels.items():
            panel.command_issued.connect(lambda command, kind=kind: self.on_command(kind, command))
            panel.minutes_changed.connect(lambda minutes, kind=kind: self.controller.set_minutes(kind, minutes))
            panels_layout.addWidget(panel)
        main_layout.addLayout(panels_layout, 1)

        footer = QHBoxLayout()
        footer.setContentsMargins(20, 0, 20, 0)
        self.mute_checkbox = QCheckBox("Mute sounds")
        self.mute_checkbox.setChecked(self.controller.muted)
        self.mute_checkbox.toggled.connect(self.controller.set_muted)
        footer.addWidget(self.mute_checkbox)
        footer.addStretch()
        main_layout.addLayout(footer)

    def create_title_bar(self):
        self.title_bar = QFrame()
        self.title_bar.setObjectName("TitleBar")
        self.title_bar.setFixedHeight(44)
        layout = QHBoxLayout(self.title_bar)
        layout.setContentsMargins(15, 0, 8, 0)

        title = QLabel("\U0001F345 Pomodoro Timer")
        title.setObjectName("TitleLabel")
        layout.addWidget(title)
        layout.addStretch()

        minimize_button = QPushButton("–")
        minimize_button.setObjectName("TitleButton")
        minimize_button.clicked.connect(self.showMinimized)
        close_button = QPushButton("×")
        close_button.setObjectName("TitleButton")
        close_button.clicked.connect(self.close)
        layout.addWidget(minimize_button)
        layout.addWidget(close_button)

    def apply_stylesheet(self):
        qss = f"""
            QMainWindow, QWidget {{
                background-color: {self.theme['bg']};
                font-family: "Segoe UI";
                font-size: 10pt;
                color: {self.theme['text_fg']};
            }}
            QFrame#TitleBar {{ background-color: {self.theme['title_bg']}; }}
            #TitleLabel {{
                background-color: transparent;
                color: {self.theme['text_fg_light']};
                font-size: 12pt;
                font-weight: bold;
            }}
            QPushButton#TitleButton {{
                background-color: transparent;
                color: {self.theme['text_fg_light']};
                border: none;
                font-size: 14pt;
                padding: 2px 10px;
            }}
            QPushButton#TitleButton:hover {{ background-color: {self.theme['danger']}; }}
            TimerPanel QWidget, TimerPanel QLabel {{ background-color: transparent; }}
            #PanelHeader {{ font-size: 12pt; font-weight: bold; }}
            QSpinBox {{
                background-color: {self.theme['panel_bg']};
                border: 1px solid {self.theme['border']};
                padding: 4px;
            }}
        """
        self.setStyleSheet(qss)

    def create_actions(self):
        action_definitions = {
            "Start Work": ("Ctrl+W", lambda: self.on_command(TimerKind.WORK, Command.START)),
            "Start Break": ("Ctrl+B", lambda: self.on_command(TimerKind.BREAK, Command.START)),
            "Toggle Mute": ("Ctrl+M", self.mute_checkbox.toggle),
            "Quit": ("Ctrl+Q", self.close),
        }

        actions = []
        for name, (shortcut, slot) in action_definitions.items():
            action = QAction(name, self)
            action.setShortcut(QKeySequence(shortcut))
            action.triggered.connect(slot)
            actions.append(action)

        self.addActions(actions)

    def on_command(self, kind, command):
        minutes = self.panels[kind].minutes() if command is Command.START else None
        self.controller.dispatch(kind, command, minutes)

    def on_timer_events(self, kind, events):
        if TimerEvent.TICKED in events and len(events) == 1:
            return
        self.refresh_controls(kind)

    def refresh_controls(self, kind):
        self.panels[kind].apply_controls(self.controller.controls(kind))

    def show_notification(self, kind, message, on_accept):
        popup = NotificationPopup(message, on_accept, self.theme,
                                  total_duration_ms=self.config["popup_duration_ms"])
        self.popups.append(popup)
        popup.destroyed.connect(lambda *_: self.forget_popup(popup))
        popup.show_animated()

    def forget_popup(self, popup):
        if popup in self.popups:
            self.popups.remove(popup)

    def closeEvent(self, event):
        for timer in self.interval_timers.values():
            timer.dispose()
        for popup in list(self.popups):
            popup.close()
        super().closeEvent(event)


def main():
    config = load_config()
    setup_logging(config["log_level"])
    logger.info("starting with work=%dmin break=%dmin muted=%s",
                config["work_minutes"], config["break_minutes"], config["muted"])

    app = QApplication.instance() or QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(True)

    main_win = PomodoroWindow(config)
    main_win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
