# pomodoro_desk/panels_qt/timer_panel_qt.py
from PyQt6.QtWidgets import QVBoxLayout, QHBoxLayout, QLabel
from PyQt6.QtCore import Qt, pyqtSignal
from pomodoro_desk.core.controller import Command, MINUTES_RANGES
from pomodoro_desk.core.interval_timer import format_time
from pomodoro_desk.ui.widgets_qt import DurationSpinBox, RoundedButton, RoundedFrame

class TimerPanel(RoundedFrame):
    """Countdown display, minutes input and Start / Pause / Stop buttons for one timer."""
    command_issued = pyqtSignal(object)
    minutes_changed = pyqtSignal(int)

    def __init__(self, kind, title, start_text, accent, minutes, theme, parent=None):
        super().__init__(radius=12, background_color=theme['panel_bg'], parent=parent)
        self.kind = kind
        self.theme = theme

        content_layout = QVBoxLayout(self)
        content_layout.setContentsMargins(20, 15, 20, 20)
        content_layout.setSpacing(12)

        self.header_label = QLabel(title)
        self.header_label.setObjectName("PanelHeader")
        content_layout.addWidget(self.header_label)

        self.time_label = QLabel(format_time(minutes * 60))
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.time_label.setStyleSheet(f"font-size: 24pt; font-weight: bold; color: {accent};")
        content_layout.addWidget(self.time_label)

        input_layout = QHBoxLayout()
        input_layout.addWidget(QLabel(f"{title} (minutes)"))
        low, high = MINUTES_RANGES[kind]
        self.minutes_input = DurationSpinBox(low, high, minutes)
        self.minutes_input.valueChanged.connect(self.minutes_changed)
        input_layout.addStretch()
        input_layout.addWidget(self.minutes_input)
        content_layout.addLayout(input_layout)

        button_layout = QHBoxLayout()
        self.start_button = RoundedButton(start_text, accent, theme)
        self.pause_button = RoundedButton("Pause", theme['warning'], theme)
        self.stop_button = RoundedButton("Stop", theme['danger'], theme)
        self.start_button.clicked.connect(lambda: self.command_issued.emit(Command.START))
        self.pause_button.clicked.connect(lambda: self.command_issued.emit(Command.PAUSE_TOGGLE))
        self.stop_button.clicked.connect(lambda: self.command_issued.emit(Command.STOP))
        for button in (self.start_button, self.pause_button, self.stop_button):
            button_layout.addWidget(button)
        content_layout.addLayout(button_layout)

    def minutes(self):
        return self.minutes_input.value()

    def set_time(self, time_str):
        self.time_label.setText(time_str)

    def apply_controls(self, controls):
        self.start_button.setEnabled(controls.start_enabled)
        self.pause_button.setEnabled(controls.pause_enabled)
        self.stop_button.setEnabled(controls.stop_enabled)
        self.pause_button.setText(controls.pause_label)
