from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from pomodoro_desk.core.interval_timer import IntervalTimer, TimerState

class IntervalTimerQt(QObject):
    """
    Drives an IntervalTimer from a one-second QTimer.
    The QTimer only runs while the countdown is running, so stopping or
    pausing leaves no tick pending.
    """
    # Signal arguments: (current_time_str, state_name)
    time_updated = pyqtSignal(str, str)
    ticked = pyqtSignal()

    def __init__(self, name, duration_seconds, parent=None):
        super().__init__(parent)
        self.core = IntervalTimer(name, duration_seconds)

        self.timer = QTimer(self)
        self.timer.setInterval(1000) # Update every second
        self.timer.timeout.connect(self.ticked)

    @property
    def state(self):
        return self.core.state

    @property
    def remaining(self):
        return self.core.remaining

    def start(self, duration_seconds):
        return self._sync(self.core.start(duration_seconds))

    def pause_toggle(self):
        return self._sync(self.core.pause_toggle())

    def stop(self):
        return self._sync(self.core.stop())

    def tick(self):
        """Called by the owner when `ticked` fires."""
        return self._sync(self.core.tick())

    def rearm(self):
        return self._sync(self.core.rearm())

    def dispose(self):
        self.timer.stop()

    def _sync(self, events):
        if self.core.state is TimerState.RUNNING:
            if not self.timer.isActive():
                self.timer.start()
        else:
            self.timer.stop()
        if events:
            self.emit_update()
        return events

    def emit_update(self):
        """Formats the time and emits the time_updated signal."""
        self.time_updated.emit(self.core.display(), self.core.state.value)
