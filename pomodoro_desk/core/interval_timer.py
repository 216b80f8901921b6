# pomodoro_desk/core/interval_timer.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


class TimerEvent(Enum):
    STARTED = "started"
    PAUSED = "paused"
    RESUMED = "resumed"
    STOPPED = "stopped"
    TICKED = "ticked"
    EXPIRED = "expired"
    REARMED = "rearmed"


def format_time(total_seconds):
    """Formats a number of seconds as zero-padded MM:SS."""
    total_seconds = max(0, int(total_seconds))
    minutes = total_seconds // 60
    seconds = total_seconds % 60
    return f"{minutes:02d}:{seconds:02d}"


class IntervalTimer:
    """
    Countdown state machine for a single interval (work or break).
    Holds no scheduler of its own: whoever owns it calls tick() once per
    second while it is running. Every operation returns the events it emitted.
    """

    def __init__(self, name, duration_seconds):
        duration_seconds = max(1, int(duration_seconds))
        self.name = name
        self.configured_duration = duration_seconds
        self.remaining = duration_seconds
        self.state = TimerState.IDLE

    def start(self, duration_seconds):
        """(Re)starts the countdown from a freshly configured duration."""
        if duration_seconds < 1:
            logger.debug("ignoring start of %s timer with duration %r", self.name, duration_seconds)
            return []
        self.configured_duration = duration_seconds
        self.remaining = duration_seconds
        self.state = TimerState.RUNNING
        logger.debug("%s timer started for %ds", self.name, duration_seconds)
        return [TimerEvent.STARTED]

    def pause_toggle(self):
        if self.state is TimerState.RUNNING:
            self.state = TimerState.PAUSED
            return [TimerEvent.PAUSED]
        if self.state is TimerState.PAUSED:
            self.state = TimerState.RUNNING
            return [TimerEvent.RESUMED]
        logger.debug("ignoring pause toggle on %s timer in state %s", self.name, self.state.value)
        return []

    def stop(self):
        if self.state is TimerState.IDLE:
            return []
        self.remaining = self.configured_duration
        self.state = TimerState.IDLE
        return [TimerEvent.STOPPED]

    def tick(self):
        if self.state is not TimerState.RUNNING:
            return []
        self.remaining -= 1
        if self.remaining <= 0:
            self.remaining = 0
            self.state = TimerState.EXPIRED
            logger.info("%s timer expired", self.name)
            return [TimerEvent.TICKED, TimerEvent.EXPIRED]
        return [TimerEvent.TICKED]

    def rearm(self):
        """Puts an expired timer back to its configured duration without starting it."""
        if self.state is not TimerState.EXPIRED:
            return []
        self.remaining = self.configured_duration
        self.state = TimerState.IDLE
        return [TimerEvent.REARMED]

    def display(self):
        return format_time(self.remaining)
