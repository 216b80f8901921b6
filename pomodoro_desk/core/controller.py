# pomodoro_desk/core/controller.py
import logging
from dataclasses import dataclass
from enum import Enum

from .interval_timer import TimerEvent, TimerState

logger = logging.getLogger(__name__)

WORK_MINUTES_RANGE = (1, 240)
BREAK_MINUTES_RANGE = (1, 120)
DEFAULT_WORK_MINUTES = 30
DEFAULT_BREAK_MINUTES = 10


class TimerKind(Enum):
    WORK = "work"
    BREAK = "break"

    @property
    def other(self):
        return TimerKind.BREAK if self is TimerKind.WORK else TimerKind.WORK


class Command(Enum):
    START = "start"
    PAUSE_TOGGLE = "pause_toggle"
    STOP = "stop"


class Cue(Enum):
    START = "start"
    EXPIRED = "expired"


EXPIRY_MESSAGES = {
    TimerKind.WORK: "Work time is over. Take a break?",
    TimerKind.BREAK: "Break time is over. Start working?",
}

MINUTES_RANGES = {
    TimerKind.WORK: WORK_MINUTES_RANGE,
    TimerKind.BREAK: BREAK_MINUTES_RANGE,
}


@dataclass(frozen=True)
class ControlState:
    start_enabled: bool
    pause_enabled: bool
    stop_enabled: bool
    pause_label: str


def clamp_minutes(kind, minutes):
    low, high = MINUTES_RANGES[kind]
    return max(low, min(high, int(minutes)))


class TimerController:
    """
    Coordinates the work and break timers.

    All user input arrives through dispatch(); scheduler ticks arrive through
    tick(). When a timer expires the controller plays a cue, asks the
    notifier for a popup whose accept action starts the other timer, and
    re-arms the expired timer without starting it.

    `notifier` is called as notifier(kind, message, on_accept). `player`
    needs a play(cue) method and may be None.
    """

    def __init__(self, work_timer, break_timer, notifier, player=None, muted=False,
                 work_minutes=DEFAULT_WORK_MINUTES, break_minutes=DEFAULT_BREAK_MINUTES):
        self.timers = {TimerKind.WORK: work_timer, TimerKind.BREAK: break_timer}
        self.notifier = notifier
        self.player = player
        self.muted = muted
        self._minutes = {
            TimerKind.WORK: clamp_minutes(TimerKind.WORK, work_minutes),
            TimerKind.BREAK: clamp_minutes(TimerKind.BREAK, break_minutes),
        }
        self._listeners = []

    def add_listener(self, listener):
        self._listeners.append(listener)

    def minutes(self, kind):
        return self._minutes[kind]

    def set_minutes(self, kind, minutes):
        """Records the duration input; it only applies on the next start."""
        self._minutes[kind] = clamp_minutes(kind, minutes)

    def set_muted(self, muted):
        self.muted = bool(muted)
        logger.info("audio cues %s", "muted" if self.muted else "unmuted")

    def dispatch(self, kind, command, minutes=None):
        timer = self.timers[kind]
        if command is Command.START:
            if minutes is not None:
                self.set_minutes(kind, minutes)
            events = timer.start(self._minutes[kind] * 60)
        elif command is Command.PAUSE_TOGGLE:
            events = timer.pause_toggle()
        elif command is Command.STOP:
            events = timer.stop()
        else:
            raise ValueError(f"unknown command: {command!r}")
        return self._handle(kind, events)

    def tick(self, kind):
        return self._handle(kind, self.timers[kind].tick())

    def controls(self, kind):
        state = self.timers[kind].state
        if state is TimerState.RUNNING:
            return ControlState(True, True, True, "Pause")
        if state is TimerState.PAUSED:
            return ControlState(True, True, True, "Resume")
        return ControlState(True, False, False, "Pause")

    def _handle(self, kind, events):
        if TimerEvent.STARTED in events:
            self._play(Cue.START)
        if TimerEvent.EXPIRED in events:
            self._notify_expired(kind)
            events = events + self.timers[kind].rearm()
        if events:
            for listener in self._listeners:
                listener(kind, events)
        return events

    def _notify_expired(self, kind):
        self._play(Cue.EXPIRED)
        next_kind = kind.other

        def start_next():
            self.dispatch(next_kind, Command.START)

        try:
            self.notifier(kind, EXPIRY_MESSAGES[kind], start_next)
        except Exception:
            logger.exception("could not show the %s expiry notification", kind.value)

    def _play(self, cue):
        if self.muted or self.player is None:
            return
        try:
            self.player.play(cue)
        except Exception:
            logger.exception("failed to play %s cue", cue.value)
