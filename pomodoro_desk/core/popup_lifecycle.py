# pomodoro_desk/core/popup_lifecycle.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_DURATION_MS = 60000
FRAME_INTERVAL_MS = 20

# Rates are per millisecond.
SLIDE_IN_SPEED = 0.4
FADE_IN_RATE = 0.0025
MAX_OPACITY = 0.95
AUTO_FADE_RATE = 0.0004
SLIDE_OUT_SPEED = 0.6
SLIDE_OUT_FADE_RATE = 0.004


class PopupPhase(Enum):
    SLIDING_IN = "sliding_in"
    VISIBLE = "visible"
    FADING_OUT = "fading_out"
    CLOSED = "closed"


class CloseTrigger(Enum):
    AUTO = "auto"
    USER = "user"


class PopupCommand(Enum):
    ACCEPT = "accept"
    DEFER = "defer"


class PopupEvent(Enum):
    VISIBLE = "visible"
    ACCEPTED = "accepted"
    DEFERRED = "deferred"
    FADING_OUT = "fading_out"
    CLOSED = "closed"


class PopupLifecycle:
    """
    Lifecycle of an end-of-interval notification, independent of any widget.

    The popup slides up from start_y to target_y while fading in, stays
    visible until either the user acts or total_duration_ms has passed since
    creation, then leaves: in place with a slow fade when it timed out, or
    sliding back down past exit_y with a quick fade when the user acted.
    Only the first close trigger counts.
    """

    def __init__(self, message, on_accept, start_y, target_y, exit_y,
                 total_duration_ms=DEFAULT_TOTAL_DURATION_MS):
        if total_duration_ms <= 0:
            raise ValueError("total_duration_ms must be positive")
        self._message = message
        self._on_accept = on_accept
        self.target_y = target_y
        self.exit_y = exit_y
        self.total_duration_ms = total_duration_ms

        self.phase = PopupPhase.SLIDING_IN
        self.y = float(start_y)
        self.opacity = 0.0
        self.elapsed_ms = 0
        self.trigger = None
        self.accepted = False

    @property
    def message(self):
        return self._message

    @property
    def is_interactive(self):
        return self.phase in (PopupPhase.SLIDING_IN, PopupPhase.VISIBLE)

    @property
    def is_closed(self):
        return self.phase is PopupPhase.CLOSED

    def progress_fraction(self):
        fraction = 1.0 - self.elapsed_ms / self.total_duration_ms
        return min(1.0, max(0.0, fraction))

    def dispatch(self, command):
        if command is PopupCommand.ACCEPT:
            return self.accept()
        if command is PopupCommand.DEFER:
            return self.defer()
        raise ValueError(f"unknown popup command: {command!r}")

    def accept(self):
        if not self.is_interactive or self.accepted:
            logger.debug("ignoring accept in phase %s", self.phase.value)
            return []
        self.accepted = True
        events = [PopupEvent.ACCEPTED]
        try:
            self._on_accept()
        except Exception:
            logger.exception("accept callback failed for popup %r", self._message)
        return events + self._begin_close(CloseTrigger.USER)

    def defer(self):
        if not self.is_interactive:
            logger.debug("ignoring defer in phase %s", self.phase.value)
            return []
        return [PopupEvent.DEFERRED] + self._begin_close(CloseTrigger.USER)

    def tick(self, elapsed_ms):
        if elapsed_ms <= 0 or self.phase is PopupPhase.CLOSED:
            return []

        events = []
        if self.phase is PopupPhase.SLIDING_IN:
            events += self._slide_in(elapsed_ms)

        if self.is_interactive:
            self.elapsed_ms = min(self.total_duration_ms, self.elapsed_ms + elapsed_ms)
            if self.elapsed_ms >= self.total_duration_ms:
                logger.debug("popup %r timed out", self._message)
                events += self._begin_close(CloseTrigger.AUTO)
        elif self.phase is PopupPhase.FADING_OUT:
            events += self._fade_out(elapsed_ms)
        return events

    def _slide_in(self, elapsed_ms):
        self.y -= SLIDE_IN_SPEED * elapsed_ms
        if self.opacity < MAX_OPACITY:
            self.opacity = min(MAX_OPACITY, self.opacity + FADE_IN_RATE * elapsed_ms)
        if self.y > self.target_y:
            return []
        self.y = float(self.target_y)
        self.opacity = MAX_OPACITY
        self.phase = PopupPhase.VISIBLE
        return [PopupEvent.VISIBLE]

    def _fade_out(self, elapsed_ms):
        if self.trigger is CloseTrigger.AUTO:
            self.opacity -= AUTO_FADE_RATE * elapsed_ms
        else:
            self.y += SLIDE_OUT_SPEED * elapsed_ms
            self.opacity -= SLIDE_OUT_FADE_RATE * elapsed_ms

        if self.opacity <= 0 or (self.trigger is CloseTrigger.USER and self.y > self.exit_y):
            self.opacity = max(0.0, self.opacity)
            self.phase = PopupPhase.CLOSED
            return [PopupEvent.CLOSED]
        return []

    def _begin_close(self, trigger):
        if not self.is_interactive:
            return []
        self.trigger = trigger
        self.phase = PopupPhase.FADING_OUT
        return [PopupEvent.FADING_OUT]
