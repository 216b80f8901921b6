import pytest

from pomodoro_desk.core.popup_lifecycle import (
    CloseTrigger,
    MAX_OPACITY,
    PopupCommand,
    PopupEvent,
    PopupLifecycle,
    PopupPhase,
)

START_Y = 1130
TARGET_Y = 860
EXIT_Y = 1080


class Recorder:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def make_popup(on_accept=None, total_duration_ms=60000):
    return PopupLifecycle(
        "Work time is over. Take a break?",
        on_accept or Recorder(),
        start_y=START_Y,
        target_y=TARGET_Y,
        exit_y=EXIT_Y,
        total_duration_ms=total_duration_ms,
    )


def run_until_closed(popup, step_ms=20, limit_ms=120000):
    spent = 0
    while not popup.is_closed and spent < limit_ms:
        popup.tick(step_ms)
        spent += step_ms
    return spent


def test_new_popup_starts_sliding_in_off_screen_and_transparent():
    popup = make_popup()

    assert popup.phase is PopupPhase.SLIDING_IN
    assert popup.y == START_Y
    assert popup.opacity == 0.0
    assert popup.progress_fraction() == 1.0
    assert popup.is_interactive


def test_slide_in_moves_up_and_fades_in_each_frame():
    popup = make_popup()

    assert popup.tick(20) == []

    assert popup.y == pytest.approx(START_Y - 8)
    assert popup.opacity == pytest.approx(0.05)
    assert popup.phase is PopupPhase.SLIDING_IN


def test_slide_in_snaps_to_target_and_becomes_visible():
    popup = make_popup()

    events = popup.tick(1000)

    assert events == [PopupEvent.VISIBLE]
    assert popup.phase is PopupPhase.VISIBLE
    assert popup.y == TARGET_Y
    assert popup.opacity == MAX_OPACITY


def test_accept_twice_invokes_callback_once():
    callback = Recorder()
    popup = make_popup(callback)
    popup.tick(1000)

    first = popup.accept()
    second = popup.accept()

    assert callback.calls == 1
    assert first == [PopupEvent.ACCEPTED, PopupEvent.FADING_OUT]
    assert second == []
    assert popup.trigger is CloseTrigger.USER


def test_accept_while_sliding_in_is_allowed():
    callback = Recorder()
    popup = make_popup(callback)
    popup.tick(20)

    popup.accept()

    assert callback.calls == 1
    assert popup.phase is PopupPhase.FADING_OUT


def test_user_close_slides_down_while_fading():
    popup = make_popup()
    popup.tick(1000)
    popup.defer()

    popup.tick(20)

    assert popup.y == pytest.approx(TARGET_Y + 12)
    assert popup.opacity == pytest.approx(MAX_OPACITY - 0.08)
    assert popup.phase is PopupPhase.FADING_OUT


def test_user_close_ends_closed():
    popup = make_popup()
    popup.tick(1000)
    popup.accept()

    run_until_closed(popup)

    assert popup.phase is PopupPhase.CLOSED
    assert popup.opacity == 0.0


def test_defer_closes_without_invoking_callback():
    callback = Recorder()
    popup = make_popup(callback)
    popup.tick(1000)

    events = popup.defer()
    run_until_closed(popup)

    assert events == [PopupEvent.DEFERRED, PopupEvent.FADING_OUT]
    assert callback.calls == 0
    assert popup.is_closed


def test_accept_after_defer_is_ignored():
    callback = Recorder()
    popup = make_popup(callback)
    popup.defer()

    assert popup.accept() == []
    assert callback.calls == 0


def test_deadline_closes_without_invoking_callback():
    callback = Recorder()
    popup = make_popup(callback)

    run_until_closed(popup)

    assert callback.calls == 0
    assert popup.phase is PopupPhase.CLOSED
    assert popup.trigger is CloseTrigger.AUTO


def test_deadline_starts_in_place_fade_even_without_interaction():
    popup = make_popup()

    events = popup.tick(60000)

    assert PopupEvent.VISIBLE in events
    assert events[-1] is PopupEvent.FADING_OUT
    assert popup.trigger is CloseTrigger.AUTO

    popup.tick(50)
    assert popup.y == TARGET_Y
    assert popup.opacity == pytest.approx(MAX_OPACITY - 0.02)


def test_user_action_after_deadline_is_ignored():
    callback = Recorder()
    popup = make_popup(callback)
    popup.tick(60000)

    assert popup.accept() == []
    assert popup.defer() == []
    assert callback.calls == 0
    assert popup.trigger is CloseTrigger.AUTO


def test_deadline_after_user_action_does_not_switch_to_auto_close():
    popup = make_popup(total_duration_ms=1000)
    popup.tick(500)
    popup.defer()

    popup.tick(20)

    assert popup.trigger is CloseTrigger.USER
    assert popup.y > TARGET_Y


def test_auto_fade_reaches_closed():
    popup = make_popup()
    popup.tick(60000)

    events = popup.tick(2400)

    assert events == [PopupEvent.CLOSED]
    assert popup.opacity == 0.0


def test_progress_fraction_decreases_linearly_and_clamps():
    popup = make_popup()

    popup.tick(15000)
    assert popup.progress_fraction() == pytest.approx(0.75)

    popup.tick(15000)
    assert popup.progress_fraction() == pytest.approx(0.5)

    popup.tick(90000)
    assert popup.progress_fraction() == 0.0


def test_progress_stops_once_closing_begins():
    popup = make_popup()
    popup.tick(1000)
    popup.defer()
    fraction = popup.progress_fraction()

    popup.tick(100)

    assert popup.progress_fraction() == fraction


def test_failing_callback_still_closes_popup():
    def boom():
        raise RuntimeError("nope")

    popup = make_popup(boom)
    popup.tick(1000)

    events = popup.accept()

    assert events == [PopupEvent.ACCEPTED, PopupEvent.FADING_OUT]
    assert popup.phase is PopupPhase.FADING_OUT


def test_ticks_after_close_are_ignored():
    popup = make_popup()
    popup.defer()
    run_until_closed(popup)

    assert popup.tick(20) == []
    assert popup.tick(0) == []
    assert popup.is_closed


def test_message_is_kept():
    assert make_popup().message == "Work time is over. Take a break?"


def test_total_duration_must_be_positive():
    with pytest.raises(ValueError):
        make_popup(total_duration_ms=0)


def test_dispatch_routes_popup_commands():
    callback = Recorder()
    popup = make_popup(callback)

    assert popup.dispatch(PopupCommand.ACCEPT)[0] is PopupEvent.ACCEPTED
    assert popup.dispatch(PopupCommand.DEFER) == []
    assert callback.calls == 1

    with pytest.raises(ValueError):
        popup.dispatch("accept")
