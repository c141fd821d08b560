from __future__ import annotations

import pytest

from pomotodo.domain.errors import InvalidDurationError, InvalidTransition
from pomotodo.domain.task_timer import TICK_INTERVAL_S, TaskTimer, TimerState, create_timer
from pomotodo.tests.unit.helpers import ManualScheduler


def _make(duration_s: int = 5, **kwargs) -> tuple[TaskTimer, ManualScheduler]:
    scheduler = ManualScheduler()
    return TaskTimer(duration_s, scheduler, **kwargs), scheduler


@pytest.mark.parametrize("duration", [1, 5, 1500, 3599, 6000])
def test_new_timer_is_idle_with_full_duration(duration: int) -> None:
    timer = create_timer(duration)

    assert timer.remaining_s == duration
    assert timer.state is TimerState.IDLE
    assert timer.progress_fraction() == 0


@pytest.mark.parametrize("duration", [0, -1, 2.5, "25", True, None])
def test_non_positive_or_non_integer_duration_fails_fast(duration) -> None:
    with pytest.raises(InvalidDurationError):
        TaskTimer(duration, ManualScheduler())


def test_invalid_duration_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        create_timer(0)


def test_five_second_countdown_scenario() -> None:
    completed = []
    timer, scheduler = _make(5, on_completed=completed.append)

    assert timer.start() is True
    assert scheduler.pending == 1

    remaining, texts, states = [], [], []
    for _ in range(5):
        timer.tick()
        remaining.append(timer.remaining_s)
        texts.append(timer.display_text())
        states.append(timer.state)

    assert remaining == [4, 3, 2, 1, 0]
    assert texts == ["00:04", "00:03", "00:02", "00:01", "00:00"]
    assert states[:4] == [TimerState.RUNNING] * 4
    assert states[4] is TimerState.COMPLETED
    assert completed == [timer]
    assert scheduler.pending == 0
    assert timer.progress_fraction() == 1


def test_pomodoro_readout_and_fraction() -> None:
    timer, scheduler = _make(1500)

    assert timer.display_text() == "25:00"
    timer.start()
    scheduler.fire(60)
    assert timer.display_text() == "24:00"
    scheduler.fire(690)
    assert timer.remaining_s == 750
    assert timer.progress_fraction() == 0.5


def test_tick_is_ignored_unless_running() -> None:
    timer, _ = _make(5)

    timer.tick()
    assert timer.remaining_s == 5
    assert timer.state is TimerState.IDLE

    timer.start()
    timer.tick()
    timer.pause()
    timer.tick()
    assert timer.remaining_s == 4
    assert timer.state is TimerState.PAUSED


def test_pause_then_start_resumes_from_paused_value() -> None:
    timer, scheduler = _make(10)
    timer.start()
    scheduler.fire(3)
    timer.pause()
    assert timer.remaining_s == 7

    timer.start()
    scheduler.fire(2)
    assert timer.remaining_s == 5
    assert timer.state is TimerState.RUNNING


def test_pause_twice_is_idempotent() -> None:
    timer, scheduler = _make(10)
    timer.start()

    assert timer.pause() is True
    assert timer.pause() is False
    assert timer.state is TimerState.PAUSED
    assert len(scheduler.canceled) == 1


def test_ticks_are_scheduled_once_per_second() -> None:
    timer, scheduler = _make(1500)

    timer.start()
    timer.pause()
    timer.start()

    assert set(scheduler.intervals.values()) == {TICK_INTERVAL_S} == {1}


def test_start_does_not_double_schedule() -> None:
    timer, scheduler = _make(10)

    timer.start()
    assert timer.start() is False
    assert scheduler.pending == 1


@pytest.mark.parametrize("ticks_before", [0, 3])
def test_reset_from_any_state_restores_idle(ticks_before: int) -> None:
    timer, scheduler = _make(5)
    timer.start()
    scheduler.fire(ticks_before)

    timer.reset()

    assert timer.remaining_s == 5
    assert timer.state is TimerState.IDLE
    assert scheduler.pending == 0


def test_reset_from_completed_and_paused() -> None:
    timer, scheduler = _make(2)
    timer.start()
    scheduler.fire(2)
    assert timer.state is TimerState.COMPLETED
    timer.reset()
    assert (timer.state, timer.remaining_s) == (TimerState.IDLE, 2)

    timer.start()
    scheduler.fire()
    timer.pause()
    timer.reset()
    assert (timer.state, timer.remaining_s) == (TimerState.IDLE, 2)


def test_stale_handle_after_reset_does_not_decrement() -> None:
    timer, scheduler = _make(10)
    timer.start()
    old_token = next(iter(scheduler.active))
    scheduler.fire()

    timer.reset()
    scheduler.fire_token(old_token)
    assert timer.remaining_s == 10

    timer.start()
    scheduler.fire_token(old_token)
    assert timer.remaining_s == 10
    scheduler.fire()
    assert timer.remaining_s == 9


def test_start_on_completed_timer_is_silently_ignored() -> None:
    timer, scheduler = _make(1)
    timer.start()
    scheduler.fire()

    assert timer.start() is False
    assert timer.state is TimerState.COMPLETED
    assert scheduler.pending == 0


def test_strict_start_raises_invalid_transition() -> None:
    timer, scheduler = _make(1)
    timer.start()
    scheduler.fire()

    with pytest.raises(InvalidTransition) as excinfo:
        timer.start(strict=True)
    assert excinfo.value.state == "completed"


def test_completion_fires_once_per_run() -> None:
    completed = []
    timer, scheduler = _make(2, on_completed=completed.append)

    timer.start()
    scheduler.fire(5)
    timer.tick()
    assert len(completed) == 1

    timer.reset()
    timer.start()
    scheduler.fire(2)
    assert len(completed) == 2


def test_redraw_requested_on_every_tick_while_running() -> None:
    redraws = []
    timer, scheduler = _make(3, on_tick=lambda t: redraws.append(t.remaining_s))

    timer.start()
    scheduler.fire(2)

    # one redraw for the start transition, one per tick
    assert redraws == [3, 2, 1]


def test_toggle_switches_between_running_and_paused() -> None:
    timer, _ = _make(5)

    timer.toggle()
    assert timer.is_running
    timer.toggle()
    assert timer.state is TimerState.PAUSED


def test_dispose_cancels_pending_tick_and_blocks_restart() -> None:
    redraws = []
    timer, scheduler = _make(5, on_tick=redraws.append)
    timer.start()
    token = next(iter(scheduler.active))

    timer.dispose()
    scheduler.fire_token(token)

    assert scheduler.pending == 0
    assert timer.remaining_s == 5
    assert timer.state is TimerState.PAUSED
    assert timer.start() is False
    assert len(redraws) == 1


def test_display_text_widens_past_99_minutes() -> None:
    timer = create_timer(100 * 60)
    assert timer.display_text() == "100:00"
