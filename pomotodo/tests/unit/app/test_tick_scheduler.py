from __future__ import annotations

import pytest

from pomotodo.app.tick_scheduler import TickScheduler
from pomotodo.domain.task_timer import TaskTimer, TimerState
from pomotodo.tests.unit.helpers import FakeTk


def _make() -> tuple[TickScheduler, FakeTk]:
    tk = FakeTk()
    return TickScheduler(tk.after, tk.after_cancel), tk


def test_every_rearms_after_each_call() -> None:
    scheduler, tk = _make()
    calls = []

    token = scheduler.every(1, lambda: calls.append("tick"))

    assert [delay for delay, _ in tk.queue.values()] == [1000]
    tk.run_pending()
    tk.run_pending()
    assert calls == ["tick", "tick"]
    assert len(tk.queue) == 1
    assert scheduler.is_active(token)


def test_cancel_removes_pending_after_id() -> None:
    scheduler, tk = _make()
    token = scheduler.every(2, lambda: None)
    (after_id,) = tk.queue.keys()

    scheduler.cancel(token)

    assert tk.canceled == [after_id]
    assert tk.queue == {}
    assert not scheduler.is_active(token)


def test_cancel_unknown_or_none_token_is_noop() -> None:
    scheduler, tk = _make()
    scheduler.cancel(None)
    scheduler.cancel(42)
    assert tk.canceled == []


def test_callback_canceling_itself_is_not_rearmed() -> None:
    scheduler, tk = _make()
    tokens = []
    tokens.append(scheduler.every(1, lambda: scheduler.cancel(tokens[0])))

    tk.run_pending()

    assert tk.queue == {}
    assert len(scheduler) == 0


def test_cancel_swallows_tcl_errors() -> None:
    def broken_cancel(_after_id: str) -> None:
        raise RuntimeError("application has been destroyed")

    tk = FakeTk()
    scheduler = TickScheduler(tk.after, broken_cancel)
    token = scheduler.every(1, lambda: None)

    scheduler.cancel(token)

    assert len(scheduler) == 0


def test_cancel_all_clears_every_handle() -> None:
    scheduler, tk = _make()
    scheduler.every(1, lambda: None)
    scheduler.every(1, lambda: None)

    scheduler.cancel_all()

    assert len(scheduler) == 0
    assert tk.queue == {}


def test_task_timer_runs_to_completion_on_tk_scheduler() -> None:
    scheduler, tk = _make()
    timer = TaskTimer(3, scheduler)

    timer.start()
    while tk.run_pending():
        pass

    assert timer.state is TimerState.COMPLETED
    assert timer.remaining_s == 0
    assert len(scheduler) == 0


def test_failing_callback_is_still_rearmed() -> None:
    scheduler, tk = _make()
    calls = []

    def flaky() -> None:
        calls.append("tick")
        if len(calls) == 1:
            raise RuntimeError("redraw failed")

    token = scheduler.every(1, flaky)

    with pytest.raises(RuntimeError):
        tk.run_pending()

    assert scheduler.is_active(token)
    assert [delay for delay, _ in tk.queue.values()] == [1000]
    tk.run_pending()
    assert calls == ["tick", "tick"]


def test_timer_keeps_counting_after_redraw_error() -> None:
    scheduler, tk = _make()
    failures = []

    def on_tick(timer: TaskTimer) -> None:
        if timer.remaining_s == 4 and not failures:
            failures.append(timer.remaining_s)
            raise RuntimeError("canvas gone")

    timer = TaskTimer(5, scheduler, on_tick=on_tick)
    timer.start()

    with pytest.raises(RuntimeError):
        tk.run_pending()

    assert timer.state is TimerState.RUNNING
    assert len(tk.queue) == 1
    tk.run_pending()
    assert timer.remaining_s == 3
