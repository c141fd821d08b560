import math

import pytest

from pomotodo.domain.dial import START_RADIANS, DialSpec, dial_box
from pomotodo.domain.task_timer import TaskTimer, TimerState
from pomotodo.tests.unit.helpers import ManualScheduler


def test_spec_from_fresh_timer_has_no_sweep():
    timer = TaskTimer(1500, ManualScheduler())

    spec = DialSpec.from_timer(timer)

    assert spec.fraction == 0
    assert spec.text == "25:00"
    assert spec.state is TimerState.IDLE
    assert spec.closed is False
    assert spec.sweep_radians == 0
    assert spec.start_radians == START_RADIANS == pytest.approx(-math.pi / 2)


def test_half_elapsed_sweeps_half_circle_clockwise_from_top():
    scheduler = ManualScheduler()
    timer = TaskTimer(4, scheduler)
    timer.start()
    scheduler.fire(2)

    spec = DialSpec.from_timer(timer)

    assert spec.sweep_radians == pytest.approx(math.pi)
    assert spec.tk_start_extent() == (90.0, pytest.approx(-180.0))


def test_completed_timer_draws_closed_ring():
    scheduler = ManualScheduler()
    timer = TaskTimer(1, scheduler)
    timer.start()
    scheduler.fire()

    spec = DialSpec.from_timer(timer)

    assert spec.closed is True
    assert spec.fraction == 1
    assert spec.text == "00:00"


def test_fraction_is_clamped_for_sweep():
    spec = DialSpec(fraction=1.5, text="00:00", state=TimerState.COMPLETED, closed=True)
    assert spec.sweep_radians == pytest.approx(2 * math.pi)


def test_dial_box_centres_largest_circle_with_inset():
    box = dial_box(50, 40)

    assert (box.cx, box.cy) == (25, 20)
    assert box.radius == 18
    assert box.bbox == (7, 2, 43, 38)


def test_dial_box_never_negative():
    assert dial_box(2, 2).radius == 0
