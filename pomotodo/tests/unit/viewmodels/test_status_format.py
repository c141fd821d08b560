import pytest

from pomotodo.domain.task_timer import TimerState
from pomotodo.viewmodels.status_format import start_pause_label, state_label


@pytest.mark.parametrize(
    ("state", "label"),
    [
        (TimerState.IDLE, "Ready"),
        (TimerState.RUNNING, "Running"),
        (TimerState.PAUSED, "Paused"),
        (TimerState.COMPLETED, "Done"),
        (None, "Ready"),
    ],
)
def test_state_label(state, label):
    assert state_label(state) == label


def test_start_pause_label_follows_running_state():
    assert start_pause_label(TimerState.RUNNING) == "Pause"
    for state in (TimerState.IDLE, TimerState.PAUSED, TimerState.COMPLETED, None):
        assert start_pause_label(state) == "Start"
