import threading

import pytest

from src.pathfinding.deadline import Deadline
from src.pathfinding.exceptions import SearchTimeoutError


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_within_budget_does_not_raise(clock):
    deadline = Deadline(budget=5.0, clock=clock)
    clock.now = 4.9

    deadline.check()
    assert not deadline.expired
    assert deadline.remaining == pytest.approx(0.1)


def test_past_budget_raises(clock):
    deadline = Deadline(budget=5.0, clock=clock)
    clock.now = 5.5

    with pytest.raises(SearchTimeoutError, match="5.000s deadline"):
        deadline.check()
    assert deadline.remaining == 0.0


def test_never_only_expires_when_cancelled(clock):
    deadline = Deadline(clock=clock)
    clock.now = 1e9

    deadline.check()
    assert deadline.remaining is None

    deadline.cancel()
    assert deadline.cancelled
    with pytest.raises(SearchTimeoutError, match="cancelled"):
        deadline.check()


def test_cancel_from_another_thread():
    deadline = Deadline.never()
    worker = threading.Thread(target=deadline.cancel)
    worker.start()
    worker.join()

    assert deadline.expired


def test_negative_budget_rejected():
    with pytest.raises(ValueError):
        Deadline(budget=-1)


def test_after_sets_budget():
    assert Deadline.after(2.5).budget == 2.5
