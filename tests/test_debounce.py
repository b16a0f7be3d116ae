import pytest

from services.debounce import Debouncer


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_callback_runs_after_quiet_period():
    clock = FakeClock()
    calls = []
    debouncer = Debouncer(1.5, clock=clock)

    debouncer.schedule(lambda: calls.append("run"))
    assert debouncer.pending
    assert debouncer.poll() is False

    clock.now += 1.5
    assert debouncer.poll() is True
    assert calls == ["run"]
    assert not debouncer.pending
    assert debouncer.poll() is False


def test_rescheduling_replaces_pending_callback():
    clock = FakeClock()
    calls = []
    debouncer = Debouncer(1.5, clock=clock)

    debouncer.schedule(lambda: calls.append("first"))
    clock.now += 1.0
    debouncer.schedule(lambda: calls.append("second"))
    clock.now += 1.0
    assert debouncer.poll() is False

    clock.now += 0.5
    assert debouncer.poll() is True
    assert calls == ["second"]


def test_cancel():
    clock = FakeClock()
    calls = []
    debouncer = Debouncer(0.5, clock=clock)

    assert debouncer.cancel() is False
    debouncer.schedule(lambda: calls.append("run"))
    assert debouncer.cancel() is True

    clock.now += 1.0
    assert debouncer.poll() is False
    assert calls == []


def test_negative_quiet_period_is_rejected():
    with pytest.raises(ValueError):
        Debouncer(-1)
