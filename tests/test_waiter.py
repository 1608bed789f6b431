"""
Tests for the polling waiter.
"""

import pytest

from seleniumclient.core.errors import (
    InvalidSelectorError,
    NoSuchElementError,
    TransportError,
    WaitTimeout,
)
from seleniumclient.core.waiter import PollingWaiter


class FakeClock:
    """Records requested sleeps instead of sleeping."""

    def __init__(self):
        self.sleeps: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.sleeps.append(seconds)

    @property
    def slept(self) -> float:
        return sum(self.sleeps)


def flaky(failures: int, result="found", error=NoSuchElementError):
    calls = {"count": 0}

    def operation():
        calls["count"] += 1
        if calls["count"] <= failures:
            raise error("not yet")
        return result

    operation.calls = calls
    return operation


class TestPollingWaiter:
    @pytest.fixture
    def clock(self) -> FakeClock:
        return FakeClock()

    @pytest.fixture
    def waiter(self, clock) -> PollingWaiter:
        return PollingWaiter(interval=1.0, sleep=clock)

    def test_immediate_success(self, waiter, clock):
        assert waiter.until(lambda: 42, timeout=3) == 42
        assert clock.sleeps == []

    def test_success_on_second_attempt(self, waiter, clock):
        operation = flaky(failures=1)

        assert waiter.until(operation, timeout=3) == "found"
        assert operation.calls["count"] == 2
        assert clock.sleeps == [1.0]

    def test_times_out_after_budget(self, waiter, clock):
        operation = flaky(failures=100)

        with pytest.raises(WaitTimeout) as exc_info:
            waiter.until(operation, timeout=3)

        assert clock.slept == pytest.approx(3.0, abs=1.0)
        assert exc_info.value.timeout == 3
        assert exc_info.value.attempts == operation.calls["count"]
        assert isinstance(exc_info.value.__cause__, NoSuchElementError)

    def test_zero_timeout_single_attempt(self, waiter, clock):
        operation = flaky(failures=100)

        with pytest.raises(WaitTimeout):
            waiter.until(operation, timeout=0)
        assert operation.calls["count"] == 1
        assert clock.sleeps == []

    @pytest.mark.parametrize("error", [TransportError, InvalidSelectorError])
    def test_other_errors_propagate_immediately(self, waiter, clock, error):
        operation = flaky(failures=100, error=error)

        with pytest.raises(error):
            waiter.until(operation, timeout=5)
        assert operation.calls["count"] == 1
        assert clock.sleeps == []

    def test_custom_retry_signal(self, waiter):
        class StillThere(Exception):
            pass

        operation = flaky(failures=2, result=True, error=StillThere)

        assert waiter.until(operation, timeout=5, retry_on=(StillThere,)) is True

    def test_interval_per_call(self, waiter, clock):
        operation = flaky(failures=2)

        waiter.until(operation, timeout=1, interval=0.25)
        assert clock.sleeps == [0.25, 0.25]

    def test_real_clock_deadline(self):
        waiter = PollingWaiter(interval=0.01)

        with pytest.raises(WaitTimeout):
            waiter.until(flaky(failures=1000), timeout=0.05)

    def test_invalid_arguments(self, waiter):
        with pytest.raises(ValueError):
            PollingWaiter(interval=0)
        with pytest.raises(ValueError):
            waiter.until(lambda: 1, timeout=-1)


@pytest.mark.parametrize("interval", [0, -1.0])
def test_per_call_interval_must_be_positive(interval):
    waiter = PollingWaiter(interval=1.0, sleep=lambda seconds: None)

    with pytest.raises(ValueError):
        waiter.until(lambda: 1, timeout=3, interval=interval)
