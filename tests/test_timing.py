"""Tests for debounce and throttle."""

import threading
import time

import pytest

from jsclone.timing import debounce, throttle


class FakeClock:
    """Manually advanced clock for throttle tests."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestDebounce:
    """debounce delays until calls go quiet."""

    def test_only_last_call_runs(self):
        """A burst of calls produces one call with the last arguments."""
        calls = []
        done = threading.Event()

        def record(value):
            calls.append(value)
            done.set()

        debounced = debounce(record, 0.05)
        for i in range(5):
            debounced(i)

        assert done.wait(2)
        time.sleep(0.1)
        assert calls == [4]

    def test_decorator_with_options(self):
        """@debounce(wait=...) form."""
        done = threading.Event()

        @debounce(wait=0.01)
        def fire():
            done.set()

        fire()
        assert done.wait(2)
        assert fire.__name__ == "fire"

    def test_bare_decorator(self):
        """@debounce without arguments."""
        done = threading.Event()

        @debounce
        def fire(**kwargs):
            done.set()

        fire(x=1)
        assert done.wait(2)

    def test_cancel(self):
        """A cancelled call never runs."""
        calls = []
        debounced = debounce(calls.append, 0.05)
        debounced(1)
        assert debounced.pending is True
        debounced.cancel()
        assert debounced.pending is False
        time.sleep(0.15)
        assert calls == []

    def test_pending_clears_after_firing(self):
        """pending is False once the delayed call has run."""
        done = threading.Event()
        debounced = debounce(lambda: done.set(), 0.01)
        debounced()
        assert done.wait(2)
        time.sleep(0.05)
        assert debounced.pending is False

    def test_calls_separated_by_quiet_period(self):
        """Calls further apart than wait each run."""
        calls = []
        debounced = debounce(calls.append, 0.02)
        debounced(1)
        time.sleep(0.2)
        debounced(2)
        time.sleep(0.2)
        assert calls == [1, 2]

    def test_negative_wait(self):
        """wait must not be negative."""
        with pytest.raises(ValueError):
            debounce(print, -1)


class TestThrottle:
    """throttle runs at most once per interval."""

    def test_first_call_runs(self):
        """The first call always goes through."""
        clock = FakeClock()
        throttled = throttle(lambda x: x * 2, 1.0, clock=clock)
        assert throttled(2) == 4

    def test_calls_within_interval_dropped(self):
        """Calls inside the interval return None without running."""
        calls = []
        clock = FakeClock()
        throttled = throttle(calls.append, 1.0, clock=clock)

        throttled(1)
        clock.now = 0.5
        assert throttled(2) is None
        clock.now = 0.999
        throttled(3)
        assert calls == [1]

    def test_call_after_interval_runs(self):
        """Once wait has elapsed the next call runs and restarts the interval."""
        calls = []
        clock = FakeClock()
        throttled = throttle(calls.append, 1.0, clock=clock)

        throttled(1)
        clock.now = 1.0
        throttled(2)
        clock.now = 1.5
        throttled(3)
        clock.now = 2.0
        throttled(4)
        assert calls == [1, 2, 4]

    def test_decorator_form(self):
        """@throttle(wait=...) keeps the wrapped name."""
        clock = FakeClock()

        @throttle(wait=10, clock=clock)
        def ping():
            return "pong"

        assert ping() == "pong"
        assert ping() is None
        assert ping.__name__ == "ping"

    def test_default_wait(self):
        """The default interval is 0.3 seconds."""
        clock = FakeClock()
        throttled = throttle(lambda: 1, clock=clock)
        throttled()
        clock.now = 0.29
        assert throttled() is None
        clock.now = 0.3
        assert throttled() == 1

    def test_negative_wait(self):
        """wait must not be negative."""
        with pytest.raises(ValueError):
            throttle(print, wait=-0.1)
