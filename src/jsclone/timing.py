"""
Rate-limiting decorators.

``debounce`` postpones a call until the caller has been quiet for ``wait``
seconds; ``throttle`` runs a call immediately and drops further calls for
the next ``wait`` seconds. Both can be applied bare (``@debounce``), with
options (``@throttle(wait=1.0)``) or called directly
(``debounce(func, 0.2)``).
"""

import functools
import logging
import threading
import time
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_WAIT = 0.05
DEFAULT_THROTTLE_WAIT = 0.3


def _check_wait(wait: float) -> None:
    if wait < 0:
        raise ValueError(f"wait must be non-negative, got {wait!r}")


class _Debounced:
    """Callable returned by debounce()."""

    def __init__(self, func: Callable[..., Any], wait: float):
        self._func = func
        self._wait = wait
        self._timer: Optional[threading.Timer] = None
        # Bumped on every call and cancel; a timer only fires for its own generation
        self._generation = 0
        self._lock = threading.Lock()
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = threading.Timer(
                self._wait, self._fire, args=(self._generation, args, kwargs)
            )
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self, generation: int, args: tuple, kwargs: dict) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
        self._func(*args, **kwargs)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None


class _Throttled:
    """Callable returned by throttle()."""

    def __init__(self, func: Callable[..., Any], wait: float, clock: Callable[[], float]):
        self._func = func
        self._wait = wait
        self._clock = clock
        self._last_time: Optional[float] = None
        self._lock = threading.Lock()
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        now = self._clock()
        with self._lock:
            if self._last_time is not None and now - self._last_time < self._wait:
                logger.debug("Throttled call to %s dropped",
                             getattr(self._func, "__name__", self._func))
                return None
            self._last_time = now
        return self._func(*args, **kwargs)


def debounce(func: Optional[Callable[..., Any]] = None, wait: float = DEFAULT_DEBOUNCE_WAIT):
    """Delay calling ``func`` until ``wait`` seconds pass without another call.

    Only the most recent call's arguments are used. The call runs on a timer
    thread and its return value is discarded. The returned wrapper has a
    ``cancel()`` method and a ``pending`` flag.
    """
    _check_wait(wait)

    def decorator(fn: Callable[..., Any]) -> _Debounced:
        return _Debounced(fn, wait)

    if func is None:
        return decorator
    return decorator(func)


def throttle(
    func: Optional[Callable[..., Any]] = None,
    wait: float = DEFAULT_THROTTLE_WAIT,
    clock: Callable[[], float] = time.monotonic,
):
    """Call ``func`` at most once per ``wait`` seconds.

    A call made less than ``wait`` seconds after the last one that ran is
    dropped and returns None.
    """
    _check_wait(wait)

    def decorator(fn: Callable[..., Any]) -> _Throttled:
        return _Throttled(fn, wait, clock)

    if func is None:
        return decorator
    return decorator(func)
