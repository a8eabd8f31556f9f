"""Pytest configuration for jsclone tests."""

import pytest
import signal
import sys

from jsclone.tags import is_callable
from jsclone.values import (
    JSArray,
    JSMap,
    JSObject,
    JSPrimitiveWrapper,
    JSRegExp,
    JSSet,
    is_nan,
    is_primitive,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "timeout(seconds): set custom timeout for test")


def timeout_handler(signum, frame):
    """Handle timeout signal."""
    pytest.fail("Test timed out")


@pytest.fixture(autouse=True)
def test_timeout(request):
    """Apply a timeout to all tests.

    Default is 10 seconds, but tests can use a longer timeout by marking them:
    @pytest.mark.timeout(30)  # 30 second timeout
    """
    if sys.platform != "win32":
        # Check for custom timeout marker
        marker = request.node.get_closest_marker("timeout")
        timeout_seconds = marker.args[0] if marker else 10

        # Set up timeout handler (Unix only)
        old_handler = signal.signal(signal.SIGALRM, timeout_handler)
        signal.alarm(timeout_seconds)
        yield
        signal.alarm(0)  # Cancel the alarm
        signal.signal(signal.SIGALRM, old_handler)
    else:
        yield


def _js_equal(a, b, seen):
    if is_primitive(a) or is_primitive(b):
        if is_nan(a) and is_nan(b):
            return True
        return type(a) is type(b) and a == b
    if is_callable(a) or is_callable(b):
        return a is b
    if type(a) is not type(b):
        return False

    pair = (id(a), id(b))
    if pair in seen:
        return True
    seen.add(pair)

    if a._prototype is not b._prototype:
        return False
    if isinstance(a, JSPrimitiveWrapper):
        return _js_equal(a.value_of(), b.value_of(), seen)
    if isinstance(a, JSRegExp):
        return a.source == b.source and a.flags == b.flags
    if isinstance(a, JSSet):
        left, right = a.values(), b.values()
        return len(left) == len(right) and all(
            _js_equal(x, y, seen) for x, y in zip(left, right)
        )
    if isinstance(a, JSMap):
        left, right = a.entries(), b.entries()
        return len(left) == len(right) and all(
            _js_equal(k1, k2, seen) and _js_equal(v1, v2, seen)
            for (k1, v1), (k2, v2) in zip(left, right)
        )
    if isinstance(a, JSArray):
        if a.length != b.length:
            return False
        if not all(_js_equal(x, y, seen) for x, y in zip(a, b)):
            return False
    if isinstance(a, JSObject):
        if list(a._properties) != list(b._properties):
            return False
        return all(
            _js_equal(a._properties[k], b._properties[k], seen) for k in a._properties
        )
    return False


@pytest.fixture(scope="session")
def js_equal():
    """Structural equality for JavaScript value graphs (cycle-aware)."""
    return lambda a, b: _js_equal(a, b, set())
