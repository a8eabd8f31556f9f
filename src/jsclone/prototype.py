"""Prototype chain helpers."""

from typing import Any

from .errors import JSTypeError
from .tags import is_callable
from .values import UNDEFINED, NULL, JSObject, JSFunction


def get_prototype_of(value: Any) -> Any:
    """Return the prototype link of an object, or NULL at the end of the chain."""
    proto = getattr(value, "_prototype", None)
    return NULL if proto is None else proto


def _prototype_property(constructor: Any) -> Any:
    # For JSFunction, use the _prototype attribute
    # For callable objects, use get("prototype") and fall back to _prototype
    if isinstance(constructor, JSFunction):
        return constructor._prototype
    if isinstance(constructor, JSObject):
        proto = constructor.get("prototype")
        if proto is UNDEFINED or proto is None:
            proto = getattr(constructor, "_prototype", None)
        return proto
    return getattr(constructor, "prototype", None)


def instance_of(example: Any, constructor: Any) -> bool:
    """Evaluate ``example instanceof constructor`` by walking the prototype chain.

    Raises:
        JSTypeError: if ``constructor`` is not callable, or its prototype
            property is not an object.
    """
    if not is_callable(constructor):
        raise JSTypeError("Right-hand side of 'instanceof' is not callable")

    # Primitives have no prototype chain to search
    if not isinstance(example, JSObject):
        return False

    target = _prototype_property(constructor)
    if not isinstance(target, JSObject):
        raise JSTypeError("Function has non-object prototype in instanceof check")

    current = example._prototype
    while current is not None:
        if current is target:
            return True
        current = current._prototype
    return False
