"""
Runtime type tags - the closed set of categories the copier dispatches on.

Tags are derived from each object's internal class name, the same string
Object.prototype.toString reports as ``[object <Class>]``.
"""

from enum import Enum
from typing import Any, Dict

from .errors import UnsupportedValueError
from .values import (
    UNDEFINED,
    NULL,
    JSObject,
    JSFunction,
    JSBoundMethod,
    JSSymbol,
    JSBigInt,
    is_primitive,
)


class TypeTag(Enum):
    """Category of an object-like value."""

    # Traversable containers
    OBJECT = "Object"
    ARRAY = "Array"
    SET = "Set"
    MAP = "Map"
    ARGUMENTS = "Arguments"

    # Boxed primitives
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    SYMBOL = "Symbol"
    BIGINT = "BigInt"

    REGEXP = "RegExp"
    FUNCTION = "Function"

    # Anything else: typed arrays, buffers, host objects
    OTHER = "Other"


TRAVERSABLE = frozenset({
    TypeTag.OBJECT,
    TypeTag.ARRAY,
    TypeTag.SET,
    TypeTag.MAP,
    TypeTag.ARGUMENTS,
})

WRAPPERS = frozenset({
    TypeTag.NUMBER,
    TypeTag.STRING,
    TypeTag.BOOLEAN,
    TypeTag.SYMBOL,
    TypeTag.BIGINT,
})

_BY_CLASS_NAME: Dict[str, TypeTag] = {
    tag.value: tag for tag in TypeTag if tag is not TypeTag.OTHER
}


def is_callable(value: Any) -> bool:
    """True for JavaScript functions, callable objects and Python callables."""
    if isinstance(value, (JSFunction, JSBoundMethod)):
        return True
    if isinstance(value, JSObject):
        return hasattr(value, "_call_fn")
    return callable(value) and not isinstance(value, type)


def type_tag(value: Any) -> TypeTag:
    """Classify an object-like value.

    Raises:
        UnsupportedValueError: for primitives, which carry no tag, and for
            Python objects outside the JavaScript value model.
    """
    if is_callable(value):
        return TypeTag.FUNCTION
    if isinstance(value, JSObject):
        return _BY_CLASS_NAME.get(value.class_name, TypeTag.OTHER)
    if is_primitive(value):
        raise UnsupportedValueError(f"{value!r} is a primitive and has no type tag", value)
    raise UnsupportedValueError(
        f"{type(value).__name__} is not a JavaScript value", value
    )


def to_string_tag(value: Any) -> str:
    """Return the Object.prototype.toString result for a value."""
    if value is UNDEFINED:
        return "[object Undefined]"
    if value is NULL or value is None:
        return "[object Null]"
    if isinstance(value, bool):
        return "[object Boolean]"
    if isinstance(value, (int, float)):
        return "[object Number]"
    if isinstance(value, str):
        return "[object String]"
    if isinstance(value, JSSymbol):
        return "[object Symbol]"
    if isinstance(value, JSBigInt):
        return "[object BigInt]"
    if is_callable(value):
        return "[object Function]"
    if isinstance(value, JSObject):
        return f"[object {value.class_name}]"
    raise UnsupportedValueError(f"{type(value).__name__} is not a JavaScript value", value)
