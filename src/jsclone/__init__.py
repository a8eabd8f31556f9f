"""
jsclone - deep copy for JavaScript values in pure Python

Models JavaScript runtime values (objects, arrays, sets, maps, boxed
primitives, regular expressions, functions) and clones object graphs built
from them, preserving cycles and shared references. Also provides
debounce/throttle decorators and a prototype-chain instanceof check.
"""

__version__ = "0.1.0"

from .copier import DeepCopier, deep_copy
from .errors import JSError, JSTypeError, RegExpError, UnsupportedValueError
from .prototype import get_prototype_of, instance_of
from .tags import TypeTag, to_string_tag, type_tag
from .timing import debounce, throttle
from .values import (
    UNDEFINED,
    NULL,
    JSObject,
    JSArray,
    JSArguments,
    JSSet,
    JSMap,
    JSFunction,
    JSRegExp,
    JSSymbol,
    JSBigInt,
    JSNumberObject,
    JSStringObject,
    JSBooleanObject,
    JSSymbolObject,
    JSBigIntObject,
)

copy = deep_copy

__all__ = [
    "copy",
    "deep_copy",
    "DeepCopier",
    "JSError",
    "JSTypeError",
    "RegExpError",
    "UnsupportedValueError",
    "TypeTag",
    "type_tag",
    "to_string_tag",
    "get_prototype_of",
    "instance_of",
    "debounce",
    "throttle",
    "UNDEFINED",
    "NULL",
    "JSObject",
    "JSArray",
    "JSArguments",
    "JSSet",
    "JSMap",
    "JSFunction",
    "JSRegExp",
    "JSSymbol",
    "JSBigInt",
    "JSNumberObject",
    "JSStringObject",
    "JSBooleanObject",
    "JSSymbolObject",
    "JSBigIntObject",
]
