"""JavaScript value types."""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union
import math

from .errors import JSTypeError


class JSUndefined:
    """JavaScript undefined value (singleton)."""

    _instance: Optional["JSUndefined"] = None

    def __new__(cls) -> "JSUndefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


class JSNull:
    """JavaScript null value (singleton)."""

    _instance: Optional["JSNull"] = None

    def __new__(cls) -> "JSNull":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "null"

    def __str__(self) -> str:
        return "null"

    def __bool__(self) -> bool:
        return False


# Singleton instances
UNDEFINED = JSUndefined()
NULL = JSNull()


class JSSymbol:
    """JavaScript symbol primitive. Every instance is a distinct symbol."""

    __slots__ = ("description",)

    def __init__(self, description: Optional[str] = None):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"


class JSBigInt:
    """JavaScript bigint primitive (an immutable arbitrary-precision integer)."""

    __slots__ = ("_value",)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise JSTypeError(f"Cannot convert {value!r} to a BigInt")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("JSBigInt is immutable")

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JSBigInt) and other._value == self._value

    def __hash__(self) -> int:
        return hash((JSBigInt, self._value))

    def __repr__(self) -> str:
        return f"{self._value}n"


# Type alias for JavaScript values
JSValue = Union[
    JSUndefined,
    JSNull,
    bool,
    int,
    float,
    str,
    JSSymbol,
    JSBigInt,
    "JSObject",
    "JSArray",
    "JSFunction",
]


def is_nan(value: Any) -> bool:
    """Check if value is NaN."""
    return isinstance(value, float) and math.isnan(value)


def is_primitive(value: Any) -> bool:
    """True for values without object identity semantics.

    None is accepted as an alias for null.
    """
    return value is None or isinstance(
        value, (JSUndefined, JSNull, bool, int, float, str, JSSymbol, JSBigInt)
    )


def _same_value_zero_key(value: JSValue) -> Tuple[Any, Any]:
    """Hashable key under which Set and Map compare members.

    SameValueZero: NaN equals NaN, -0 equals +0, booleans are distinct from
    numbers and objects compare by identity.
    """
    if isinstance(value, bool):
        return (bool, value)
    if isinstance(value, (int, float)):
        if is_nan(value):
            return (float, "NaN")
        return (float, value)
    if isinstance(value, str):
        return (str, value)
    if isinstance(value, JSBigInt):
        return (JSBigInt, value.value)
    return (object, id(value))


def _normalize_zero(value: JSValue) -> JSValue:
    if isinstance(value, float) and value == 0:
        return 0.0
    return value


class JSObject:
    """JavaScript object."""

    # Internal [[Class]] reported by Object.prototype.toString
    class_name = "Object"

    def __init__(self, prototype: Optional["JSObject"] = None):
        self._properties: Dict[str, JSValue] = {}
        self._getters: Dict[str, Any] = {}  # property name -> getter function
        self._setters: Dict[str, Any] = {}  # property name -> setter function
        self._prototype = prototype

    def get(self, key: str) -> JSValue:
        """Get a property value, following the prototype chain (getters are not invoked)."""
        if key in self._properties:
            return self._properties[key]
        if self._prototype is not None:
            return self._prototype.get(key)
        return UNDEFINED

    def get_getter(self, key: str) -> Optional[Any]:
        """Get the getter function for a property, if any."""
        if key in self._getters:
            return self._getters[key]
        if self._prototype is not None:
            return self._prototype.get_getter(key)
        return None

    def get_setter(self, key: str) -> Optional[Any]:
        """Get the setter function for a property, if any."""
        if key in self._setters:
            return self._setters[key]
        if self._prototype is not None:
            return self._prototype.get_setter(key)
        return None

    def define_getter(self, key: str, getter: Any) -> None:
        """Define a getter for a property."""
        self._getters[key] = getter

    def define_setter(self, key: str, setter: Any) -> None:
        """Define a setter for a property."""
        self._setters[key] = setter

    def set(self, key: str, value: JSValue) -> None:
        """Set a property value."""
        self._properties[key] = value

    def has(self, key: str) -> bool:
        """Check if object has own property."""
        return key in self._properties

    def delete(self, key: str) -> bool:
        """Delete a property."""
        if key in self._properties:
            del self._properties[key]
            return True
        return False

    def keys(self) -> List[str]:
        """Get own enumerable property keys."""
        return list(self._properties.keys())

    def __repr__(self) -> str:
        return f"JSObject({self._properties})"


class JSCallableObject(JSObject):
    """JavaScript object that is also callable (for constructors like Number, String, Boolean)."""

    def __init__(self, call_fn, prototype: Optional["JSObject"] = None):
        super().__init__(prototype)
        self._call_fn = call_fn

    def __call__(self, *args):
        return self._call_fn(*args)

    def __repr__(self) -> str:
        return f"JSCallableObject({self._properties})"


class JSArray(JSObject):
    """JavaScript array."""

    class_name = "Array"

    def __init__(self, length: int = 0):
        super().__init__()
        self._elements: List[JSValue] = [UNDEFINED] * length

    @classmethod
    def of(cls, *values: JSValue) -> "JSArray":
        arr = cls()
        arr._elements.extend(values)
        return arr

    @property
    def length(self) -> int:
        return len(self._elements)

    @length.setter
    def length(self, value: int) -> None:
        if value < len(self._elements):
            self._elements = self._elements[:value]
        else:
            self._elements.extend([UNDEFINED] * (value - len(self._elements)))

    def get_index(self, index: int) -> JSValue:
        if 0 <= index < len(self._elements):
            return self._elements[index]
        return UNDEFINED

    def set_index(self, index: int, value: JSValue) -> None:
        if index < 0:
            raise IndexError("Negative array index")
        if index >= len(self._elements):
            # Extend array (stricter mode: only allow append at end)
            if index == len(self._elements):
                self._elements.append(value)
            else:
                raise IndexError("Array index out of bounds (stricter mode)")
        else:
            self._elements[index] = value

    def push(self, value: JSValue) -> int:
        self._elements.append(value)
        return len(self._elements)

    def pop(self) -> JSValue:
        if self._elements:
            return self._elements.pop()
        return UNDEFINED

    def keys(self) -> List[str]:
        """Own enumerable keys: indices first, then named properties."""
        return [str(i) for i in range(len(self._elements))] + list(self._properties)

    def __iter__(self) -> Iterator[JSValue]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"JSArray({self._elements})"


class JSArguments(JSArray):
    """The array-like `arguments` object of a function call."""

    class_name = "Arguments"

    def __init__(self, values: Iterable[JSValue] = ()):
        super().__init__()
        self._elements.extend(values)

    def __repr__(self) -> str:
        return f"JSArguments({self._elements})"


class JSSet(JSObject):
    """JavaScript Set: insertion-ordered, members compared with SameValueZero."""

    class_name = "Set"

    def __init__(self, values: Iterable[JSValue] = (), prototype: Optional[JSObject] = None):
        super().__init__(prototype)
        self._members: Dict[Tuple[Any, Any], JSValue] = {}
        for value in values:
            self.add(value)

    def add(self, value: JSValue) -> "JSSet":
        value = _normalize_zero(value)
        self._members.setdefault(_same_value_zero_key(value), value)
        return self

    def contains(self, value: JSValue) -> bool:
        return _same_value_zero_key(value) in self._members

    def discard(self, value: JSValue) -> bool:
        return self._members.pop(_same_value_zero_key(value), _MISSING) is not _MISSING

    def clear(self) -> None:
        self._members.clear()

    @property
    def size(self) -> int:
        return len(self._members)

    def values(self) -> List[JSValue]:
        return list(self._members.values())

    def __iter__(self) -> Iterator[JSValue]:
        return iter(self.values())

    def __repr__(self) -> str:
        return f"JSSet({self.values()})"


class JSMap(JSObject):
    """JavaScript Map: insertion-ordered entries, keys compared with SameValueZero.

    Entry methods carry an ``_entry`` suffix so they do not collide with the
    property accessors every object has.
    """

    class_name = "Map"

    def __init__(
        self,
        entries: Iterable[Tuple[JSValue, JSValue]] = (),
        prototype: Optional[JSObject] = None,
    ):
        super().__init__(prototype)
        self._entries: Dict[Tuple[Any, Any], Tuple[JSValue, JSValue]] = {}
        for key, value in entries:
            self.set_entry(key, value)

    def set_entry(self, key: JSValue, value: JSValue) -> "JSMap":
        token = _same_value_zero_key(key)
        if token in self._entries:
            # Existing keys keep their original position and key object
            self._entries[token] = (self._entries[token][0], value)
        else:
            self._entries[token] = (_normalize_zero(key), value)
        return self

    def get_entry(self, key: JSValue) -> JSValue:
        entry = self._entries.get(_same_value_zero_key(key))
        return UNDEFINED if entry is None else entry[1]

    def has_entry(self, key: JSValue) -> bool:
        return _same_value_zero_key(key) in self._entries

    def delete_entry(self, key: JSValue) -> bool:
        return self._entries.pop(_same_value_zero_key(key), _MISSING) is not _MISSING

    def clear(self) -> None:
        self._entries.clear()

    @property
    def size(self) -> int:
        return len(self._entries)

    def entries(self) -> List[Tuple[JSValue, JSValue]]:
        return list(self._entries.values())

    def values(self) -> List[JSValue]:
        return [value for _, value in self._entries.values()]

    def __iter__(self) -> Iterator[Tuple[JSValue, JSValue]]:
        return iter(self.entries())

    def __repr__(self) -> str:
        return f"JSMap({self.entries()})"


_MISSING = object()


class JSPrimitiveWrapper(JSObject):
    """Object form of a primitive, as produced by `new Number(5)` or `Object(sym)`.

    A wrapper has its own identity: two wrappers around the same primitive
    are different objects.
    """

    _primitive_types: Tuple[type, ...] = ()

    def __init__(self, value: JSValue, prototype: Optional[JSObject] = None):
        if not self._accepts(value):
            raise JSTypeError(f"{self.class_name} wrapper cannot hold {value!r}")
        super().__init__(prototype)
        self._primitive = value

    @classmethod
    def _accepts(cls, value: JSValue) -> bool:
        return isinstance(value, cls._primitive_types)

    def value_of(self) -> JSValue:
        """Return the wrapped primitive (Number.prototype.valueOf and friends)."""
        return self._primitive

    def __repr__(self) -> str:
        return f"[{self.class_name}: {self._primitive!r}]"


class JSNumberObject(JSPrimitiveWrapper):
    class_name = "Number"
    _primitive_types = (int, float)

    def __init__(self, value: Union[int, float] = 0, prototype: Optional[JSObject] = None):
        super().__init__(value, prototype)

    @classmethod
    def _accepts(cls, value: JSValue) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)


class JSStringObject(JSPrimitiveWrapper):
    class_name = "String"
    _primitive_types = (str,)

    def __init__(self, value: str = "", prototype: Optional[JSObject] = None):
        super().__init__(value, prototype)

    @property
    def length(self) -> int:
        return len(self._primitive)


class JSBooleanObject(JSPrimitiveWrapper):
    class_name = "Boolean"
    _primitive_types = (bool,)

    def __init__(self, value: bool = False, prototype: Optional[JSObject] = None):
        super().__init__(value, prototype)


class JSSymbolObject(JSPrimitiveWrapper):
    class_name = "Symbol"
    _primitive_types = (JSSymbol,)


class JSBigIntObject(JSPrimitiveWrapper):
    class_name = "BigInt"
    _primitive_types = (JSBigInt,)


class JSFunction:
    """JavaScript function (closure) backed by a Python callable.

    The callable receives ``this`` as its first argument. Every function
    carries a prototype object whose ``constructor`` points back at it.
    """

    def __init__(
        self,
        name: str,
        fn: Optional[Callable[..., JSValue]] = None,
        params: Optional[List[str]] = None,
    ):
        self.name = name
        self.params = params or []
        self._fn = fn
        prototype = JSObject()
        prototype.set("constructor", self)
        self._prototype = prototype

    def call(self, this_val: JSValue, *args: JSValue) -> JSValue:
        if self._fn is None:
            return UNDEFINED
        return self._fn(this_val, *args)

    def __call__(self, *args: JSValue) -> JSValue:
        return self.call(UNDEFINED, *args)

    def construct(self, *args: JSValue) -> JSObject:
        """Behave like `new F(...args)`."""
        obj = JSObject(self._prototype)
        result = self.call(obj, *args)
        # A constructor that returns an object replaces `this`
        if isinstance(result, JSObject):
            return result
        return obj

    def __repr__(self) -> str:
        return f"[Function: {self.name}]" if self.name else "[Function (anonymous)]"


class JSRegExp(JSObject):
    """JavaScript RegExp object."""

    class_name = "RegExp"

    def __init__(self, pattern: str, flags: str = ""):
        super().__init__()
        from .regex import RegExp as InternalRegExp

        self._internal = InternalRegExp(pattern, flags)
        self._pattern = pattern
        self._flags = self._internal.flags

        # Set properties
        self.set("source", pattern)
        self.set("flags", self._flags)
        self.set("global", "g" in self._flags)
        self.set("ignoreCase", "i" in self._flags)
        self.set("multiline", "m" in self._flags)
        self.set("dotAll", "s" in self._flags)
        self.set("unicode", "u" in self._flags)
        self.set("sticky", "y" in self._flags)
        self.set("lastIndex", 0)

    @property
    def source(self) -> str:
        return self._pattern

    @property
    def flags(self) -> str:
        return self._flags

    @property
    def lastIndex(self) -> int:
        return self.get("lastIndex") or 0

    @lastIndex.setter
    def lastIndex(self, value: int):
        self.set("lastIndex", value)
        self._internal.lastIndex = value

    def test(self, string: str) -> bool:
        """Test if the pattern matches the string."""
        self._internal.lastIndex = self.lastIndex
        result = self._internal.test(string)
        self.lastIndex = self._internal.lastIndex
        return result

    def exec(self, string: str):
        """Execute a search for a match."""
        self._internal.lastIndex = self.lastIndex
        result = self._internal.exec(string)
        self.lastIndex = self._internal.lastIndex

        if result is None:
            return NULL

        # Convert to JSArray with match result properties
        arr = JSArray()
        for val in result:
            arr._elements.append(UNDEFINED if val is None else val)

        # Add match result properties
        arr.set("index", result.index)
        arr.set("input", result.input)

        return arr

    def __repr__(self) -> str:
        return f"/{self._pattern}/{self._flags}"


class JSBoundMethod:
    """A method that expects 'this' as the first argument when called."""

    def __init__(self, fn):
        self._fn = fn

    def __call__(self, this_val, *args):
        return self._fn(this_val, *args)


class JSArrayBuffer(JSObject):
    """JavaScript ArrayBuffer - raw binary data buffer."""

    class_name = "ArrayBuffer"

    def __init__(self, byte_length: int = 0):
        super().__init__()
        self._data = bytearray(byte_length)

    @property
    def byteLength(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ArrayBuffer({self.byteLength})"


class JSTypedArray(JSObject):
    """Base class for JavaScript typed arrays."""

    # Subclasses override these
    class_name = "TypedArray"

    def __init__(self, length: int = 0):
        super().__init__()
        self._data = [0] * length

    @property
    def length(self) -> int:
        return len(self._data)

    def get_index(self, index: int):
        if 0 <= index < len(self._data):
            return self._data[index]
        return UNDEFINED

    def set_index(self, index: int, value) -> None:
        if 0 <= index < len(self._data):
            self._data[index] = self._coerce_value(value)

    def _coerce_value(self, value):
        """Coerce value to the appropriate type. Override in subclasses."""
        return int(value) if isinstance(value, (int, float)) else 0

    def __repr__(self) -> str:
        return f"{self.class_name}({self._data})"


class JSInt32Array(JSTypedArray):
    """JavaScript Int32Array."""

    class_name = "Int32Array"

    def _coerce_value(self, value):
        """Coerce to signed 32-bit integer."""
        if isinstance(value, (int, float)):
            v = int(value) & 0xFFFFFFFF
            if v >= 0x80000000:
                v -= 0x100000000
            return v
        return 0


class JSUint8Array(JSTypedArray):
    """JavaScript Uint8Array."""

    class_name = "Uint8Array"

    def _coerce_value(self, value):
        """Coerce to unsigned 8-bit integer."""
        if isinstance(value, (int, float)):
            return int(value) & 0xFF
        return 0

