"""
Deep copy for JavaScript values.

The copier walks an object graph with an explicit work-list instead of
recursion, so graph depth is limited by memory rather than the interpreter
stack. Within one call, every traversable container is cloned exactly once;
later references to it (shared children or cycles) resolve to that clone.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .errors import UnsupportedValueError
from .tags import TRAVERSABLE, WRAPPERS, TypeTag, type_tag
from .values import (
    JSObject,
    JSArray,
    JSArguments,
    JSSet,
    JSMap,
    JSRegExp,
    JSArrayBuffer,
    JSTypedArray,
    JSPrimitiveWrapper,
    is_primitive,
)

logger = logging.getLogger(__name__)

# Builds an empty instance of the same kind as the given source object
Factory = Callable[[Any], Any]

# (source, clone, tag) triples still waiting for their children
_Pending = List[Tuple[Any, Any, TypeTag]]


def _zero_arg(value: Any) -> Any:
    return type(value)()


DEFAULT_FACTORIES: Dict[type, Factory] = {
    cls: _zero_arg
    for cls in (JSObject, JSArray, JSArguments, JSSet, JSMap, JSArrayBuffer, JSTypedArray)
}

# What a traversable clone must be for its members to be filled in
_CONTAINER_KINDS: Dict[TypeTag, type] = {
    TypeTag.OBJECT: JSObject,
    TypeTag.ARRAY: JSArray,
    TypeTag.ARGUMENTS: JSArray,
    TypeTag.SET: JSSet,
    TypeTag.MAP: JSMap,
}


class DeepCopier:
    """Produces structurally independent clones of JavaScript values.

    Primitives come back unchanged and callables are shared by reference.
    Boxed primitives and regular expressions are rebuilt from their
    primitive value or source and flags. Objects, arrays, sets, maps and
    argument lists are traversed, copying own enumerable data properties
    and members in insertion order.

    Any other object is rebuilt as an *empty shell*: a fresh instance of the
    same class with none of the source's internal state. The factory used
    for that is looked up along the class's MRO in ``factories``, falling
    back to calling the class with no arguments.

    Args:
        factories: Extra ``{class: factory}`` entries. A factory receives the
            source object and returns an empty instance of the same kind.
    """

    def __init__(self, factories: Optional[Mapping[type, Factory]] = None):
        self.factories: Dict[type, Factory] = dict(DEFAULT_FACTORIES)
        if factories:
            for cls, factory in factories.items():
                self.register(cls, factory)

    def register(self, cls: type, factory: Factory) -> None:
        """Register the factory that builds empty instances of ``cls``."""
        logger.debug("Registering copy factory for %s", cls.__name__)
        self.factories[cls] = factory

    def copy(self, value: Any) -> Any:
        """Return a deep copy of ``value``."""
        if is_primitive(value):
            return value

        visited: Dict[int, Any] = {}
        pending: _Pending = []
        result = self._visit(value, visited, pending)
        while pending:
            source, clone, tag = pending.pop()
            self._populate(source, clone, tag, visited, pending)
        return result

    __call__ = copy

    def _visit(self, value: Any, visited: Dict[int, Any], pending: _Pending) -> Any:
        """Return the clone for ``value``, queueing new containers for population."""
        if is_primitive(value):
            return value

        tag = type_tag(value)

        if tag in TRAVERSABLE:
            clone = visited.get(id(value))
            if clone is not None:
                return clone
            clone = self._new_instance(value, _CONTAINER_KINDS[tag])
            # Register before any child is visited so cycles find this clone
            visited[id(value)] = clone
            pending.append((value, clone, tag))
            return clone

        if tag is TypeTag.FUNCTION:
            return value
        if tag in WRAPPERS:
            return self._rewrap(value)
        if tag is TypeTag.REGEXP:
            return self._copy_regexp(value)

        logger.debug("Copying %s as an empty shell", type(value).__name__)
        return self._new_instance(value)

    def _populate(
        self,
        source: Any,
        clone: Any,
        tag: TypeTag,
        visited: Dict[int, Any],
        pending: _Pending,
    ) -> None:
        if tag is TypeTag.SET:
            for member in source.values():
                clone.add(self._visit(member, visited, pending))
            return

        if tag is TypeTag.MAP:
            for key, value in source.entries():
                clone.set_entry(
                    self._visit(key, visited, pending),
                    self._visit(value, visited, pending),
                )
            return

        if tag in (TypeTag.ARRAY, TypeTag.ARGUMENTS):
            for element in source._elements:
                clone._elements.append(self._visit(element, visited, pending))

        # Own data properties only; inherited ones stay on the shared prototype
        for key, value in source._properties.items():
            clone.set(key, self._visit(value, visited, pending))

    def _new_instance(self, value: Any, kind: Optional[type] = None) -> Any:
        factory = self._factory_for(type(value))
        try:
            clone = factory(value)
        except Exception as e:
            raise UnsupportedValueError(
                f"Cannot construct an empty {type(value).__name__}: {e}", value
            ) from e
        if clone is None or (kind is not None and not isinstance(clone, kind)):
            raise UnsupportedValueError(
                f"Factory for {type(value).__name__} returned {clone!r}, "
                f"expected an empty {(kind or type(value)).__name__}",
                value,
            )
        if isinstance(clone, JSObject):
            clone._prototype = value._prototype
        return clone

    def _factory_for(self, cls: type) -> Factory:
        for klass in cls.__mro__:
            factory = self.factories.get(klass)
            if factory is not None:
                return factory
        return _zero_arg

    def _rewrap(self, value: JSPrimitiveWrapper) -> JSPrimitiveWrapper:
        return type(value)(value.value_of(), prototype=value._prototype)

    def _copy_regexp(self, value: JSRegExp) -> JSRegExp:
        clone = type(value)(value.source, value.flags)
        clone._prototype = value._prototype
        return clone


_default_copier = DeepCopier()


def deep_copy(value: Any) -> Any:
    """Return a deep copy of a JavaScript value using the default copier."""
    return _default_copier.copy(value)
