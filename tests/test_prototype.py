"""Tests for the prototype chain walk."""

import pytest

from jsclone import copy
from jsclone.errors import JSTypeError
from jsclone.prototype import get_prototype_of, instance_of
from jsclone.values import NULL, JSCallableObject, JSFunction, JSObject


@pytest.fixture
def classes():
    """Animal and Dog, with Dog.prototype inheriting from Animal.prototype."""
    Animal = JSFunction("Animal")
    Dog = JSFunction("Dog")
    Dog._prototype._prototype = Animal._prototype
    return Animal, Dog


class TestInstanceOf:
    """instance_of mirrors the instanceof operator."""

    def test_direct_instance(self, classes):
        """An instance of its own constructor."""
        Animal, Dog = classes
        assert instance_of(Dog.construct(), Dog) is True

    def test_inherited(self, classes):
        """Walks up to the parent prototype."""
        Animal, Dog = classes
        assert instance_of(Dog.construct(), Animal) is True

    def test_not_an_instance(self, classes):
        """A parent instance is not a child instance."""
        Animal, Dog = classes
        assert instance_of(Animal.construct(), Dog) is False

    def test_null_prototype(self, classes):
        """Objects without a prototype match nothing."""
        Animal, _ = classes
        assert instance_of(JSObject(None), Animal) is False

    @pytest.mark.parametrize("value", [1, "s", None, True])
    def test_primitives(self, classes, value):
        """Primitives are never instances."""
        Animal, _ = classes
        assert instance_of(value, Animal) is False

    def test_non_callable_constructor(self):
        """The right-hand side must be callable."""
        with pytest.raises(JSTypeError):
            instance_of(JSObject(), JSObject())

    def test_callable_object_with_prototype_property(self):
        """Built-in style constructors use their prototype property."""
        proto = JSObject()
        ctor = JSCallableObject(lambda *args: None)
        ctor.set("prototype", proto)
        assert instance_of(JSObject(proto), ctor) is True

    def test_non_object_prototype(self):
        """A constructor whose prototype is not an object is an error."""
        ctor = JSCallableObject(lambda *args: None)
        ctor.set("prototype", 5)
        with pytest.raises(JSTypeError):
            instance_of(JSObject(), ctor)

    def test_copy_preserves_instance_of(self, classes):
        """A deep copy is still an instance of the same constructors."""
        Animal, Dog = classes
        rex = Dog.construct()
        rex.set("name", "rex")
        assert instance_of(copy(rex), Dog) is True
        assert instance_of(copy(rex), Animal) is True


class TestGetPrototypeOf:
    """get_prototype_of."""

    def test_returns_link(self, classes):
        """The prototype of an instance is the constructor's prototype."""
        _, Dog = classes
        assert get_prototype_of(Dog.construct()) is Dog._prototype

    def test_end_of_chain(self):
        """null at the end of the chain."""
        assert get_prototype_of(JSObject()) is NULL
