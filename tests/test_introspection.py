"""Tests for field discovery."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

from wrapkit import WrapOptions, wrap
from wrapkit.kernel.introspection import FieldDescriptor, is_introspectable, iter_fields


def test_dataclass_fields_in_declaration_order():
    @dataclass
    class Point:
        x: int
        y: int

    assert iter_fields(Point(1, 2)) == [FieldDescriptor("x", 1), FieldDescriptor("y", 2)]


def test_dataclass_hierarchy_most_derived_first():
    @dataclass
    class Base:
        a: int

    @dataclass
    class Middle(Base):
        b: int

    @dataclass
    class Leaf(Middle):
        c: int

    assert [d.name for d in iter_fields(Leaf(a=1, b=2, c=3))] == ["c", "b", "a"]


def test_pydantic_hierarchy_most_derived_first():
    class Animal(BaseModel):
        legs: int

    class Dog(Animal):
        name: str
        nickname: Optional[str] = None

    fields = iter_fields(Dog(legs=4, name="Rex"))
    assert [d.name for d in fields] == ["name", "nickname", "legs"]
    assert wrap(Dog(legs=4, name="Rex")) == {"name": "Rex", "legs": 4}


def test_dataclass_multiple_inheritance():
    @dataclass
    class A:
        a: int

    @dataclass
    class B:
        b: int

    @dataclass
    class C(A, B):
        c: int

    assert [d.name for d in iter_fields(C(a=1, b=2, c=3))] == ["c", "a", "b"]


def test_pydantic_multiple_inheritance():
    class A(BaseModel):
        a: int

    class B(BaseModel):
        b: int

    class C(A, B):
        c: int

    assert [d.name for d in iter_fields(C(a=1, b=2, c=3))] == ["c", "a", "b"]


def test_plain_object_annotations_most_derived_first():
    class Vehicle:
        wheels: int

        def __init__(self):
            self.wheels = 4

    class Car(Vehicle):
        brand: str

        def __init__(self):
            super().__init__()
            self.brand = "Volvo"
            self.color = "red"

    assert [d.name for d in iter_fields(Car())] == ["brand", "wheels", "color"]


def test_plain_object_unannotated_keeps_assignment_order():
    class Vehicle:
        def __init__(self):
            self.wheels = 4

    class Car(Vehicle):
        def __init__(self):
            super().__init__()
            self.brand = "Volvo"

    assert [d.name for d in iter_fields(Car())] == ["wheels", "brand"]


def test_slots_hierarchy():
    class Base:
        __slots__ = ("a",)

        def __init__(self):
            self.a = 1

    class Child(Base):
        __slots__ = ("b", "unset")

        def __init__(self):
            super().__init__()
            self.b = 2

    assert iter_fields(Child()) == [FieldDescriptor("b", 2), FieldDescriptor("a", 1)]


def test_custom_field_hook():
    class Reading:
        def __init__(self, raw):
            self._raw = raw

        def __wrap_fields__(self):
            return [("value", self._raw * 10), ("unit", "mV")]

    assert wrap(Reading(3)) == {"value": 30, "unit": "mV"}


def test_private_attributes_opt_in():
    class Token:
        def __init__(self):
            self.kind = "bearer"
            self._value = "abc"

    assert wrap(Token()) == {"kind": "bearer"}
    assert wrap(Token(), options=WrapOptions(include_private=True)) == {
        "kind": "bearer",
        "_value": "abc",
    }


def test_is_introspectable():
    @dataclass
    class Empty:
        pass

    assert is_introspectable(Empty())
    assert not is_introspectable(Empty)
    assert not is_introspectable(print)
    assert not is_introspectable(object())
