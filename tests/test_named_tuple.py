from collections import namedtuple
from dataclasses import dataclass

import pytest

from reflexkit.named_tuple import NamedValues, make_named_tuple, named_tuple_of, to_tuple


@dataclass
class Point:
    x: int
    y: int


class Plain:
    def __init__(self):
        self.a = 1
        self.b = "two"


def test_make_and_get():
    nt = make_named_tuple(["a", "b"], [1, "x"])
    assert nt.get("a") == 1
    assert nt.get("b", str) == "x"
    assert nt["a"] == 1
    assert nt.b == "x"
    assert nt.fields == ("a", "b")


def test_has_checks_declared_type():
    nt = make_named_tuple(["a", "b"], [1, "x"])
    assert nt.has("a", int) is True
    assert nt.has("a", str) is False
    assert nt.has("a") is True
    assert nt.has("z") is False


def test_get_errors():
    nt = make_named_tuple(["a"], [1])
    with pytest.raises(TypeError):
        nt.get("a", str)
    with pytest.raises(KeyError):
        nt.get("z")
    with pytest.raises(AttributeError):
        nt.z


def test_assignment_updates_value():
    nt = make_named_tuple(["a", "b"], [1, "x"])
    nt["a"] = 5
    nt.b = "y"
    assert to_tuple(nt) == (5, "y")
    with pytest.raises(KeyError):
        nt["z"] = 0
    with pytest.raises(AttributeError):
        nt.z = 0


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        make_named_tuple(["a", "b"], [1])


def test_duplicate_names_rejected():
    with pytest.raises(ValueError):
        make_named_tuple(["a", "a"], [1, 2])


def test_dataclass_round_trip():
    p = Point(1, 2)
    nt = named_tuple_of(p)
    assert nt.fields == ("x", "y")
    assert to_tuple(nt) == to_tuple(p) == (1, 2)
    assert nt.has("x", int)
    assert Point(*to_tuple(nt)) == p


def test_named_tuple_and_plain_object():
    Pair = namedtuple("Pair", "left right")
    assert named_tuple_of(Pair(3, 4)).items() == (("left", 3), ("right", 4))
    assert to_tuple(Plain()) == (1, "two")


def test_tuple_passes_through():
    value = (1, 2, 3)
    assert to_tuple(value) is value


def test_copy_is_equal_and_independent():
    nt = make_named_tuple(["a"], [1])
    copy = named_tuple_of(nt)
    assert copy == nt
    copy["a"] = 2
    assert nt["a"] == 1


def test_unsupported_objects():
    with pytest.raises(TypeError):
        to_tuple(42)
    with pytest.raises(TypeError):
        named_tuple_of(Point)


def test_mapping_constructor_preserves_order():
    nt = NamedValues({"b": 2, "a": 1})
    assert list(nt) == ["b", "a"]
    assert len(nt) == 2
    assert "a" in nt