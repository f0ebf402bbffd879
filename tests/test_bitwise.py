import enum

import pytest

from reflexkit.bitwise import bit_and, bit_not, bit_or, bit_xor


class Perm(enum.IntFlag):
    R = 1
    W = 2
    X = 4


class Color(enum.Enum):
    RED = 1
    GREEN = 2
    YELLOW = 3
    NONE = 0


class Other(enum.Enum):
    A = 1


def test_flag_operations_match_native_operators():
    assert bit_or(Perm.R, Perm.W) == Perm.R | Perm.W
    assert bit_and(Perm.R | Perm.W, Perm.W) == Perm.W
    assert bit_xor(Perm.R | Perm.W, Perm.W) == Perm.R


def test_flag_not_is_involution():
    assert bit_not(bit_not(Perm.R)) == Perm.R
    assert bit_and(bit_not(Perm.R), Perm.R) == Perm(0)


def test_plain_enum_uses_values():
    assert bit_or(Color.RED, Color.GREEN) is Color.YELLOW
    assert bit_and(Color.YELLOW, Color.GREEN) is Color.GREEN
    assert bit_xor(Color.YELLOW, Color.RED) is Color.GREEN
    assert bit_and(Color.RED, Color.GREEN) is Color.NONE


def test_or_is_commutative_and_idempotent():
    for a in Color:
        for b in Color:
            try:
                assert bit_or(a, b) is bit_or(b, a)
            except ValueError:
                pass
        assert bit_or(a, a) is a


def test_result_outside_plain_enum_raises():
    with pytest.raises(ValueError):
        bit_not(Color.RED)


def test_mixed_enum_types_rejected():
    with pytest.raises(TypeError):
        bit_or(Color.RED, Other.A)


def test_non_enum_rejected():
    with pytest.raises(TypeError):
        bit_or(1, 2)