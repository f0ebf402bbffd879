import math
from typing import Optional

import pytest

from reflexkit.from_string import from_string


@pytest.mark.parametrize("text", ["42", "-7", "0"])
def test_integer_round_trip(text):
    assert from_string(int, text) == int(text)


def test_integer_reads_leading_digits_only():
    assert from_string(int, "42abc") == 42


@pytest.mark.parametrize("text", ["abc", "", "+5", " 5", "-"])
def test_invalid_integers(text):
    with pytest.raises(ValueError):
        from_string(int, text)


@pytest.mark.parametrize("text", ["1.5", "-2.25", "3e2", ".5"])
def test_float_round_trip(text):
    assert from_string(float, text) == float(text)


def test_float_special_values():
    assert from_string(float, "inf") == math.inf
    assert from_string(float, "-Infinity") == -math.inf
    assert math.isnan(from_string(float, "nan"))


@pytest.mark.parametrize("text", ["1e400", "1e-400"])
def test_float_out_of_range(text):
    with pytest.raises(ValueError):
        from_string(float, text)


def test_float_invalid():
    with pytest.raises(ValueError):
        from_string(float, "x1.0")


def test_string_passthrough():
    assert from_string(str, " any text ") == " any text "


def test_optional_loads_inner_type():
    assert from_string(Optional[int], "3") == 3
    assert from_string(int | None, "8") == 8
    assert from_string(Optional[str], "s") == "s"


@pytest.mark.parametrize("kind", [bool, list, int | str])
def test_unsupported_types(kind):
    with pytest.raises(TypeError):
        from_string(kind, "1")