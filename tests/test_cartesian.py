import itertools

import pytest

from reflexkit.cartesian import cartesian_product


def test_pairs_order():
    p2 = list(cartesian_product([0, 1], 2))
    assert len(p2) == 4
    assert p2[0] == (0, 0)
    assert p2[1] == (1, 0)
    assert p2[2] == (0, 1)
    assert p2[3] == (1, 1)


@pytest.mark.parametrize("n", [3, 4])
def test_higher_powers_cover_all_tuples(n):
    result = list(cartesian_product([0, 1], n))
    assert len(result) == 2**n
    assert len(set(result)) == len(result)
    assert set(result) == set(itertools.product([0, 1], repeat=n))
    assert result[0] == (0,) * n
    assert result[1] == (1,) + (0,) * (n - 1)


def test_accepts_one_shot_iterables():
    result = list(cartesian_product(iter("ab"), 2))
    assert result == [("a", "a"), ("b", "a"), ("a", "b"), ("b", "b")]


def test_empty_input_yields_nothing():
    assert list(cartesian_product([], 2)) == []
    assert list(cartesian_product([], 0)) == []


def test_zero_power_yields_empty_tuple():
    assert list(cartesian_product([0, 1], 0)) == [()]


def test_negative_power_rejected():
    with pytest.raises(ValueError):
        cartesian_product([0, 1], -1)