import pytest

from ldsconverge.thue_morse import thue_morse


def test_base_two_prefix():
    assert [thue_morse(i, 2) for i in range(8)] == [0, 1, 1, 0, 1, 0, 0, 1]


def test_index_three_base_two_is_zero():
    assert thue_morse(3, 2) == 0


def test_zero_index_is_zero():
    for base in (2, 3, 7, 60):
        assert thue_morse(0, base) == 0


@pytest.mark.parametrize("base", [2, 3, 5, 7])
def test_values_are_below_base(base):
    assert all(0 <= thue_morse(i, base) < base for i in range(500))


@pytest.mark.parametrize("base", [2, 3, 7])
def test_each_group_is_a_permutation(base):
    for group in range(40):
        values = [thue_morse(group * base + r, base) for r in range(base)]
        assert sorted(values) == list(range(base))


def test_base_two_complement_doubling():
    # t(2n + 1) is the complement of t(2n) in base 2.
    for n in range(200):
        assert thue_morse(2 * n + 1, 2) == 1 - thue_morse(2 * n, 2)


@pytest.mark.parametrize("base", [0, 1, -3])
def test_invalid_base(base):
    with pytest.raises(ValueError):
        thue_morse(5, base)


def test_negative_index():
    with pytest.raises(ValueError):
        thue_morse(-1, 2)