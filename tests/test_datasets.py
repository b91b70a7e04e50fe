import pytest

from quicksort_lab.datasets import SHAPES, make_sequence


@pytest.mark.parametrize("shape", sorted(SHAPES))
def test_every_shape_has_requested_length(shape):
    assert len(make_sequence(shape, 37, seed=1)) == 37
    assert make_sequence(shape, 0) == []


def test_sorted_and_reversed():
    assert make_sequence("sorted", 5) == [0, 1, 2, 3, 4]
    assert make_sequence("reversed", 5) == [4, 3, 2, 1, 0]
    assert make_sequence("constant", 3) == [0, 0, 0]


def test_random_is_seeded_and_in_range():
    a = make_sequence("random", 500, seed=9, value_range=50)
    b = make_sequence("random", 500, seed=9, value_range=50)
    assert a == b
    assert all(isinstance(x, int) for x in a)
    assert min(a) >= 0 and max(a) < 50


def test_few_unique_has_few_values():
    arr = make_sequence("few_unique", 1000, seed=2)
    assert len(set(arr)) <= 100


def test_nearly_sorted_is_a_permutation():
    arr = make_sequence("nearly_sorted", 200, seed=4)
    assert sorted(arr) == list(range(200))
    assert arr != list(range(200))


def test_unknown_shape_and_negative_size():
    with pytest.raises(ValueError):
        make_sequence("zigzag", 10)
    with pytest.raises(ValueError):
        make_sequence("random", -1)
