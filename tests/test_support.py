import numpy as np
import pytest

from arrays_support.errors import InvalidArgument
from arrays_support.support.generation import generate_array, generate_bool_array
from arrays_support.support.replace import replace_all
from arrays_support.support.search import contains, first_index_of, frequency, index_of, last_index_of
from arrays_support.support.set_ops import disjoint, intersection, union
from arrays_support.support.shuffle import shuffle


def test_index_lookups():
    arr = np.array([0, 1, 2, 3, 2, 1, 0], dtype=np.int32)
    assert index_of(arr, 1) == 1
    assert first_index_of(arr, 1) == 1
    assert last_index_of(arr, 1) == 5
    assert index_of(arr, 42) == -1
    assert last_index_of(arr, 42) == -1
    assert contains(arr, 3)
    assert not contains(arr, -3)


def test_frequency():
    arr = np.array([1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1, 0, 1, 2, 3], dtype=np.int16)
    assert frequency(arr, 1) == 3
    assert frequency(arr, 9) == 0


def test_replace_all():
    arr = np.arange(-1000, 1000, dtype=np.int32)
    assert replace_all(arr, -1000, 9999) == 1
    assert arr[0] == 9999
    assert replace_all(arr, 123456, 0) == 0


def test_union_and_intersection():
    a = np.arange(0, 6, dtype=np.int64)
    b = np.arange(-5, 11, dtype=np.int64)
    np.testing.assert_array_equal(union(a, b), np.arange(-5, 11))

    a = np.arange(0, 101, dtype=np.int32)
    b = np.arange(90, 10_001, dtype=np.int32)
    np.testing.assert_array_equal(intersection(a, b), np.arange(90, 101))


def test_disjoint():
    a = np.arange(0, 1000)
    assert disjoint(a, np.arange(1000, 2000))
    assert disjoint(np.arange(1000, 2000), a)
    assert not disjoint(a, np.arange(999, 2000))
    assert not disjoint(np.arange(999, 2000), a)
    assert disjoint(a, np.array([], dtype=a.dtype))


def test_shuffle_permutes_in_place():
    arr = np.arange(100, dtype=np.int32)
    shuffle(arr, seed=7)
    assert not np.array_equal(arr, np.arange(100))
    np.testing.assert_array_equal(np.sort(arr), np.arange(100))


def test_shuffle_is_reproducible_with_seed():
    a = np.arange(50, dtype=np.int64)
    b = np.arange(50, dtype=np.int64)
    shuffle(a, seed=np.random.default_rng(3))
    shuffle(b, seed=3)
    np.testing.assert_array_equal(a, b)


def test_generate_array_bounds_and_dtype():
    arr = generate_array(1000, dtype=np.int8)
    assert arr.dtype == np.int8
    assert arr.size == 1000
    arr = generate_array(1000, dtype=np.int32, low=-5, high=5, seed=1)
    assert arr.min() >= -5
    assert arr.max() < 5
    np.testing.assert_array_equal(arr, generate_array(1000, dtype=np.int32, low=-5, high=5, seed=1))


def test_generate_bool_array():
    arr = generate_bool_array(200)
    assert arr.dtype == np.bool_
    assert arr.any() and not arr.all()


def test_helpers_reject_non_arrays():
    with pytest.raises(InvalidArgument):
        frequency([1, 2, 3], 1)
    with pytest.raises(InvalidArgument):
        union(None, np.arange(3))
