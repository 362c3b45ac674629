import numpy as np
from hypothesis import given, settings, strategies as st
from hypothesis.extra.numpy import arrays

from arrays_support.counting_sort.numba_accelerated import counting_sort
from arrays_support.min_max.scan import min_max
from arrays_support.primitives.in_place import reverse
from arrays_support.rotation.triple_reversal import rotate

int_dtypes = st.sampled_from([np.int8, np.int16, np.int32, np.int64])
small_ints = st.integers(min_value=-1000, max_value=1000)


@st.composite
def int_arrays(draw, min_size=0):
    dtype = draw(int_dtypes)
    info = np.iinfo(dtype)
    elements = st.integers(max(info.min, -1000), min(info.max, 1000))
    return draw(arrays(dtype, st.integers(min_size, 60), elements=elements))


@settings(deadline=None)
@given(int_arrays())
def test_counting_sort_is_sorted_permutation(arr):
    expected = np.sort(arr)
    counting_sort(arr)
    np.testing.assert_array_equal(arr, expected)


@settings(deadline=None)
@given(arrays(np.bool_, st.integers(0, 60)))
def test_counting_sort_bool_counts_preserved(arr):
    num_true = int(arr.sum())
    counting_sort(arr)
    assert int(arr.sum()) == num_true
    assert arr[arr.size - num_true:].all()
    assert not arr[:arr.size - num_true].any()


@settings(deadline=None)
@given(int_arrays(min_size=1))
def test_min_max_matches_numpy(arr):
    assert min_max(arr) == (arr.min(), arr.max())


@settings(deadline=None)
@given(int_arrays(), small_ints)
def test_rotate_then_inverse_restores(arr, distance):
    original = arr.copy()
    rotate(arr, distance)
    if arr.size:
        np.testing.assert_array_equal(arr, np.roll(original, distance))
        rotate(arr, (arr.size - distance) % arr.size)
    np.testing.assert_array_equal(arr, original)


@settings(deadline=None)
@given(int_arrays(min_size=1), small_ints)
def test_rotate_is_periodic(arr, distance):
    a = arr.copy()
    b = arr.copy()
    rotate(a, distance)
    rotate(b, distance + arr.size)
    np.testing.assert_array_equal(a, b)


@settings(deadline=None)
@given(int_arrays(), st.data())
def test_reverse_twice_restores(arr, data):
    start = data.draw(st.integers(0, arr.size))
    stop = data.draw(st.integers(start, arr.size))
    original = arr.copy()
    reverse(arr, start, stop)
    np.testing.assert_array_equal(arr[start:stop], original[start:stop][::-1])
    reverse(arr, start, stop)
    np.testing.assert_array_equal(arr, original)
