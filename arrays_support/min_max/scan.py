import numpy as np
from numba import njit

from arrays_support.errors import EmptyInput
from arrays_support.validation import BOOL_DTYPE, check_array


@njit(cache=True)
def min_max_kernel(arr: np.ndarray):
    lo = arr[0]
    hi = arr[0]
    for i in range(1, arr.size):
        value = arr[i]
        if value < lo:
            lo = value
        if value > hi:
            hi = value
    return lo, hi


def min_max(arr: np.ndarray):
    """
    Single pass over a non-empty array.

    Returns (min, max) as scalars of the array's own dtype. Raises EmptyInput
    for a zero-length array and InvalidArgument for anything that is not a
    1-D numeric or boolean ndarray.
    """
    check_array(arr, writeable=False)
    if arr.size == 0:
        raise EmptyInput("Cannot scan min/max of an empty array.")
    if arr.dtype == BOOL_DTYPE:
        # False < True, so min is "all true" and max is "any true"
        return np.bool_(arr.all()), np.bool_(arr.any())
    lo, hi = min_max_kernel(arr)
    scalar = arr.dtype.type
    return scalar(lo), scalar(hi)


def array_min(arr: np.ndarray):
    return min_max(arr)[0]


def array_max(arr: np.ndarray):
    return min_max(arr)[1]
