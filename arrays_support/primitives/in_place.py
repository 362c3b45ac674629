import logging
from typing import Optional

import numpy as np
from numba import njit

from arrays_support.validation import check_array, check_index, check_range

logger = logging.getLogger(__name__)


# --- Numba kernels (no bounds checks, callers guarantee valid indices) ---
@njit(cache=True)
def swap_kernel(arr: np.ndarray, i1: int, i2: int):
    tmp = arr[i1]
    arr[i1] = arr[i2]
    arr[i2] = tmp


@njit(cache=True)
def reverse_kernel(arr: np.ndarray, start: int, stop: int):
    i = start
    j = stop - 1
    while i < j:
        swap_kernel(arr, i, j)
        i += 1
        j -= 1


# --- Public API ---
def swap(arr: np.ndarray, i1: int, i2: int):
    """Exchanges arr[i1] and arr[i2] in place."""
    check_array(arr)
    i1 = check_index(arr, i1, "i1")
    i2 = check_index(arr, i2, "i2")
    if i1 != i2:
        swap_kernel(arr, i1, i2)


def reverse(arr: np.ndarray, start: Optional[int] = None, stop: Optional[int] = None):
    """
    Reverses arr in place, or only the half-open range [start, stop).

    Both bounds default to the full array. Bounds outside [0, len(arr)]
    or start > stop raise InvalidArgument before anything is written.
    """
    check_array(arr)
    start = 0 if start is None else start
    stop = arr.size if stop is None else stop
    start, stop = check_range(arr, start, stop)
    if stop - start < 2:
        return
    logger.debug("Reversing [%d, %d) of %s array of length %d", start, stop, arr.dtype, arr.size)
    reverse_kernel(arr, start, stop)
