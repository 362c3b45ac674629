import logging

import numpy as np
from numba import njit

from arrays_support.errors import InvalidArgument, RangeOverflow
from arrays_support.min_max.scan import min_max
from arrays_support.validation import BOOL_DTYPE, SIGNED_INT_DTYPES, check_array

logger = logging.getLogger(__name__)

MAX_MAP_SIZE = np.iinfo(np.intp).max


# --- Numba kernels, compiled once per element dtype ---
@njit(cache=True)
def counting_sort_kernel(arr: np.ndarray, lo: int, map_size: int):
    counts = np.zeros(map_size, dtype=np.intp)

    # Elements are widened to int64 before shifting so int8/int16 never wrap
    for i in range(arr.size):
        counts[np.int64(arr[i]) - lo] += 1

    out_pos = 0
    for slot in range(map_size):
        c = counts[slot]
        if c == 0:
            continue
        value = lo + slot
        for _ in range(c):
            arr[out_pos] = value
            out_pos += 1


@njit(cache=True)
def bool_counting_sort_kernel(arr: np.ndarray):
    num_true = 0
    for i in range(arr.size):
        if arr[i]:
            num_true += 1

    num_false = arr.size - num_true
    for i in range(num_false):
        arr[i] = False
    for i in range(num_false, arr.size):
        arr[i] = True


def frequency_map_bounds(lo, hi):
    """
    Returns (base, size) of the frequency map for values in [lo, hi].

    Slot 0 holds the count of `lo`. The span is computed with Python ints so
    that int64 extremes cannot wrap; a span no index type can address raises
    RangeOverflow.
    """
    lo = int(lo)
    hi = int(hi)
    size = hi - lo + 1
    if size > MAX_MAP_SIZE:
        raise RangeOverflow(f"Value span [{lo}, {hi}] needs {size:,} frequency slots.")
    return lo, size


def counting_sort(arr: np.ndarray):
    """
    Sorts a signed integer (int8/int16/int32/int64) or boolean array in place.

    O(n + k) time and O(k) extra memory where k = max - min + 1 (k = 2 for
    booleans). A wide value span means a large frequency map; that is the
    price of the algorithm, not an error.
    """
    check_array(arr)
    if arr.dtype != BOOL_DTYPE and arr.dtype not in SIGNED_INT_DTYPES:
        raise InvalidArgument(f"Counting sort supports signed integers and booleans, got {arr.dtype}.")
    if arr.size < 2:
        return

    if arr.dtype == BOOL_DTYPE:
        bool_counting_sort_kernel(arr)
        return

    lo, hi = min_max(arr)
    base, map_size = frequency_map_bounds(lo, hi)
    logger.debug("Counting sort of %d %s elements, map of %d slots from %d", arr.size, arr.dtype, map_size, base)
    counting_sort_kernel(arr, base, map_size)
