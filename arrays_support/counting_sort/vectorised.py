import numpy as np

from arrays_support.counting_sort.numba_accelerated import frequency_map_bounds
from arrays_support.errors import InvalidArgument
from arrays_support.min_max.scan import min_max
from arrays_support.validation import BOOL_DTYPE, SIGNED_INT_DTYPES, check_array


def counting_sort_vectorised(arr: np.ndarray):
    """Same contract as counting_sort, built from np.bincount and np.repeat instead of a JIT loop."""
    check_array(arr)
    if arr.dtype != BOOL_DTYPE and arr.dtype not in SIGNED_INT_DTYPES:
        raise InvalidArgument(f"Counting sort supports signed integers and booleans, got {arr.dtype}.")
    n = arr.size
    if n < 2:
        return

    if arr.dtype == BOOL_DTYPE:
        num_false = n - int(np.count_nonzero(arr))
        arr[:num_false] = False
        arr[num_false:] = True
        return

    lo, hi = min_max(arr)
    base, map_size = frequency_map_bounds(lo, hi)

    shifted = arr.astype(np.int64) - np.int64(base)
    counts = np.bincount(shifted, minlength=map_size)
    values = np.arange(map_size, dtype=np.int64) + np.int64(base)
    arr[:] = np.repeat(values, counts)
