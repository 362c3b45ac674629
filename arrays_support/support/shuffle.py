import numpy as np
from numba import njit

from arrays_support.primitives.in_place import swap_kernel
from arrays_support.validation import check_array


@njit(cache=True)
def fisher_yates_kernel(arr: np.ndarray, picks: np.ndarray):
    for i in range(arr.size - 1, 0, -1):
        j = picks[i]
        if j != i:
            swap_kernel(arr, i, j)


def shuffle(arr: np.ndarray, seed=None):
    """
    Uniformly permutes arr in place (Fisher-Yates).

    seed may be None, an int or a numpy.random.Generator.
    """
    check_array(arr)
    n = arr.size
    if n < 2:
        return
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    # picks[i] is drawn from [0, i]
    picks = rng.integers(0, np.arange(1, n + 1), dtype=np.int64)
    fisher_yates_kernel(arr, picks)
