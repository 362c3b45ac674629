import logging

import numpy as np
from numba import njit

from arrays_support.primitives.in_place import reverse_kernel
from arrays_support.validation import check_array, check_integer

logger = logging.getLogger(__name__)


@njit(cache=True)
def rotate_kernel(arr: np.ndarray, mid: int):
    n = arr.size
    reverse_kernel(arr, 0, mid)
    reverse_kernel(arr, mid, n)
    reverse_kernel(arr, 0, n)


def split_point(n, distance):
    """Maps any signed distance onto the split index in [0, n) used by rotate."""
    # Python's % already lands in [0, n) for positive n
    return (-int(distance)) % n


def rotate(arr: np.ndarray, distance: int):
    """
    Cyclically shifts arr in place by distance positions, O(n) time and O(1) memory.

    Positive distances rotate right: [1, 2, 3, 4, 5] by 2 gives [4, 5, 1, 2, 3].
    Negative distances rotate left and any magnitude is reduced modulo len(arr).
    """
    distance = check_integer(distance, "distance")
    check_array(arr)
    n = arr.size
    if n <= 1:
        return
    mid = split_point(n, distance)
    if mid == 0:
        return
    logger.debug("Rotating %s array of length %d by %d (split at %d)", arr.dtype, n, distance, mid)
    rotate_kernel(arr, mid)
