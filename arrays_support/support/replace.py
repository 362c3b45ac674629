import numpy as np

from arrays_support.validation import check_array


def replace_all(arr: np.ndarray, old, new):
    """Overwrites every element equal to old with new, in place. Returns how many were replaced."""
    check_array(arr)
    mask = arr == old
    replaced = int(np.count_nonzero(mask))
    if replaced:
        arr[mask] = new
    return replaced
