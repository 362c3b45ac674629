import numpy as np

from arrays_support.validation import check_array


def first_index_of(arr: np.ndarray, target):
    """Index of the first element equal to target, or -1 if there is none."""
    check_array(arr, writeable=False)
    hits = np.flatnonzero(arr == target)
    return int(hits[0]) if hits.size else -1


def last_index_of(arr: np.ndarray, target):
    """Index of the last element equal to target, or -1 if there is none."""
    check_array(arr, writeable=False)
    hits = np.flatnonzero(arr == target)
    return int(hits[-1]) if hits.size else -1


index_of = first_index_of


def contains(arr: np.ndarray, target):
    return first_index_of(arr, target) != -1


def frequency(arr: np.ndarray, target):
    """Number of elements equal to target."""
    check_array(arr, writeable=False)
    return int(np.count_nonzero(arr == target))
