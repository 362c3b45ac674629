import numpy as np

from arrays_support.validation import check_array


def union(a: np.ndarray, b: np.ndarray):
    """Distinct values present in a or b, ascending, as a new array."""
    check_array(a, writeable=False)
    check_array(b, writeable=False)
    return np.union1d(a, b)


def intersection(a: np.ndarray, b: np.ndarray):
    """Distinct values present in both a and b, ascending, as a new array."""
    check_array(a, writeable=False)
    check_array(b, writeable=False)
    return np.intersect1d(a, b)


def disjoint(a: np.ndarray, b: np.ndarray):
    """True when a and b share no value."""
    check_array(a, writeable=False)
    check_array(b, writeable=False)
    if a.size == 0 or b.size == 0:
        return True
    # Hash the smaller side
    small, large = (a, b) if a.size <= b.size else (b, a)
    return not np.isin(large, small).any()
