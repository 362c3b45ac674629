import numpy as np

from arrays_support.errors import InvalidArgument

SIGNED_INT_DTYPES = (np.dtype(np.int8), np.dtype(np.int16), np.dtype(np.int32), np.dtype(np.int64))
BOOL_DTYPE = np.dtype(np.bool_)


def check_array(arr, writeable=True):
    """Raises InvalidArgument unless arr is a usable 1-D numeric or boolean ndarray."""
    if arr is None:
        raise InvalidArgument("Input array must not be None.")
    if not isinstance(arr, np.ndarray):
        raise InvalidArgument("Input must be a NumPy array.")
    if arr.ndim != 1:
        raise InvalidArgument(f"Input must be one-dimensional, got {arr.ndim} dimensions.")
    if arr.dtype.kind not in "biuf":
        raise InvalidArgument(f"Unsupported dtype {arr.dtype}.")
    if writeable and not arr.flags.writeable:
        raise InvalidArgument("Input array is read-only.")


def check_integer(value, name):
    """Raises InvalidArgument unless value is a Python or NumPy integer (bools excluded)."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}.")
    return int(value)


def check_index(arr, index, name="index"):
    n = arr.size
    index = check_integer(index, name)
    if not 0 <= index < n:
        raise InvalidArgument(f"{name} {index} out of bounds for length {n}.")
    return index


def check_range(arr, start, stop):
    n = arr.size
    start = check_integer(start, "'from'")
    stop = check_integer(stop, "'to'")
    if not 0 <= start <= stop <= n:
        raise InvalidArgument(f"Invalid range [{start}, {stop}) for length {n}.")
    return start, stop
