import numpy as np

RANDOM_SEED = 42


def generate_array(size, dtype=np.int32, low=None, high=None, seed=RANDOM_SEED):
    """
    Seeded random integers in [low, high) of the given dtype.

    Bounds default to the full representable range of dtype.
    """
    info = np.iinfo(dtype)
    low = info.min if low is None else low
    high = info.max + 1 if high is None else high
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=size, dtype=dtype)


def generate_bool_array(size, seed=RANDOM_SEED):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 2, size=size, dtype=np.int8).astype(np.bool_)
