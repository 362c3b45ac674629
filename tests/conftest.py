"""Shared pytest fixtures for the arrays_support tests."""

import numpy as np
import pytest

SIGNED_DTYPES = [np.int8, np.int16, np.int32, np.int64]


@pytest.fixture(params=SIGNED_DTYPES, ids=lambda dt: np.dtype(dt).name)
def signed_dtype(request):
    return request.param


@pytest.fixture
def rng():
    return np.random.default_rng(42)
