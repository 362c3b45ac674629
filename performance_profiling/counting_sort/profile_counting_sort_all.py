import os
import argparse

import numpy as np

from arrays_support.counting_sort.numba_accelerated import counting_sort
from arrays_support.counting_sort.vectorised import counting_sort_vectorised
from constants.params import DEFAULT_DTYPE, RUNS, SUPPORTED_DTYPES
from constants.string_constants import COUNTING_SORT_PATH, RESULTS_BASE_PATH
from performance_profiling.runner import profile_and_save_stats
from performance_profiling.utils import get_cpu_cores, get_cpu_info


def numpy_sort(arr):
    arr.sort()


IMPL_CONFIG = {
    "counting_sort_numba": {
        "file_suffix": 'cpu_numba_stats.txt',
        "func": counting_sort,
        "name_print": "CPU Counting Sort (Numba)",
        "needs_warmup": True
    },
    "counting_sort_vectorised": {
        "file_suffix": 'cpu_vectorised_stats.txt',
        "func": counting_sort_vectorised,
        "name_print": "CPU Counting Sort (NumPy vectorised)",
        "needs_warmup": False
    },
    "numpy_sort": {
        "file_suffix": 'cpu_numpy_sort_stats.txt',
        "func": numpy_sort,
        "name_print": "CPU NumPy sort",
        "needs_warmup": False
    }
}


def run_counting_sort_benchmark(size: int, runs: int, dtype_name: str = DEFAULT_DTYPE, warmup: bool = True):
    print(f"CPU Info: {get_cpu_info()}")
    print(f"CPU Cores: {get_cpu_cores()}")

    output_dir = os.path.join(RESULTS_BASE_PATH, COUNTING_SORT_PATH, dtype_name, str(size))
    profile_and_save_stats(
        label="Counting Sort",
        output_dir=output_dir,
        impl_config=IMPL_CONFIG,
        array_size=size,
        total_runs=runs,
        dtype_name=dtype_name,
        expected_fn=np.sort,
        run_warmup=warmup
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Profiler for Counting Sort implementations.")
    parser.add_argument("--size", type=int, default=1000000, help="Number of elements in the array to sort.")
    parser.add_argument("--runs", type=int, default=RUNS, help="Number of times to run each benchmark.")
    parser.add_argument("--dtype", choices=SUPPORTED_DTYPES, default=DEFAULT_DTYPE, help="Element type of the array.")
    parser.add_argument(
        "--no_numba_warmup",
        action="store_true",
        help="If set, the first timed run includes Numba compilation time."
    )
    args = parser.parse_args()

    run_counting_sort_benchmark(args.size, args.runs, args.dtype, warmup=not args.no_numba_warmup)
    print("\nCounting Sort profiling complete. Results saved to respective files.")
