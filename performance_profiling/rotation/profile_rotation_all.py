import os
import argparse
from functools import partial

import numpy as np

from arrays_support.rotation.triple_reversal import rotate
from constants.params import DEFAULT_DTYPE, ROTATION_DISTANCE, RUNS, SUPPORTED_DTYPES
from constants.string_constants import RESULTS_BASE_PATH, ROTATION_PATH
from performance_profiling.runner import profile_and_save_stats


def numpy_roll(arr, distance):
    # np.roll allocates a copy, write it back to keep the in-place contract
    arr[:] = np.roll(arr, distance)


def build_impl_config(distance):
    return {
        "triple_reversal_numba": {
            "file_suffix": 'cpu_numba_stats.txt',
            "func": partial(rotate, distance=distance),
            "name_print": "CPU Triple-Reversal Rotate (Numba)",
            "needs_warmup": True
        },
        "numpy_roll": {
            "file_suffix": 'cpu_numpy_roll_stats.txt',
            "func": partial(numpy_roll, distance=distance),
            "name_print": "CPU NumPy roll",
            "needs_warmup": False
        }
    }


def run_rotation_benchmark(size: int, runs: int, dtype_name: str = DEFAULT_DTYPE,
                           distance: int = ROTATION_DISTANCE, warmup: bool = True):
    output_dir = os.path.join(RESULTS_BASE_PATH, ROTATION_PATH, dtype_name, str(size))
    profile_and_save_stats(
        label=f"Rotation (distance {distance})",
        output_dir=output_dir,
        impl_config=build_impl_config(distance),
        array_size=size,
        total_runs=runs,
        dtype_name=dtype_name,
        expected_fn=partial(np.roll, shift=distance),
        run_warmup=warmup
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Profiler for in-place rotation.")
    parser.add_argument("--size", type=int, default=1000000, help="Number of elements in the array to rotate.")
    parser.add_argument("--runs", type=int, default=RUNS, help="Number of times to run each benchmark.")
    parser.add_argument("--dtype", choices=SUPPORTED_DTYPES, default=DEFAULT_DTYPE, help="Element type of the array.")
    parser.add_argument("--distance", type=int, default=ROTATION_DISTANCE, help="Signed rotation distance.")
    parser.add_argument(
        "--no_numba_warmup",
        action="store_true",
        help="If set, the first timed run includes Numba compilation time."
    )
    args = parser.parse_args()

    run_rotation_benchmark(args.size, args.runs, args.dtype, args.distance, warmup=not args.no_numba_warmup)
    print("\nRotation profiling complete. Results saved to respective files.")
