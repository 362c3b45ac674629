import os
import time
import traceback

import numpy as np

from constants.params import RANDOM_SEED
from constants.string_constants import DATE_FORMAT, RESULT_CSV_HEADER
from performance_profiling.utils import generate_benchmark_array, write_result_header


def warm_up(impl_config, dtype_name):
    """Triggers Numba compilation for the dtype before anything is timed."""
    dummy = generate_benchmark_array(1000, dtype_name, RANDOM_SEED - 1)
    for config_item in impl_config.values():
        if not config_item.get("needs_warmup"):
            continue
        try:
            config_item["func"](dummy.copy())
            print(f"  {config_item['name_print']} warm-up complete.")
        except Exception as e_warmup:
            print(f"  Warning: {config_item['name_print']} warm-up failed: {e_warmup}")


def profile_and_save_stats(
        label: str,
        output_dir: str,
        impl_config: dict,
        array_size: int,
        total_runs: int,
        dtype_name: str,
        expected_fn,
        run_warmup: bool = True
):
    """
    Times every implementation in impl_config on fresh seeded arrays.

    Each entry of impl_config needs "file_suffix", "func" (mutates its
    argument in place) and "name_print". expected_fn maps the original array
    to the result every implementation must produce. One CSV per
    implementation is written under output_dir.
    """
    size_str = f"S{array_size}"
    print(f"\nInfo: Profiling {label} for configuration: {size_str} (Size: {array_size:,})")
    print(f"Parameters: Runs={total_runs}, Data Type={dtype_name}")

    os.makedirs(output_dir, exist_ok=True)
    file_handles = {}

    try:
        for key, config_item in impl_config.items():
            path = os.path.join(output_dir, config_item["file_suffix"])
            file_handles[key] = open(path, 'w')
            write_result_header(file_handles[key])
            file_handles[key].write(RESULT_CSV_HEADER)

        if run_warmup:
            warm_up(impl_config, dtype_name)

        for run_number in range(1, total_runs + 1):
            print(f"  Starting Run {run_number}/{total_runs} for {size_str}...")
            arr_original = generate_benchmark_array(array_size, dtype_name, RANDOM_SEED + run_number)
            expected = expected_fn(arr_original)

            for impl_key, config_item in impl_config.items():
                impl_name_print = config_item["name_print"]
                arr_input = arr_original.copy()
                exec_time = float('inf')
                melements_per_sec = 0.0

                try:
                    start_time = time.perf_counter()
                    config_item["func"](arr_input)
                    exec_time = time.perf_counter() - start_time

                    if not np.array_equal(arr_input, expected):
                        print(f"      Verification FAILED for {impl_name_print} on run {run_number}.")

                    if exec_time > 0:
                        melements_per_sec = array_size / exec_time / 1e6

                    timestamp = time.strftime(DATE_FORMAT)
                    file_handles[impl_key].write(
                        f"{run_number},{timestamp},{exec_time:.6f},{array_size},{melements_per_sec:.2f}\n")
                    print(
                        f"      {impl_name_print} Run {run_number}: {exec_time:.6f}s, "
                        f"MElements/s: {melements_per_sec:.2f}")

                except Exception as e:
                    print(f"      Error during {impl_name_print} profiling for run {run_number}: {e}")
                    traceback.print_exc()
                    timestamp = time.strftime(DATE_FORMAT)
                    file_handles[impl_key].write(f"{run_number},{timestamp},inf,{array_size},0.0\n")
        print(f"  Finished all runs for {size_str}.")

    except IOError as e_io:
        print(f"Error writing results for {size_str}: {e_io}")
    finally:
        for fh_name, fh in file_handles.items():
            if fh and not fh.closed:
                fh.close()
