import os
import time
import argparse

from constants.params import RUNS, SMALL_ARRAY_LENGTH, MID_ARRAY_LENGTH, BIG_ARRAY_LENGTH, \
    SUPPORTED_DTYPES, ROTATION_DISTANCE
from constants.string_constants import RESULTS_BASE_PATH
from performance_profiling.counting_sort.profile_counting_sort_all import run_counting_sort_benchmark
from performance_profiling.rotation.profile_rotation_all import run_rotation_benchmark
from performance_profiling.utils import get_cpu_info, get_cpu_cores, get_ram_info, get_formatted_elapsed_time
from plotter import generate_all_plots


def run_counting_sort_suite(size, dtypes, runs=RUNS):
    for dtype_name in dtypes:
        print(f"--- Counting Sort Suite: Size {size}, DType {dtype_name}, Runs {runs} ---")
        run_counting_sort_benchmark(size=size, runs=runs, dtype_name=dtype_name)


def run_rotation_suite(size, dtypes, runs=RUNS):
    for dtype_name in dtypes:
        print(f"--- Rotation Suite: Size {size}, DType {dtype_name}, Runs {runs} ---")
        run_rotation_benchmark(size=size, runs=runs, dtype_name=dtype_name, distance=ROTATION_DISTANCE)


if __name__ == "__main__":
    main_parser = argparse.ArgumentParser(description="Main benchmark runner script.")
    main_parser.add_argument("--runs", type=int, default=RUNS, help="Number of runs per implementation.")
    main_parser.add_argument(
        "--dtypes",
        nargs="+",
        choices=SUPPORTED_DTYPES,
        default=list(SUPPORTED_DTYPES),
        help="Element types to benchmark."
    )
    main_parser.add_argument("--skip_big", action="store_true", help="If set, skips the BIG array length.")
    main_parser.add_argument("--no_plots", action="store_true", help="If set, plots are not generated at the end.")
    main_args = main_parser.parse_args()

    startTime = time.time()
    os.makedirs(RESULTS_BASE_PATH, exist_ok=True)
    file_path = os.path.join(RESULTS_BASE_PATH, "system_info.txt")

    try:
        with open(file_path, "w") as f:
            f.write(f"[System Info]\nCPU: {get_cpu_info()}\nCores: {get_cpu_cores()}\nRAM: {get_ram_info()}\n")
        print(f"System info successfully written to {file_path}")
    except IOError as e:
        print(f"Error writing system info to {file_path}: {e}")

    sizes = [("SMALL", SMALL_ARRAY_LENGTH), ("MID", MID_ARRAY_LENGTH)]
    if not main_args.skip_big:
        sizes.append(("BIG", BIG_ARRAY_LENGTH))

    for size_label, size in sizes:
        print(f"\nElapsed time: {get_formatted_elapsed_time(startTime)}")
        print(f"Running {size_label} Counting Sort tests...")
        run_counting_sort_suite(size, main_args.dtypes, runs=main_args.runs)

    for size_label, size in sizes:
        print(f"\nElapsed time: {get_formatted_elapsed_time(startTime)}")
        print(f"Running {size_label} Rotation tests...")
        run_rotation_suite(size, main_args.dtypes, runs=main_args.runs)

    if not main_args.no_plots:
        print("\nGenerating plots...")
        generate_all_plots()

    print(f"\nTotal benchmarking time: {get_formatted_elapsed_time(startTime)}")
